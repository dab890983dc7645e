"""Relay Alertmanager webhook batches to an ntfy server."""

__version__ = "0.3.0"
