"""Notification sinks."""

from ntfy_bridge.sinks.base import NotificationSink
from ntfy_bridge.sinks.ntfy import NtfySink

__all__ = ["NotificationSink", "NtfySink"]
