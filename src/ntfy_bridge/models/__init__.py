"""Pydantic models for alerts, mappings and notifications."""
