"""Data models."""

from .record import QueueRecord, records_from_event

__all__ = ["QueueRecord", "records_from_event"]
