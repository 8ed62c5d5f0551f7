"""GitHub events client, response validation and typed event models."""

from __future__ import annotations

from .client import GitHubEventsClient
from .models import Event, EventType
from .validation import decode_feed_body, parse_event_feed

__all__ = [
    "Event",
    "EventType",
    "GitHubEventsClient",
    "decode_feed_body",
    "parse_event_feed",
]
