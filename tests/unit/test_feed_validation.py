"""Unit tests for events response validation."""

from __future__ import annotations

import msgspec
import pytest

from gh_activity.errors import (
    ApiMessageError,
    EventShapeError,
    NoEventsError,
    NoUserFoundError,
    ParseError,
)
from gh_activity.github.validation import decode_feed_body, parse_event_feed
from tests.helpers import github_events as ev

_RATE_LIMIT_MESSAGE = "API rate limit exceeded for 203.0.113.7."


def test_parse_event_feed_returns_records_in_order() -> None:
    """A non-empty array is returned untouched."""
    events = [
        ev.watch_event("alice", "acme/widgets"),
        ev.public_event("alice", "acme/gadgets"),
    ]

    parsed = parse_event_feed(msgspec.json.encode(events).decode(), "alice")

    assert parsed == events


def test_not_found_message_raises_no_user_found() -> None:
    """The API's not-found object maps to NoUserFoundError."""
    body = '{"message": "Not Found", "documentation_url": "https://docs.github.com"}'

    with pytest.raises(NoUserFoundError, match="No user found"):
        parse_event_feed(body, "ghost")


def test_empty_array_raises_no_events_for_user() -> None:
    """An empty feed names the user in the error."""
    with pytest.raises(NoEventsError) as exc:
        parse_event_feed("[]", "quiet-user")

    assert exc.value.username == "quiet-user"
    assert str(exc.value) == "No events found for quiet-user"


def test_other_api_message_raises_api_message_error() -> None:
    """Error objects other than not-found are reported with their message."""
    body = msgspec.json.encode({"message": _RATE_LIMIT_MESSAGE}).decode()

    with pytest.raises(ApiMessageError) as exc:
        parse_event_feed(body, "alice")

    assert exc.value.api_message == _RATE_LIMIT_MESSAGE
    assert _RATE_LIMIT_MESSAGE in str(exc.value)


@pytest.mark.parametrize(
    ("body", "kind"),
    [
        ('{"unexpected": true}', "object"),
        ('"just text"', "str"),
        ("42", "int"),
        ("null", "NoneType"),
    ],
)
def test_non_array_body_raises_shape_error(body: str, kind: str) -> None:
    """Bodies that are neither arrays nor error messages are shape errors."""
    with pytest.raises(EventShapeError, match=f"got {kind}"):
        parse_event_feed(body, "alice")


@pytest.mark.parametrize("body", ["", "<html>rate limited</html>", "[{]"])
def test_invalid_json_raises_parse_error(body: str) -> None:
    """Malformed bodies raise ParseError rather than decoder errors."""
    with pytest.raises(ParseError, match="Parse Error"):
        decode_feed_body(body)


def test_parse_error_truncates_long_bodies() -> None:
    """Large bodies are previewed, not echoed in full."""
    body = "x" * 500

    with pytest.raises(ParseError) as exc:
        decode_feed_body(body)

    assert "..." in str(exc.value)
    assert body not in str(exc.value)
