"""Interpretation of raw event feed responses."""

from __future__ import annotations

import typing as typ

import msgspec

from gh_activity.errors import (
    ApiMessageError,
    EventShapeError,
    NoEventsError,
    NoUserFoundError,
    ParseError,
)
from gh_activity.logging import get_logger, log_debug

logger = get_logger(__name__)

_NOT_FOUND_MESSAGE = "Not Found"


def decode_feed_body(text: str) -> object:
    """Decode ``text`` as JSON without imposing a schema.

    Raises
    ------
    ParseError
        If the text is not valid JSON.

    """
    try:
        return msgspec.json.decode(text)
    except msgspec.DecodeError as exc:
        raise ParseError.invalid_json(str(exc), text) from exc


def _check_error_object(body: dict[str, typ.Any]) -> typ.NoReturn:
    message = body.get("message")
    if message == _NOT_FOUND_MESSAGE:
        raise NoUserFoundError.not_found()
    if isinstance(message, str):
        raise ApiMessageError.from_api(message)
    raise EventShapeError.unexpected_feed("object")


def parse_event_feed(text: str, username: str) -> list[dict[str, typ.Any]]:
    """Validate an events response and return the raw event records.

    Parameters
    ----------
    text
        Response body returned by the events endpoint.
    username
        User the feed was requested for, used in the empty-feed message.

    Returns
    -------
    list[dict[str, Any]]
        Event records in feed order, still untyped.

    Raises
    ------
    ParseError
        If the body is not valid JSON.
    NoUserFoundError
        If the API answered ``{"message": "Not Found"}``.
    NoEventsError
        If the feed is an empty list.
    ApiMessageError
        If the API answered with any other error message.
    EventShapeError
        If the body is neither a list nor an error object.

    """
    body = decode_feed_body(text)
    match body:
        case dict():
            _check_error_object(body)
        case []:
            raise NoEventsError.for_user(username)
        case list():
            log_debug(logger, "Feed for %s holds %d events", username, len(body))
            return body
        case _:
            raise EventShapeError.unexpected_feed(type(body).__name__)
