"""Render GitHub events as human-readable sentences."""

from __future__ import annotations

import typing as typ

import msgspec

from gh_activity.errors import EventShapeError, UnrecognizedEventTypeError
from gh_activity.github.models import (
    CreateEvent,
    Event,
    EventType,
    ForkEvent,
    IssueCommentEvent,
    IssuesEvent,
    PublicEvent,
    PullRequestEvent,
    PushEvent,
    WatchEvent,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def decode_event(raw: object) -> Event:
    """Convert one raw feed record into its typed event struct.

    The discriminant is checked before the payload so an unknown ``type`` is
    reported as such rather than as a shape problem.

    Raises
    ------
    UnrecognizedEventTypeError
        If ``type`` is not an :class:`EventType`.
    EventShapeError
        If the record is not an object or a required field is missing or has
        the wrong type.

    """
    if not isinstance(raw, dict):
        kind = type(raw).__name__
        raise EventShapeError.invalid(f"expected an event object, got {kind}")

    event_type = raw.get("type")
    if event_type not in tuple(EventType):
        raise UnrecognizedEventTypeError.unchecked(event_type)

    try:
        return msgspec.convert(raw, type=Event)
    except msgspec.ValidationError as exc:
        raise EventShapeError.invalid(f"{event_type}: {exc}") from exc


def _narrate_create(event: CreateEvent) -> list[str]:
    who = event.actor.display_login
    repo = event.repo.name
    match event.payload.ref_type:
        case "repository":
            return [f"{who} created a new repository named {repo}"]
        case "branch":
            if event.payload.ref is None:
                msg = "CreateEvent: branch ref is null - at `$.payload.ref`"
                raise EventShapeError.invalid(msg)
            return [f"{who} created a new branch named {event.payload.ref} in {repo}"]
        case _:
            return [f"{who} created an unhandled ref: {event.payload!r} in {repo}"]


def _narrate_push(event: PushEvent) -> list[str]:
    who = event.actor.display_login
    repo = event.repo.name
    lines = [
        f"{who} pushed new content to {repo} with the message {commit.message}"
        for commit in event.payload.commits
    ]
    # Trailing line mirrors the PublicEvent sentence; kept as observed output.
    lines.append(f"{who} made {repo} public")
    return lines


def narrate(event: Event) -> list[str]:
    """Return the narration lines for a decoded event."""
    who = event.actor.display_login
    match event:
        case CreateEvent():
            return _narrate_create(event)
        case ForkEvent():
            return [
                f"{who} forked from {event.repo.name} to "
                f"{event.payload.forkee.full_name}"
            ]
        case IssueCommentEvent():
            return [
                f"{who} commented an issue in the repo "
                f"{event.payload.forkee.full_name} with the title "
                f"{event.payload.issue.title}"
            ]
        case IssuesEvent():
            return [
                f"{who} opened an issue in {event.repo.name} with the title "
                f"{event.payload.issue.title}"
            ]
        case PublicEvent():
            return [f"{who} made {event.repo.name} public"]
        case PullRequestEvent():
            return [
                f"{who} opened a pull request in {event.repo.name} with the title "
                f"{event.payload.pull_request.title}"
            ]
        case PushEvent():
            return _narrate_push(event)
        case WatchEvent():
            return [f"{who} is watching {event.repo.name}"]
        case _:
            typ.assert_never(event)


def iter_narration(raw_events: cabc.Iterable[object]) -> cabc.Iterator[str]:
    """Yield narration lines for ``raw_events`` in feed order.

    Lines are produced lazily: when a record fails to decode, lines already
    yielded for earlier records stand and the rest of the batch is skipped.
    """
    for raw in raw_events:
        yield from narrate(decode_event(raw))
