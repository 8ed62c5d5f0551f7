"""Typed structures for GitHub public events.

Each recognised event type is a ``msgspec.Struct`` tagged by the ``type``
field, so converting a raw record against :data:`Event` selects the right
payload shape. Only the fields the narration reads are required; the rest of
the documented envelope is optional.
"""

from __future__ import annotations

import datetime as dt  # noqa: TC003 - msgspec resolves annotations at runtime
import enum
import typing as typ

import msgspec


class EventType(enum.StrEnum):
    """Event discriminants the narration knows how to render."""

    CREATE = "CreateEvent"
    FORK = "ForkEvent"
    ISSUE_COMMENT = "IssueCommentEvent"
    ISSUES = "IssuesEvent"
    PUBLIC = "PublicEvent"
    PULL_REQUEST = "PullRequestEvent"
    PUSH = "PushEvent"
    WATCH = "WatchEvent"


class Actor(msgspec.Struct, kw_only=True):
    """User that triggered the event.

    Attributes
    ----------
    display_login : str
        Login as displayed by GitHub; used in every narration line.
    login, url, avatar_url, gravatar_id : str, optional
        Remaining actor fields from the API envelope.
    id : int, optional
        Numeric GitHub user id.

    """

    display_login: str
    login: str | None = None
    id: int | None = None
    gravatar_id: str | None = None
    url: str | None = None
    avatar_url: str | None = None


class Repo(msgspec.Struct, kw_only=True):
    """Repository the event happened in, named ``owner/name``."""

    name: str
    id: int | None = None
    url: str | None = None


class Forkee(msgspec.Struct, kw_only=True):
    """Repository reference carried by fork payloads."""

    full_name: str


class IssueRef(msgspec.Struct, kw_only=True):
    """Issue summary embedded in issue payloads."""

    title: str
    number: int | None = None


class PullRequestRef(msgspec.Struct, kw_only=True):
    """Pull request summary embedded in pull request payloads."""

    title: str
    number: int | None = None


class Commit(msgspec.Struct, kw_only=True):
    """Commit listed in a push payload."""

    message: str
    sha: str | None = None


class CreatePayload(msgspec.Struct, kw_only=True):
    """Payload of ``CreateEvent``; ``ref`` is null for new repositories."""

    ref_type: str
    ref: str | None = None


class ForkPayload(msgspec.Struct, kw_only=True):
    """Payload of ``ForkEvent``."""

    forkee: Forkee


class IssueCommentPayload(msgspec.Struct, kw_only=True):
    """Payload of ``IssueCommentEvent`` as read by the narration."""

    forkee: Forkee
    issue: IssueRef


class IssuesPayload(msgspec.Struct, kw_only=True):
    """Payload of ``IssuesEvent``."""

    issue: IssueRef
    action: str | None = None


class PullRequestPayload(msgspec.Struct, kw_only=True):
    """Payload of ``PullRequestEvent``."""

    pull_request: PullRequestRef
    action: str | None = None


class PushPayload(msgspec.Struct, kw_only=True):
    """Payload of ``PushEvent``."""

    commits: list[Commit]


class _BaseEvent(msgspec.Struct, kw_only=True, tag_field="type"):
    """Envelope fields shared by every event."""

    actor: Actor
    repo: Repo
    id: str | None = None
    public: bool | None = None
    created_at: dt.datetime | None = None


class CreateEvent(_BaseEvent, kw_only=True, tag=EventType.CREATE.value):
    """A repository, branch or tag was created."""

    payload: CreatePayload


class ForkEvent(_BaseEvent, kw_only=True, tag=EventType.FORK.value):
    """A repository was forked."""

    payload: ForkPayload


class IssueCommentEvent(_BaseEvent, kw_only=True, tag=EventType.ISSUE_COMMENT.value):
    """An issue received a comment."""

    payload: IssueCommentPayload


class IssuesEvent(_BaseEvent, kw_only=True, tag=EventType.ISSUES.value):
    """An issue changed state."""

    payload: IssuesPayload


class PublicEvent(_BaseEvent, kw_only=True, tag=EventType.PUBLIC.value):
    """A private repository was made public."""

    payload: dict[str, typ.Any] = msgspec.field(default_factory=dict)


class PullRequestEvent(_BaseEvent, kw_only=True, tag=EventType.PULL_REQUEST.value):
    """A pull request changed state."""

    payload: PullRequestPayload


class PushEvent(_BaseEvent, kw_only=True, tag=EventType.PUSH.value):
    """Commits were pushed to a branch."""

    payload: PushPayload


class WatchEvent(_BaseEvent, kw_only=True, tag=EventType.WATCH.value):
    """A repository was starred."""

    payload: dict[str, typ.Any] = msgspec.field(default_factory=dict)


Event = (
    CreateEvent
    | ForkEvent
    | IssueCommentEvent
    | IssuesEvent
    | PublicEvent
    | PullRequestEvent
    | PushEvent
    | WatchEvent
)
