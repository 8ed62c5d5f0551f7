"""Error taxonomy for the activity shell.

Every failure inside one prompt iteration is an :class:`ActivityError`. The
shell prints the message and moves on to the next prompt, so the message text
is what the user sees.
"""

from __future__ import annotations

# Body preview length for parse error messages
_CONTENT_PREVIEW_LIMIT = 100


class ActivityError(Exception):
    """Base exception for all errors reported by the activity shell."""


class FetchError(ActivityError):
    """Raised when the events request fails at the transport level."""

    @classmethod
    def transport(cls, detail: str) -> FetchError:
        """Return an error wrapping a transport failure message."""
        return cls(f"Fetch Error: {detail}")


class ParseError(ActivityError):
    """Raised when the response body is not valid structured data."""

    @classmethod
    def invalid_json(cls, detail: str, content: str) -> ParseError:
        """Return an error for a body that failed to decode as JSON.

        Parameters
        ----------
        detail
            Decoder message describing the failure.
        content
            The body that failed to parse.

        Returns
        -------
        ParseError
            Error with a truncated preview of the body.

        """
        if len(content) > _CONTENT_PREVIEW_LIMIT:
            preview = content[:_CONTENT_PREVIEW_LIMIT] + "..."
        else:
            preview = content
        return cls(f"Parse Error: {detail} (body: {preview!r})")


class EventShapeError(ParseError):
    """Raised when an event record lacks a field or holds the wrong type."""

    @classmethod
    def invalid(cls, detail: str) -> EventShapeError:
        """Return an error carrying the validation message."""
        return cls(
            "Parse Error: event is missing expected field or has wrong type: "
            f"{detail}"
        )

    @classmethod
    def unexpected_feed(cls, kind: str) -> EventShapeError:
        """Return an error for a response that is not a list of events."""
        return cls.invalid(f"expected a list of events, got {kind}")


class NoUserFoundError(ActivityError):
    """Raised when the API reports that the user does not exist."""

    @classmethod
    def not_found(cls) -> NoUserFoundError:
        """Return the user-not-found error."""
        return cls("No user found")


class NoEventsError(ActivityError):
    """Raised when the user exists but has no public events."""

    def __init__(self, message: str, *, username: str) -> None:
        """Initialise with a message and the username that was queried."""
        self.username = username
        super().__init__(message)

    @classmethod
    def for_user(cls, username: str) -> NoEventsError:
        """Return the empty-feed error for ``username``."""
        return cls(f"No events found for {username}", username=username)


class NoArgumentsError(ActivityError):
    """Raised when the prompt receives an empty line."""

    @classmethod
    def empty_input(cls) -> NoArgumentsError:
        """Return the empty-input error."""
        return cls("No input provided")


class UnrecognizedEventTypeError(ActivityError):
    """Raised when an event carries a discriminant outside ``EventType``."""

    def __init__(self, message: str, *, event_type: object) -> None:
        """Initialise with a message and the offending discriminant."""
        self.event_type = event_type
        super().__init__(message)

    @classmethod
    def unchecked(cls, event_type: object) -> UnrecognizedEventTypeError:
        """Return an error naming the unrecognised discriminant."""
        return cls(f"Unchecked event type: {event_type}", event_type=event_type)


class ConsoleIOError(ActivityError):
    """Raised when reading from the console fails."""

    @classmethod
    def read_failed(cls, detail: str) -> ConsoleIOError:
        """Return an error wrapping the console failure message."""
        return cls(f"Console IO Error: {detail}")


class ApiMessageError(ActivityError):
    """Raised when the API answers with an error object instead of events.

    ``{"message": "Not Found"}`` is reported as :class:`NoUserFoundError`;
    any other message (rate limiting, abuse detection) lands here.
    """

    def __init__(self, message: str, *, api_message: str) -> None:
        """Initialise with a message and the raw API message."""
        self.api_message = api_message
        super().__init__(message)

    @classmethod
    def from_api(cls, api_message: str) -> ApiMessageError:
        """Return an error carrying the API's ``message`` field."""
        return cls(f"GitHub API error: {api_message}", api_message=api_message)


class ActivityConfigError(Exception):
    """Raised when gh-activity configuration is invalid.

    Configuration is read once before the shell starts, so this sits outside
    :class:`ActivityError` and ends the process.
    """

    @classmethod
    def invalid_timeout(cls, value: str) -> ActivityConfigError:
        """Return an error for an unparseable or non-positive timeout."""
        return cls(
            f"Invalid GH_ACTIVITY_TIMEOUT_S '{value}'. Must be a positive number"
        )

    @classmethod
    def empty_value(cls, variable: str) -> ActivityConfigError:
        """Return an error for a variable that is set but blank."""
        return cls(f"{variable} must be non-empty when set")
