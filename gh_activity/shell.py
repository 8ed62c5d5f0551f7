"""Interactive prompt that narrates a user's public GitHub activity.

Each iteration reads one line, fetches the feed for the first word on it and
prints one sentence per event. Errors are printed to the error stream and the
prompt comes back; only ``q``/``quit`` (or end of input) ends the loop.
"""

from __future__ import annotations

import sys
import typing as typ

from gh_activity.errors import (
    ActivityError,
    ConsoleIOError,
    EventShapeError,
    NoArgumentsError,
)
from gh_activity.github.validation import parse_event_feed
from gh_activity.logging import get_logger, log_exception, log_info, log_warning
from gh_activity.narration import iter_narration

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from gh_activity.github.client import GitHubEventsClient

logger = get_logger(__name__)

PROMPT = "\nGithub-Activity > "
CLOSING_MESSAGE = "Goodbye!"
QUIT_COMMANDS = frozenset({"q", "quit"})


class _EndOfInput(Exception):  # noqa: N818 - control flow, not an error
    """Signal that the console has no more lines."""


def is_quit_command(line: str) -> bool:
    """Return ``True`` when ``line`` asks the shell to exit."""
    return line.strip().lower() in QUIT_COMMANDS


def parse_username(line: str) -> str:
    """Return the username from a prompt line.

    Only the first whitespace-separated token is used; later tokens are
    ignored.

    Raises
    ------
    NoArgumentsError
        If the line holds no tokens.

    """
    tokens = line.split()
    if not tokens:
        raise NoArgumentsError.empty_input()
    return tokens[0]


def _read(read_line: cabc.Callable[[str], str]) -> str:
    try:
        return read_line(PROMPT)
    except EOFError as exc:
        raise _EndOfInput from exc
    except OSError as exc:
        raise ConsoleIOError.read_failed(str(exc)) from exc


async def narrate_user(
    client: GitHubEventsClient,
    username: str,
    *,
    out: typ.TextIO,
) -> None:
    """Fetch, validate and print the event narration for ``username``.

    Raises
    ------
    ActivityError
        From any stage; lines printed before the failure stay printed.

    """
    text = await client.fetch_events_text(username)
    events = parse_event_feed(text, username)
    log_info(logger, "Narrating %d events for %s", len(events), username)
    for line in iter_narration(events):
        print(line, file=out)


async def run_shell(
    client: GitHubEventsClient,
    *,
    read_line: cabc.Callable[[str], str] | None = None,
    out: typ.TextIO | None = None,
    err: typ.TextIO | None = None,
) -> int:
    """Run the prompt loop until the user quits.

    Parameters
    ----------
    client
        Client used for every events request.
    read_line
        Callable that shows a prompt and returns one line of input. Defaults
        to :func:`input`.
    out, err
        Streams for narration and errors. Default to ``sys.stdout`` and
        ``sys.stderr``.

    Returns
    -------
    int
        Process exit status, always ``0``.

    """
    read_line = input if read_line is None else read_line
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    while True:
        try:
            # Blocking read; no other task runs while the prompt waits.
            line = _read(read_line)
            if is_quit_command(line):
                break
            await narrate_user(client, parse_username(line), out=out)
        except _EndOfInput:
            log_info(logger, "Console input closed")
            break
        except EventShapeError as exc:
            log_exception(logger, "Event data did not match its type", exc)
            print(exc, file=err)
        except ActivityError as exc:
            log_warning(logger, "%s: %s", type(exc).__name__, exc)
            print(exc, file=err)

    print(CLOSING_MESSAGE, file=out)
    return 0
