"""Command-line entry point for the interactive GitHub activity shell."""

from __future__ import annotations

import argparse
import asyncio
import os
import sys

from gh_activity.config import ActivityClientConfig
from gh_activity.errors import ActivityConfigError
from gh_activity.github.client import GitHubEventsClient
from gh_activity.logging import (
    DEFAULT_LOG_LEVEL,
    configure_logging,
    get_logger,
    log_error,
    log_warning,
)
from gh_activity.shell import run_shell

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gh-activity",
        description="Narrate the recent public GitHub activity of users.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=(
            "Diagnostic log level (overrides GH_ACTIVITY_LOG_LEVEL, "
            f"default {DEFAULT_LOG_LEVEL})"
        ),
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Configure logging and the client, then run the prompt loop.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 when the user quits, 1 when configuration is invalid.

    """
    args = _build_parser().parse_args(argv)

    raw_level = args.log_level or os.environ.get(
        "GH_ACTIVITY_LOG_LEVEL", DEFAULT_LOG_LEVEL
    )
    normalized, invalid = configure_logging(raw_level)
    if invalid:
        log_warning(
            logger, "Invalid log level %r, falling back to %s", raw_level, normalized
        )

    try:
        config = ActivityClientConfig.from_env()
    except ActivityConfigError as exc:
        log_error(logger, "Invalid configuration: %s", exc)
        print(exc, file=sys.stderr)
        return 1

    return asyncio.run(run_shell(GitHubEventsClient(config)))


if __name__ == "__main__":
    raise SystemExit(main())
