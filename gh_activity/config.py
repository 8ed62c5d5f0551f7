"""Configuration for the GitHub events client."""

from __future__ import annotations

import dataclasses
import math
import os

from gh_activity.errors import ActivityConfigError

# Default configuration values - single source of truth
_DEFAULT_API_URL = "https://api.github.com"
_DEFAULT_USER_AGENT = "JustNesh"


def _read_non_empty(variable: str, default: str) -> str:
    raw = os.environ.get(variable)
    if raw is None:
        return default
    value = raw.strip()
    if not value:
        raise ActivityConfigError.empty_value(variable)
    return value


@dataclasses.dataclass(frozen=True, slots=True)
class ActivityClientConfig:
    """Configuration for :class:`gh_activity.github.GitHubEventsClient`.

    Attributes
    ----------
    api_url
        Base URL of the GitHub REST API, without a trailing slash.
    user_agent
        Value sent in the ``User-Agent`` header.
    timeout_s
        Request timeout in seconds. ``None`` waits indefinitely.

    """

    api_url: str = _DEFAULT_API_URL
    user_agent: str = _DEFAULT_USER_AGENT
    timeout_s: float | None = None

    def events_url(self, username: str) -> str:
        """Return the public events URL for ``username``."""
        return f"{self.api_url}/users/{username}/events"

    @staticmethod
    def _parse_timeout_from_env() -> float | None:
        """Parse and validate the request timeout from the environment.

        Returns
        -------
        float | None
            Timeout in seconds, or ``None`` when unset.

        Raises
        ------
        ActivityConfigError
            If the value is not a finite positive number.

        """
        raw_timeout = os.environ.get("GH_ACTIVITY_TIMEOUT_S")
        if raw_timeout is None:
            return None

        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ActivityConfigError.invalid_timeout(raw_timeout) from exc

        if not math.isfinite(timeout) or timeout <= 0:
            raise ActivityConfigError.invalid_timeout(raw_timeout)

        return timeout

    @classmethod
    def from_env(cls) -> ActivityClientConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``GH_ACTIVITY_API_URL``: Optional API base URL override
        - ``GH_ACTIVITY_USER_AGENT``: Optional ``User-Agent`` override
        - ``GH_ACTIVITY_TIMEOUT_S``: Optional request timeout in seconds

        Raises
        ------
        ActivityConfigError
            If a variable is set to an invalid value.

        """
        api_url = _read_non_empty("GH_ACTIVITY_API_URL", _DEFAULT_API_URL)
        user_agent = _read_non_empty("GH_ACTIVITY_USER_AGENT", _DEFAULT_USER_AGENT)
        return cls(
            api_url=api_url.rstrip("/"),
            user_agent=user_agent,
            timeout_s=cls._parse_timeout_from_env(),
        )
