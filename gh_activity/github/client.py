"""HTTP client for the GitHub public events endpoint."""

from __future__ import annotations

import typing as typ

import httpx

from gh_activity.errors import FetchError
from gh_activity.logging import get_logger, log_debug, log_info

if typ.TYPE_CHECKING:
    from gh_activity.config import ActivityClientConfig

logger = get_logger(__name__)


class GitHubEventsClient:
    """Fetch the raw public event feed for a GitHub user.

    The client never inspects HTTP status codes: a 404 or rate-limit body is
    returned like any other so the validator can interpret it.

    Parameters
    ----------
    config
        Endpoint, header and timeout configuration.
    http_client
        Optional shared ``httpx.AsyncClient``. When omitted every request
        opens and closes its own client.

    """

    def __init__(
        self,
        config: ActivityClientConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client with the provided API configuration."""
        self._config = config
        self._http_client = http_client

    @property
    def config(self) -> ActivityClientConfig:
        """Return the configuration used by this client."""
        return self._config

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self._config.user_agent}

    async def fetch_events_text(self, username: str) -> str:
        """Return the response body of ``GET /users/{username}/events``.

        Parameters
        ----------
        username
            GitHub login, sent as-is.

        Returns
        -------
        str
            Raw response body text.

        Raises
        ------
        FetchError
            If the request fails at the transport level or httpx rejects the
            URL built from the username.

        """
        url = self._config.events_url(username)
        log_info(logger, "Fetching events for %s from %s", username, url)
        if self._http_client is not None:
            return await self._send(self._http_client, url)

        async with httpx.AsyncClient(timeout=self._config.timeout_s) as client:
            return await self._send(client, url)

    async def _send(self, client: httpx.AsyncClient, url: str) -> str:
        try:
            response = await client.get(url, headers=self._headers())
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise FetchError.transport(str(exc) or type(exc).__name__) from exc

        log_debug(logger, "GET %s returned HTTP %d", url, response.status_code)
        # Undecodable bytes become U+FFFD; the validator reports the result.
        return response.text
