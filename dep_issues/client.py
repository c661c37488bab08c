"""GitHub REST API client.

Usage:
    client = GitHubClient(token="ghp_xxx")
    repo   = client.get("/repos/acme/widget")
    issues = client.get_paginated("/repos/acme/widget/issues", {"state": "open"})
"""

from typing import Any

import requests

DEFAULT_API_URL = "https://api.github.com"
PAGE_SIZE = 100


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class GitHubClientError(Exception):
    """Base exception for all client errors."""


class AuthenticationError(GitHubClientError):
    """Raised on HTTP 401: invalid or expired token."""


class RateLimitError(GitHubClientError):
    """Raised on HTTP 403/429 once the API rate limit is exhausted."""


class NotFoundError(GitHubClientError):
    """Raised on HTTP 404: repository missing or private."""


class NetworkError(GitHubClientError):
    """Raised on connection timeout or unreachable server."""


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

class GitHubClient:
    """Thin wrapper around the GitHub REST API."""

    def __init__(self, url: str = DEFAULT_API_URL, token: str | None = None, timeout: int = 30) -> None:
        self.base_url = url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers["Accept"] = "application/vnd.github+json"
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    @property
    def authenticated(self) -> bool:
        return "Authorization" in self._session.headers

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Perform a single GET request and return the parsed JSON response.

        Raises:
            AuthenticationError: HTTP 401
            RateLimitError:      HTTP 403/429 with the rate limit exhausted
            NotFoundError:       HTTP 404
            GitHubClientError:   Any other non-2xx response
            NetworkError:        Timeout, connection or other transport failure
        """
        return _json(self._request(f"{self.base_url}{endpoint}", params or {}))

    def get_paginated(self, endpoint: str, params: dict[str, Any]) -> list[dict]:
        """Fetch all pages for a list endpoint and return a flat list.

        GitHub paginates with ``per_page``/``page`` and advertises the next
        page in the ``Link`` response header; we follow ``rel="next"`` until
        it disappears.
        """
        all_results: list[dict] = []
        url: str | None = f"{self.base_url}{endpoint}"
        page_params: dict[str, Any] | None = {**params, "per_page": PAGE_SIZE}

        while url:
            response = self._request(url, page_params)
            results = _json(response)
            if not isinstance(results, list):
                raise GitHubClientError(f"Expected a list from {url}, got {type(results).__name__}")
            all_results.extend(results)

            # The next link already carries every query parameter
            url = response.links.get("next", {}).get("url")
            page_params = None

        return all_results

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _request(self, url: str, params: dict[str, Any] | None) -> requests.Response:
        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
        except requests.exceptions.Timeout as exc:
            raise NetworkError(
                f"Request timed out after {self._timeout}s while contacting '{url}'"
            ) from exc
        except requests.exceptions.ConnectionError as exc:
            raise NetworkError(
                f"Unable to reach GitHub API at '{self.base_url}'"
            ) from exc
        except requests.exceptions.RequestException as exc:
            raise NetworkError(
                f"Request to '{url}' failed: {type(exc).__name__}: {exc}"
            ) from exc

        if response.status_code == 401:
            raise AuthenticationError(
                "Authentication failed: check that your token is valid and not expired."
            )
        if response.status_code in (403, 429) and _rate_limited(response):
            reset = response.headers.get("X-RateLimit-Reset", "unknown")
            raise RateLimitError(
                f"API rate limit exceeded (resets at {reset}). Set GITHUB_TOKEN to raise the limit."
            )
        if response.status_code == 404:
            raise NotFoundError(
                f"Resource not found: {url}"
            )
        if not response.ok:
            raise GitHubClientError(
                f"Unexpected response {response.status_code} from {url}: {response.text[:200]}"
            )

        return response


def _rate_limited(response: requests.Response) -> bool:
    if response.status_code == 429:
        return True
    return response.headers.get("X-RateLimit-Remaining") == "0"


def _json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise GitHubClientError(
            f"Invalid JSON from {response.url}: {response.text[:200]}"
        ) from exc
