import logging
from typing import Any, Dict, Optional

import httpx

from gh_unfurl.core.config import settings
from gh_unfurl.core.errors import SummarizerNotFoundError, UpstreamError

logger = logging.getLogger(__name__)

NOT_FOUND_STATUSES = (404, 410)


def extract_error_message(response: httpx.Response) -> Optional[str]:
    """
    Pull the human-readable message out of a GitHub error response.

    GitHub answers failed API calls with a JSON object such as
    ``{"message": "Not Found", "documentation_url": "..."}``. Anything
    else (HEAD responses, HTML error pages, JSON arrays) has no message.
    """
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return None


class GitHubClient:
    """
    Thin async client for the GitHub REST API.

    Every remote failure is converted here into a SummarizerNotFoundError
    (resource missing) or an UpstreamError (anything else), so callers
    never inspect httpx exceptions or response bodies themselves.
    No retries are performed.
    """

    def __init__(
        self,
        http: Optional[httpx.AsyncClient] = None,
        api_base: Optional[str] = None,
        token: Optional[str] = None,
    ):
        self.api_base = (api_base or settings.GITHUB_API_BASE).rstrip("/")
        self._token = token if token is not None else settings.GITHUB_TOKEN
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.REQUEST_TIMEOUT_SECONDS),
            follow_redirects=True,
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": settings.USER_AGENT,
        }
        if self._token:
            headers["Authorization"] = f"token {self._token}"
        return headers

    def api_url(self, path: str) -> str:
        return f"{self.api_base}{path}"

    async def _request(self, method: str, url: str) -> httpx.Response:
        logger.debug(f"{method} {url}")
        try:
            # Renamed and transferred repositories answer with a 301 to /repositories/<id>
            response = await self._http.request(
                method, url, headers=self._headers(), follow_redirects=True
            )
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout on {method} {url}: {e}")
            raise UpstreamError(url, "Request timed out") from e
        except httpx.RequestError as e:
            logger.warning(f"Network error on {method} {url}: {e}")
            raise UpstreamError(url, str(e) or None) from e

        if response.status_code in NOT_FOUND_STATUSES:
            logger.info(f"{method} {url} returned {response.status_code}")
            raise SummarizerNotFoundError(url, extract_error_message(response))

        if not response.is_success:
            message = extract_error_message(response)
            logger.warning(f"{method} {url} failed with HTTP {response.status_code}: {message}")
            raise UpstreamError(url, message, status_code=response.status_code)

        return response

    async def get_json(self, path: str) -> Any:
        """GET an API path and return the decoded JSON body."""
        url = self.api_url(path)
        response = await self._request("GET", url)
        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Malformed JSON from {url}: {e}")
            raise UpstreamError(url, "Malformed JSON response", status_code=response.status_code) from e

    async def exists(self, path: str) -> None:
        """HEAD an API path; returns quietly on 2xx and raises otherwise."""
        await self._request("HEAD", self.api_url(path))

    async def get_page(self, url: str) -> httpx.Response:
        """GET an absolute URL (not necessarily on the API host)."""
        return await self._request("GET", url)

    async def close(self) -> None:
        if self._owns_http:
            await self._http.aclose()
            logger.debug("HTTP client closed")
