import logging
from typing import Optional, Tuple
from urllib.parse import urlsplit

from gh_unfurl.core.errors import SummarizerNotFoundError
from gh_unfurl.schemas.summary import Summary
from gh_unfurl.services.github_client import GitHubClient
from gh_unfurl.services.routes import ROUTES, Route, match_route

logger = logging.getLogger(__name__)

# Site-level fields merged into every successful summary
DECORATION = {
    "lang": "en",
    "icon": "https://assets-cdn.github.com/favicon.ico",
    "site_name": "GitHub",
}


def extract_path(url: str) -> str:
    """
    Return the path component of a GitHub URL, normalized for routing.

    Accepts scheme-less input such as ``github.com/owner/repo``. An empty
    path becomes ``/`` and a single trailing slash is dropped.
    """
    if "://" not in url and not url.startswith("/"):
        url = f"https://{url}"
    path = urlsplit(url).path or "/"
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return path


def decorate(summary: Summary) -> Summary:
    """Fill in the site decoration without overriding fetcher-provided values."""
    update = {
        key: value
        for key, value in DECORATION.items()
        if getattr(summary, key) is None
    }
    return summary.model_copy(update=update)


class GitHubSummarizer:
    """
    Dispatches GitHub URLs to the fetcher for their resource kind.

    Exactly one fetcher runs per call: the first route whose pattern
    matches wins, and its failure is final.
    """

    def __init__(
        self,
        client: Optional[GitHubClient] = None,
        routes: Tuple[Route, ...] = ROUTES,
    ):
        self.client = client or GitHubClient()
        self.routes = routes

    async def summarize(self, url: str) -> Summary:
        """
        Produce a decorated Summary for ``url``.

        Raises:
            SummarizerNotFoundError: no route matched, or the selected
                fetcher could not produce a summary (UpstreamError for
                upstream trouble).
        """
        path = extract_path(url)
        matched = match_route(path, self.routes)
        if matched is None:
            logger.info(f"No GitHub route for {url}")
            raise SummarizerNotFoundError(url)

        route, params = matched
        logger.debug(f"Routing {path} via {route.pattern}")
        summary = await route.fetcher(self.client, params)
        return decorate(summary)

    async def close(self) -> None:
        await self.client.close()


# Global service instance
_summarizer: Optional[GitHubSummarizer] = None


def get_summarizer() -> GitHubSummarizer:
    """Get the global GitHub summarizer instance."""
    global _summarizer
    if _summarizer is None:
        _summarizer = GitHubSummarizer()
    return _summarizer


async def summarize(url: str) -> Summary:
    """Summarize ``url`` with the global summarizer."""
    return await get_summarizer().summarize(url)


async def close_summarizer() -> None:
    """Close the global summarizer's HTTP client, if one was created."""
    global _summarizer
    if _summarizer is not None:
        await _summarizer.close()
        _summarizer = None
