"""
Fetchers producing a Summary for one kind of GitHub resource.

Each fetcher takes the shared GitHubClient and the parameter struct bound
from the matched path. Remote failures arrive already normalized by the
client, so fetchers only shape data.
"""
import asyncio
import logging
from typing import Any, Awaitable, List

from gh_unfurl.core.config import settings
from gh_unfurl.core.errors import SummarizerNotFoundError, UpstreamError
from gh_unfurl.schemas.summary import (
    CommitParams,
    RepositoryParams,
    RootParams,
    SubsectionParams,
    Summary,
    TagParams,
)
from gh_unfurl.services.general import summarize_page
from gh_unfurl.services.github_client import GitHubClient

logger = logging.getLogger(__name__)

SUMMARY_TYPE = "object"
DEFAULT_LOCALE = "en"

# Repository tabs that have a summary of their own
REPOSITORY_SUBSECTIONS = (
    # top-level
    "pulls", "issues", "projects", "wiki",
    # code
    "releases", "tags", "branches",
    # issues
    "milestones", "labels",
    # insights
    "pulse", "graphs/contributors", "community", "graphs/commit-activity",
    "graphs/code-frequency", "network/dependencies", "network", "members",
)


async def join(*coroutines: Awaitable[Any]) -> List[Any]:
    """
    Run coroutines concurrently and return their results in order.

    The first exception cancels whatever is still running and is
    re-raised once every task has settled; results of the other tasks
    are discarded.
    """
    tasks = [asyncio.ensure_future(coro) for coro in coroutines]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        # Settle every task so no exception is left unretrieved
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def humans_txt(client: GitHubClient, params: RootParams) -> Summary:
    return await summarize_page(client, f"{settings.GITHUB_WEB_BASE}/humans.txt", DEFAULT_LOCALE)


async def repository(client: GitHubClient, params: RepositoryParams) -> Summary:
    path = f"/repos/{params.owner}/{params.repo}"
    data = await client.get_json(path)
    try:
        title = data["full_name"]
        description = data.get("description")
        canonical = data["html_url"]
        image = data["owner"]["avatar_url"]
    except (KeyError, TypeError, AttributeError) as e:
        logger.warning(f"Unexpected repository payload for {params.owner}/{params.repo}: {e!r}")
        raise UpstreamError(client.api_url(path), "Malformed repository response") from e

    return Summary(
        title=title,
        description=(
            f"{title} - {description}"
            if description
            else f"Contribute to {title} development by creating an account on GitHub."
        ),
        canonical=canonical,
        image=image,
        type=SUMMARY_TYPE,
    )


async def tag(client: GitHubClient, params: TagParams) -> Summary:
    repo, _ = await join(
        repository(client, params),
        client.exists(f"/repos/{params.owner}/{params.repo}/git/refs/tags/{params.tag}"),
    )
    return repo.model_copy(update={"canonical": f"{repo.canonical}/releases/tag/{params.tag}"})


async def commit(client: GitHubClient, params: CommitParams) -> Summary:
    path = f"/repos/{params.owner}/{params.repo}/commits/{params.sha}"
    data, repo = await join(
        client.get_json(path),
        repository(client, params),
    )
    try:
        message = data["commit"]["message"]
        canonical = data["html_url"]
        # Commits by emails unknown to GitHub have no linked author
        author = data.get("author") or {}
    except (KeyError, TypeError, AttributeError) as e:
        logger.warning(f"Unexpected commit payload for {params.owner}/{params.repo}@{params.sha}: {e!r}")
        raise UpstreamError(client.api_url(path), "Malformed commit response") from e

    # Subject is everything before the first blank line
    title, _, body = message.partition("\n\n")
    return Summary(
        title=title,
        description=body or repo.description,
        canonical=canonical,
        image=author.get("avatar_url") or repo.image,
        type=SUMMARY_TYPE,
    )


async def repository_subsection(client: GitHubClient, params: SubsectionParams) -> Summary:
    name = params.section
    if name not in REPOSITORY_SUBSECTIONS:
        raise SummarizerNotFoundError(
            f"{settings.GITHUB_WEB_BASE}/{params.owner}/{params.repo}/{name}"
        )

    repo = await repository(client, params)
    title = repo.title
    # Only top-level tabs get a prefix; nested graphs/network pages keep the repo title
    if "/" not in name:
        title = f"{name[:1].upper()}{name[1:]} · {repo.title}"
    return repo.model_copy(update={
        "title": title,
        "canonical": f"{repo.canonical}/{name}",
    })
