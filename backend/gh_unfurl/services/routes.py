"""
Ordered route table mapping GitHub web paths to fetchers.

Order matters: the first matching pattern wins, so specific shapes
(releases/tag, commit) sit above the catch-all repository subsection.
"""
import re
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional, Pattern, Tuple, Type

from gh_unfurl.schemas.summary import (
    CommitParams,
    PathParams,
    RepositoryParams,
    RootParams,
    SubsectionParams,
    Summary,
    TagParams,
)
from gh_unfurl.services import fetchers

Fetcher = Callable[..., Awaitable[Summary]]

# ":name" segments, or a literal "(.*)" wildcard for the rest of the path
_TOKEN = re.compile(r":(\w+)|\(\.\*\)")


def compile_pattern(pattern: str) -> Pattern[str]:
    """
    Compile an express-style path pattern into an anchored regex.

    ``/:owner/:repo`` captures one non-empty segment per parameter;
    ``(.*)`` captures the remainder verbatim, slashes included. Matching
    is case-insensitive and tolerates a single trailing slash.
    """
    parts = []
    last = 0
    for token in _TOKEN.finditer(pattern):
        parts.append(re.escape(pattern[last:token.start()]))
        parts.append("([^/]+?)" if token.group(1) else "(.*)")
        last = token.end()
    parts.append(re.escape(pattern[last:].rstrip("/")))
    return re.compile(f"^{''.join(parts)}/?$", re.IGNORECASE)


@dataclass(frozen=True)
class Route:
    pattern: str
    params_type: Type[PathParams]
    fetcher: Fetcher
    regex: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "regex", compile_pattern(self.pattern))

    def match(self, path: str) -> Optional[PathParams]:
        found = self.regex.match(path)
        if found is None:
            return None
        return self.params_type.from_args(found.groups())


ROUTES: Tuple[Route, ...] = (
    Route("/", RootParams, fetchers.humans_txt),
    Route("/:owner/:repo", RepositoryParams, fetchers.repository),
    Route("/:owner/:repo/releases/tag/:tag", TagParams, fetchers.tag),
    Route("/:owner/:repo/commit/:sha", CommitParams, fetchers.commit),
    Route("/:owner/:repo/(.*)", SubsectionParams, fetchers.repository_subsection),
)


def match_route(path: str, routes: Tuple[Route, ...] = ROUTES) -> Optional[Tuple[Route, PathParams]]:
    """Return the first route matching ``path`` with its bound params."""
    for route in routes:
        params = route.match(path)
        if params is not None:
            return route, params
    return None
