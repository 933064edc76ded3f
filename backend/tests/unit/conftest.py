import copy

import httpx
import pytest

from gh_unfurl.services.github_client import GitHubClient

API_BASE = "https://api.github.com"

REPO_PAYLOAD = {
    "full_name": "octocat/Hello-World",
    "description": "My first repository on GitHub!",
    "html_url": "https://github.com/octocat/Hello-World",
    "owner": {"avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4"},
}


def make_client(responses):
    """
    Build a GitHubClient backed by an in-memory transport.

    ``responses`` maps ``(method, path)`` to an httpx.Response or to a
    callable taking the request. Unknown requests get GitHub's 404 body.
    """
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        key = (request.method, request.url.path)
        if key in responses:
            response = responses[key]
            return response(request) if callable(response) else response
        return httpx.Response(404, json={"message": "Not Found"})

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = GitHubClient(http=http, api_base=API_BASE, token="")
    client.requests = seen
    return client


@pytest.fixture
def repo_payload():
    return copy.deepcopy(REPO_PAYLOAD)


@pytest.fixture
def github_client():
    """Factory fixture: ``github_client({("GET", path): response, ...})``."""
    return make_client
