"""
Error types raised while summarizing a GitHub URL.

Every failure path (no matching route, unknown repository subsection,
missing upstream resource, broken upstream call) ends in a
SummarizerNotFoundError so callers can treat "could not summarize this
URL" uniformly. UpstreamError narrows it for failures that were not a
plain not-found.
"""
from typing import Optional


class SummarizerNotFoundError(Exception):
    """No summary can be produced for the given URL."""

    def __init__(self, context_url: str, message: Optional[str] = None):
        self.context_url = context_url
        self.message = message
        detail = f"No summarizer for {context_url}"
        if message:
            detail = f"{detail}: {message}"
        super().__init__(detail)


class UpstreamError(SummarizerNotFoundError):
    """A remote lookup failed for a reason other than not-found."""

    def __init__(
        self,
        context_url: str,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.status_code = status_code
        super().__init__(context_url, message)
