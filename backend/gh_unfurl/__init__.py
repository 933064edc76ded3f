from gh_unfurl.core.errors import SummarizerNotFoundError, UpstreamError
from gh_unfurl.schemas.summary import Summary
from gh_unfurl.services.summarizer import GitHubSummarizer, get_summarizer, summarize

__all__ = [
    "GitHubSummarizer",
    "Summary",
    "SummarizerNotFoundError",
    "UpstreamError",
    "get_summarizer",
    "summarize",
]
