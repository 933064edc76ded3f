"""
Link summary endpoint for GitHub URLs.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from gh_unfurl.core.errors import SummarizerNotFoundError, UpstreamError
from gh_unfurl.schemas.summary import Summary
from gh_unfurl.services.summarizer import GitHubSummarizer, get_summarizer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/summary", response_model=Summary)
async def get_summary(
    url: str = Query(..., min_length=1, description="GitHub URL to summarize"),
    summarizer: GitHubSummarizer = Depends(get_summarizer),
) -> Summary:
    """
    Summarize a GitHub URL for rich link previews.

    Raises:
        HTTPException: 404 when the URL has no summary, 502 when GitHub
            could not be reached or answered with an error
    """
    try:
        return await summarizer.summarize(url)
    except UpstreamError as e:
        logger.warning(f"Upstream failure summarizing {url}: {e}")
        raise HTTPException(
            status_code=502,
            detail={"message": e.message or "GitHub request failed", "url": e.context_url},
        )
    except SummarizerNotFoundError as e:
        raise HTTPException(
            status_code=404,
            detail={"message": e.message or "No summary available", "url": e.context_url},
        )
