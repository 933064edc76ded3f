"""
Generic page summarizer.

Builds a Summary for an arbitrary URL from its Open Graph tags (HTML)
or from its leading lines (plain text, e.g. humans.txt). Used by the
GitHub dispatcher for the site root.
"""
import logging
from typing import Optional
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from gh_unfurl.schemas.summary import Summary
from gh_unfurl.services.github_client import GitHubClient

logger = logging.getLogger(__name__)

MAX_TEXT_DESCRIPTION = 300
DEFAULT_TYPE = "website"


def _origin(url: str) -> str:
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}"


def _meta(soup: BeautifulSoup, key: str) -> Optional[str]:
    tag = soup.find("meta", attrs={"property": key}) or soup.find("meta", attrs={"name": key})
    if tag and tag.get("content"):
        return tag["content"].strip()
    return None


def summarize_html(html: str, url: str, locale: str) -> Summary:
    soup = BeautifulSoup(html, "html.parser")
    host = urlsplit(url).netloc

    title = _meta(soup, "og:title")
    if not title and soup.title and soup.title.string:
        title = soup.title.string.strip()

    canonical = _meta(soup, "og:url")
    if not canonical:
        link = soup.find("link", rel="canonical")
        canonical = link.get("href") if link else None

    html_tag = soup.find("html")
    lang = html_tag.get("lang") if html_tag else None

    return Summary(
        title=title or host,
        description=_meta(soup, "og:description") or _meta(soup, "description") or "",
        canonical=canonical or url,
        image=_meta(soup, "og:image") or f"{_origin(url)}/favicon.ico",
        type=_meta(soup, "og:type") or DEFAULT_TYPE,
        lang=lang or locale,
    )


def summarize_text(text: str, url: str, locale: str) -> Summary:
    # First paragraph only; humans.txt and friends lead with the interesting part
    lines = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            if lines:
                break
            continue
        lines.append(line)
    description = " ".join(lines)
    if len(description) > MAX_TEXT_DESCRIPTION:
        description = description[:MAX_TEXT_DESCRIPTION - 1].rstrip() + "…"

    return Summary(
        title=urlsplit(url).netloc,
        description=description,
        canonical=url,
        image=f"{_origin(url)}/favicon.ico",
        type=DEFAULT_TYPE,
        lang=locale,
    )


async def summarize_page(client: GitHubClient, url: str, locale: str) -> Summary:
    """Fetch ``url`` and summarize it according to its content type."""
    response = await client.get_page(url)
    final_url = str(response.url)
    content_type = response.headers.get("content-type", "")

    if "html" in content_type:
        logger.debug(f"Summarizing {final_url} as HTML")
        return summarize_html(response.text, final_url, locale)

    logger.debug(f"Summarizing {final_url} as text ({content_type or 'no content type'})")
    return summarize_text(response.text, final_url, locale)
