"""Pull the job description out of a job board page.

Content regions are tried in priority order; the first one whose text is
longer than the threshold wins. When nothing matches, scraping fails; the
whole page is never used as a fallback.
"""
from __future__ import annotations

import requests
from bs4 import BeautifulSoup

from hirelens.config import Settings
from hirelens.exceptions import InputValidationError, ScrapeError, UpstreamServiceError
from hirelens.log import get_logger

log = get_logger(__name__)

MIN_CONTENT_LENGTH = 200

CONTENT_SELECTORS: tuple[str, ...] = (
    # LinkedIn
    ".jobs-description__content .jobs-description-content__text",
    "#job-details",
    # Indeed
    "#jobDescriptionText",
    # Greenhouse
    "#content",
    # Lever
    ".content .section-wrapper .postings-body",
    # Wellfound
    '[data-test="job-description"]',
    # Glassdoor
    ".jobDescriptionContent",
    # Generic
    "article",
    "main",
)

_NON_CONTENT_TAGS = ("script", "style", "noscript", "template", "svg")


def _visible_text(element) -> str:
    lines = (line.strip() for line in element.get_text(separator="\n").splitlines())
    return "\n".join(line for line in lines if line)


def extract_job_text(
    html: str,
    *,
    min_length: int = MIN_CONTENT_LENGTH,
    selectors: tuple[str, ...] = CONTENT_SELECTORS,
) -> str:
    """Return the text of the first content region longer than *min_length*."""
    soup = BeautifulSoup(html or "", "html.parser")
    for tag in soup.find_all(list(_NON_CONTENT_TAGS)):
        tag.decompose()

    for selector in selectors:
        element = soup.select_one(selector)
        if element is None:
            continue
        text = _visible_text(element)
        if len(text) > min_length:
            log.info("Matched content region %r (%d chars)", selector, len(text))
            return text
        log.debug("Region %r too short (%d chars)", selector, len(text))

    raise ScrapeError("Could not find a suitable job description on this page.")


def fetch_page(url: str, settings: Settings) -> str:
    """GET *url* and return its HTML."""
    url = (url or "").strip()
    if not url:
        raise InputValidationError("Enter the URL of a job posting.")
    if not url.lower().startswith(("http://", "https://")):
        url = "https://" + url

    log.info("Fetching %s", url)
    try:
        r = requests.get(
            url,
            headers={"User-Agent": settings.user_agent, "Accept": "text/html,application/xhtml+xml"},
            timeout=settings.request_timeout_seconds,
        )
        r.raise_for_status()
    except requests.RequestException as exc:
        log.error("Fetching %s failed: %s", url, exc)
        raise UpstreamServiceError(f"Error grabbing text from page: {exc}", service="page") from exc
    return r.text
