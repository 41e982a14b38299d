"""User actions: analyze a posting, check a resume, grab page text.

Each action validates its own input before any request goes out and either
returns a fresh result or raises a HirelensError. Nothing is retried.
"""
from __future__ import annotations

from typing import Any

from hirelens.config import Settings
from hirelens.exceptions import InputValidationError
from hirelens.extractor import analyze_job_posting
from hirelens.log import get_logger
from hirelens.matcher import match_resume
from hirelens.models import AtsMatch, ScoredAnalysis
from hirelens.page_scraper import extract_job_text, fetch_page
from hirelens.pdf_text import check_content_type, extract_pdf_text
from hirelens.scorer import calculate_scores

log = get_logger(__name__)


def analyze_posting(job_text: str, client: Any, settings: Settings) -> ScoredAnalysis:
    text = (job_text or "").strip()
    if not text:
        raise InputValidationError("Job posting text cannot be empty.")

    record = analyze_job_posting(text, client, settings)
    analysis = calculate_scores(record)
    log.info("Posting analyzed — overall quality %d/100", analysis.scores.overall)
    return analysis


def check_resume(
    pdf_bytes: bytes | None,
    content_type: str | None,
    job_text: str,
    client: Any,
    settings: Settings,
) -> AtsMatch:
    if not (job_text or "").strip():
        raise InputValidationError("Please provide a job description first.")
    if not pdf_bytes:
        raise InputValidationError("Please upload a resume PDF.")
    check_content_type(content_type)

    resume_text = extract_pdf_text(pdf_bytes, content_type)
    match = match_resume(resume_text, job_text, client, settings)
    log.info("ATS check done — match %d/100", match.match_score)
    return match


def grab_page_text(url: str, settings: Settings) -> str:
    html = fetch_page(url, settings)
    return extract_job_text(html, min_length=settings.scrape_min_length)
