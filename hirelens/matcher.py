"""Compare a resume against a job posting (ATS-style keyword match)."""
from __future__ import annotations

from typing import Any

from hirelens.config import Settings
from hirelens.exceptions import InputValidationError
from hirelens.llm import complete_json
from hirelens.log import get_logger
from hirelens.models import AtsMatch
from hirelens.schema import parse_ats_match

log = get_logger(__name__)

_SYSTEM = (
    "You are an Applicant Tracking System and an expert career coach. "
    "You answer with a single JSON object only."
)

_MATCH_PROMPT = """\
Compare the resume with the job description the way an ATS would.
Return ONLY valid JSON with these exact keys:

{{
  "matchScore": 0,
  "matchingKeywords": ["keyword"],
  "missingKeywords": ["keyword"],
  "summary": "2-3 sentences on how well the resume fits",
  "suggestions": "actionable improvements, one per line"
}}

Rules:
- "matchScore" is 0-100 and reflects skills, experience and keyword overlap.
- Keywords are short skills, tools, or qualifications taken from the job
  description. "matchingKeywords" appear in the resume; "missingKeywords"
  do not.
- "suggestions" must be specific to this resume and this job.

Job description:
---
{job_text}
---

Resume:
---
{resume_text}
---
"""


def build_match_prompt(resume_text: str, job_text: str, max_chars: int) -> str:
    return _MATCH_PROMPT.format(job_text=job_text[:max_chars], resume_text=resume_text[:max_chars])


def match_resume(resume_text: str, job_text: str, client: Any, settings: Settings) -> AtsMatch:
    """Return the ATS match record for *resume_text* against *job_text*."""
    resume = (resume_text or "").strip()
    job = (job_text or "").strip()
    if not job:
        raise InputValidationError("Please provide a job description first.")
    if not resume:
        raise InputValidationError("Resume text cannot be empty.")

    log.info("Matching resume against posting with LLM (%s)", settings.model)
    data = complete_json(
        client,
        settings,
        system=_SYSTEM,
        prompt=build_match_prompt(resume, job, settings.max_input_chars),
        service="matcher",
    )
    match = parse_ats_match(data)
    log.info(
        "ATS match complete — score=%d, matching=%d, missing=%d",
        match.match_score, len(match.matching_keywords), len(match.missing_keywords),
    )
    return match
