"""Extract structured quality fields from a job posting with the LLM."""
from __future__ import annotations

from typing import Any

from hirelens.config import Settings
from hirelens.exceptions import InputValidationError
from hirelens.llm import complete_json
from hirelens.log import get_logger
from hirelens.models import ExtractionRecord
from hirelens.schema import parse_extraction

log = get_logger(__name__)

_SYSTEM = "You are an expert HR analyst and recruiter. You answer with a single JSON object only."

_EXTRACT_PROMPT = """\
Analyze the job posting below. Extract the required information and assess
its quality. Return ONLY valid JSON with these exact keys:

{{
  "salaryMin": 0,
  "salaryMax": 0,
  "workLocationType": "remote | hybrid | onsite | unspecified",
  "jobCity": "City",
  "jobState": "State or province",
  "jobCountry": "Country",
  "postingAgeInDays": 0,
  "costOfLivingAnalysis": {{
    "costOfLivingScore": 0,
    "reasoning": "one or two sentences"
  }},
  "overallSummary": "one paragraph"
}}

Rules:
- Salary: numeric annual min and max, no currency symbols. If a single
  number is given, use it for both. Use null if no salary is listed.
- Location: "workLocationType" must be one of remote, hybrid, onsite,
  unspecified. City, state and country are null when not present.
- Posting age: whole days since the posting went up ("2 weeks ago" is 14).
  Use null if the posting date cannot be determined.
- Cost of living: if salary and location are both present, rate 0-100 how
  well the salary covers the cost of living in that place (100 = very
  comfortable). Use null for the score if it cannot be assessed, and say
  why in "reasoning". "reasoning" is always required.
- Summary: a concise paragraph on the posting's quality from an HR
  perspective.

Job posting:
---
{job_text}
---
"""


def build_extraction_prompt(job_text: str, max_chars: int) -> str:
    return _EXTRACT_PROMPT.format(job_text=job_text[:max_chars])


def analyze_job_posting(job_text: str, client: Any, settings: Settings) -> ExtractionRecord:
    """Send posting text to the LLM and return a validated ExtractionRecord.

    Raises InputValidationError for empty text and UpstreamServiceError when
    the service fails or its answer is missing required fields.
    """
    text = (job_text or "").strip()
    if not text:
        raise InputValidationError("Job posting text cannot be empty.")
    if len(text) > settings.max_input_chars:
        log.info("Posting truncated from %d to %d chars", len(text), settings.max_input_chars)

    log.info("Extracting posting fields with LLM (%s)", settings.model)
    data = complete_json(
        client,
        settings,
        system=_SYSTEM,
        prompt=build_extraction_prompt(text, settings.max_input_chars),
        service="extractor",
    )
    record = parse_extraction(data)
    log.info(
        "Extraction complete — location=%s, salary=%s, age=%s",
        record.work_location_type,
        "yes" if record.salary_min else "no",
        record.posting_age_in_days,
    )
    return record
