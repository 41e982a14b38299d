"""Validate and normalize JSON returned by the LLM collaborators.

Every payload passes through one pydantic model before it becomes a domain
record. Optional fields share a single normalization rule: explicit null
sentinels (``null``, ``"null"``, ``"none"``, ``"n/a"``, blank strings) and
values that cannot be read as the declared type become absent. Required
fields that are missing raise :class:`UpstreamServiceError`.
"""
from __future__ import annotations

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from hirelens.exceptions import UpstreamServiceError
from hirelens.scorer import round_half_up
from hirelens.models import (
    WORK_LOCATION_TYPES,
    AtsMatch,
    CostOfLivingAnalysis,
    ExtractionRecord,
)

_NULL_SENTINELS = {"", "null", "none", "n/a", "na", "nil", "undefined", "unknown"}


def _is_null(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and value.strip().lower() in _NULL_SENTINELS:
        return True
    return False


def _to_number(value: Any) -> float | None:
    if _is_null(value) or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.replace(",", "").replace("$", "").strip()
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number


def _to_text(value: Any) -> str | None:
    if _is_null(value):
        return None
    return str(value).strip()


def _required_text(value: Any) -> Any:
    # Blank or literal-null text is as good as missing for required fields.
    if isinstance(value, str):
        value = value.strip()
        if value.lower() in ("", "null", "none"):
            return None
    return value


def _dedupe(items: list[str]) -> list[str]:
    return list(dict.fromkeys(i.strip() for i in items if isinstance(i, str) and i.strip()))


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CostOfLivingPayload(_Payload):
    reasoning: str
    cost_of_living_score: Optional[float] = Field(default=None, alias="costOfLivingScore")

    @field_validator("reasoning", mode="before")
    @classmethod
    def _reasoning(cls, v: Any) -> Any:
        return _required_text(v)

    @field_validator("cost_of_living_score", mode="before")
    @classmethod
    def _score(cls, v: Any) -> float | None:
        number = _to_number(v)
        return None if number is None else min(number, 100.0)


class ExtractionPayload(_Payload):
    salary_min: Optional[float] = Field(default=None, alias="salaryMin")
    salary_max: Optional[float] = Field(default=None, alias="salaryMax")
    work_location_type: str = Field(alias="workLocationType")
    job_city: Optional[str] = Field(default=None, alias="jobCity")
    job_state: Optional[str] = Field(default=None, alias="jobState")
    job_country: Optional[str] = Field(default=None, alias="jobCountry")
    posting_age_in_days: Optional[int] = Field(default=None, alias="postingAgeInDays")
    cost_of_living_analysis: CostOfLivingPayload = Field(alias="costOfLivingAnalysis")
    overall_summary: str = Field(alias="overallSummary")

    @field_validator("salary_min", "salary_max", mode="before")
    @classmethod
    def _salary(cls, v: Any) -> float | None:
        return _to_number(v)

    @field_validator("job_city", "job_state", "job_country", mode="before")
    @classmethod
    def _place(cls, v: Any) -> str | None:
        return _to_text(v)

    @field_validator("posting_age_in_days", mode="before")
    @classmethod
    def _age(cls, v: Any) -> int | None:
        number = _to_number(v)
        return None if number is None else int(number)

    @field_validator("work_location_type", mode="before")
    @classmethod
    def _location_type(cls, v: Any) -> Any:
        v = _required_text(v)
        if v is None:
            return None
        value = str(v).lower().replace("-", "").replace(" ", "")
        return value if value in WORK_LOCATION_TYPES else "unspecified"

    @field_validator("overall_summary", mode="before")
    @classmethod
    def _summary(cls, v: Any) -> Any:
        return _required_text(v)

    @model_validator(mode="after")
    def _salary_pair(self) -> ExtractionPayload:
        lo, hi = self.salary_min, self.salary_max
        # A single figure stands for both bounds.
        if lo is None and hi is not None:
            lo = hi
        elif hi is None and lo is not None:
            hi = lo
        if lo is not None and hi is not None and lo > hi:
            lo, hi = hi, lo
        self.salary_min, self.salary_max = lo, hi
        return self

    def to_record(self) -> ExtractionRecord:
        return ExtractionRecord(
            work_location_type=self.work_location_type,
            cost_of_living_analysis=CostOfLivingAnalysis(
                reasoning=self.cost_of_living_analysis.reasoning,
                cost_of_living_score=self.cost_of_living_analysis.cost_of_living_score,
            ),
            overall_summary=self.overall_summary,
            salary_min=self.salary_min,
            salary_max=self.salary_max,
            job_city=self.job_city,
            job_state=self.job_state,
            job_country=self.job_country,
            posting_age_in_days=self.posting_age_in_days,
        )


class AtsPayload(_Payload):
    match_score: float = Field(alias="matchScore")
    matching_keywords: list[str] = Field(default_factory=list, alias="matchingKeywords")
    missing_keywords: list[str] = Field(default_factory=list, alias="missingKeywords")
    summary: str
    suggestions: str = ""

    @field_validator("match_score", mode="before")
    @classmethod
    def _match_score(cls, v: Any) -> Any:
        if _required_text(v) is None:
            return None
        if isinstance(v, bool):
            raise ValueError("expected a number")
        if isinstance(v, str):
            v = v.replace(",", "").strip()
        try:
            number = float(v)
        except (TypeError, ValueError):
            raise ValueError(f"expected a number, got {v!r}") from None
        if not math.isfinite(number):
            raise ValueError("expected a finite number")
        return min(max(number, 0.0), 100.0)

    @field_validator("matching_keywords", "missing_keywords", mode="before")
    @classmethod
    def _keywords(cls, v: Any) -> list[str]:
        if _is_null(v):
            return []
        if isinstance(v, str):
            v = v.split(",")
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"expected a list of keywords, got {type(v).__name__}")
        return _dedupe(list(v))

    @field_validator("summary", mode="before")
    @classmethod
    def _summary(cls, v: Any) -> Any:
        return _required_text(v)

    @field_validator("suggestions", mode="before")
    @classmethod
    def _suggestions(cls, v: Any) -> str:
        if _is_null(v):
            return ""
        if isinstance(v, list):
            return "\n".join(f"- {s}" for s in v if s)
        return str(v).strip()

    def to_record(self) -> AtsMatch:
        return AtsMatch(
            match_score=round_half_up(self.match_score),
            summary=self.summary,
            suggestions=self.suggestions,
            matching_keywords=tuple(self.matching_keywords),
            missing_keywords=tuple(self.missing_keywords),
        )


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


def parse_extraction(data: Any) -> ExtractionRecord:
    """Validate an extractor payload and return a normalized ExtractionRecord."""
    if not isinstance(data, dict):
        raise UpstreamServiceError(
            f"Extractor returned {type(data).__name__}, expected a JSON object",
            service="extractor",
        )
    try:
        return ExtractionPayload.model_validate(data).to_record()
    except ValidationError as exc:
        raise UpstreamServiceError(
            f"Extractor response failed validation — {_describe(exc)}",
            service="extractor",
        ) from exc
    except (TypeError, ValueError) as exc:
        raise UpstreamServiceError(
            f"Extractor response failed validation — {exc}",
            service="extractor",
        ) from exc


def parse_ats_match(data: Any) -> AtsMatch:
    """Validate a matcher payload and return an AtsMatch."""
    if not isinstance(data, dict):
        raise UpstreamServiceError(
            f"Matcher returned {type(data).__name__}, expected a JSON object",
            service="matcher",
        )
    try:
        return AtsPayload.model_validate(data).to_record()
    except ValidationError as exc:
        raise UpstreamServiceError(
            f"Matcher response failed validation — {_describe(exc)}",
            service="matcher",
        ) from exc
    except (TypeError, ValueError) as exc:
        raise UpstreamServiceError(
            f"Matcher response failed validation — {exc}",
            service="matcher",
        ) from exc
