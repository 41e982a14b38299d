"""Data models for job posting analysis and resume matching."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

WORK_LOCATION_TYPES: tuple[str, ...] = ("remote", "hybrid", "onsite", "unspecified")


@dataclass(frozen=True)
class CostOfLivingAnalysis:
    reasoning: str
    cost_of_living_score: float | None = None


@dataclass(frozen=True)
class ExtractionRecord:
    work_location_type: str
    cost_of_living_analysis: CostOfLivingAnalysis
    overall_summary: str
    salary_min: float | None = None
    salary_max: float | None = None
    job_city: str | None = None
    job_state: str | None = None
    job_country: str | None = None
    posting_age_in_days: int | None = None

    @property
    def location_label(self) -> str:
        return ", ".join(p for p in (self.job_city, self.job_state, self.job_country) if p)

    def to_dict(self) -> dict[str, Any]:
        """Wire shape (camelCase); absent optional fields are omitted."""
        col: dict[str, Any] = {"reasoning": self.cost_of_living_analysis.reasoning}
        if self.cost_of_living_analysis.cost_of_living_score is not None:
            col["costOfLivingScore"] = self.cost_of_living_analysis.cost_of_living_score
        out: dict[str, Any] = {
            "salaryMin": self.salary_min,
            "salaryMax": self.salary_max,
            "workLocationType": self.work_location_type,
            "jobCity": self.job_city,
            "jobState": self.job_state,
            "jobCountry": self.job_country,
            "postingAgeInDays": self.posting_age_in_days,
            "costOfLivingAnalysis": col,
            "overallSummary": self.overall_summary,
        }
        return {k: v for k, v in out.items() if v is not None}


@dataclass(frozen=True)
class Scores:
    overall: int
    salary: int
    location: int
    cost_of_living: int
    # Posting-age freshness category.
    red_flags: int

    @property
    def posting_age(self) -> int:
        return self.red_flags

    def to_dict(self) -> dict[str, int]:
        return {
            "overall": self.overall,
            "salary": self.salary,
            "location": self.location,
            "costOfLiving": self.cost_of_living,
            "redFlags": self.red_flags,
        }


@dataclass(frozen=True)
class ScoredAnalysis:
    record: ExtractionRecord
    scores: Scores

    def to_dict(self) -> dict[str, Any]:
        return {**self.record.to_dict(), "scores": self.scores.to_dict()}


@dataclass(frozen=True)
class AtsMatch:
    match_score: int
    summary: str
    suggestions: str
    matching_keywords: tuple[str, ...] = field(default_factory=tuple)
    missing_keywords: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "matchScore": self.match_score,
            "matchingKeywords": list(self.matching_keywords),
            "missingKeywords": list(self.missing_keywords),
            "summary": self.summary,
            "suggestions": self.suggestions,
        }
