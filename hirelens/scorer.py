"""Score a job posting's quality from its extracted fields.

Fixed rubric, 100 points in total:

  - Salary           35  (25 for listing a range, +10 / +5 for a narrow spread)
  - Location         20  (remote 20, hybrid 15, onsite 5)
  - Cost of living   30  (the extractor's 0-100 assessment, scaled)
  - Posting age      15  (freshness ladder, scaled)

Salary, location and the overall score are shown as ``round(points / max *
100)``. Cost of living is the odd one out: its shown value is the
extractor's own 0-100 number, and its points are derived from that number,
not the other way round.

The posting-age category score is returned under ``red_flags`` (``redFlags``
on the wire). The name is historical; the value is freshness only.
"""
from __future__ import annotations

import math

from hirelens.log import get_logger
from hirelens.models import ExtractionRecord, ScoredAnalysis, Scores

log = get_logger(__name__)

MAX_SALARY_SCORE = 35
MAX_LOCATION_SCORE = 20
MAX_COST_OF_LIVING_SCORE = 30
MAX_POSTING_AGE_SCORE = 15

TOTAL_MAX_SCORE = (
    MAX_SALARY_SCORE + MAX_LOCATION_SCORE + MAX_COST_OF_LIVING_SCORE + MAX_POSTING_AGE_SCORE
)

SALARY_LISTED_POINTS = 25
NARROW_SPREAD_POINTS = 10
MODERATE_SPREAD_POINTS = 5
NARROW_SPREAD_RATIO = 0.15
MODERATE_SPREAD_RATIO = 0.30

LOCATION_POINTS: dict[str, int] = {
    "remote": 20,
    "hybrid": 15,
    "onsite": 5,
}

# (exclusive upper bound in days, category score)
POSTING_AGE_LADDER: tuple[tuple[int, int], ...] = (
    (7, 100),
    (14, 80),
    (30, 50),
    (60, 20),
)


def round_half_up(value: float) -> int:
    """Round .5 toward +inf (Python's round() would go to even)."""
    return int(math.floor(value + 0.5))


def _as_number(value) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def salary_points(salary_min, salary_max) -> int:
    lo = _as_number(salary_min)
    hi = _as_number(salary_max)
    # Zero or negative counts as "not listed".
    if lo <= 0 or hi <= 0:
        return 0

    points = SALARY_LISTED_POINTS
    spread = (hi - lo) / hi
    if spread < NARROW_SPREAD_RATIO:
        points += NARROW_SPREAD_POINTS
    elif spread < MODERATE_SPREAD_RATIO:
        points += MODERATE_SPREAD_POINTS
    return points


def location_points(work_location_type) -> int:
    return LOCATION_POINTS.get(work_location_type, 0) if isinstance(work_location_type, str) else 0


def cost_of_living_value(cost_of_living_score) -> float:
    """The extractor's 0-100 assessment, or 0 when it could not be assessed."""
    return min(max(_as_number(cost_of_living_score), 0.0), 100.0)


def posting_age_category(posting_age_in_days) -> int:
    if posting_age_in_days is None or isinstance(posting_age_in_days, bool):
        return 0
    age = _as_number(posting_age_in_days)
    if age < 0:
        return 0
    for upper, score in POSTING_AGE_LADDER:
        if age < upper:
            return score
    return 0


def calculate_scores(record: ExtractionRecord) -> ScoredAnalysis:
    """Return the record with its five 0-100 scores attached. Never raises."""
    salary = salary_points(record.salary_min, record.salary_max)
    location = location_points(record.work_location_type)

    col_analysis = record.cost_of_living_analysis
    col_value = cost_of_living_value(
        col_analysis.cost_of_living_score if col_analysis is not None else None
    )
    col_points = col_value * MAX_COST_OF_LIVING_SCORE / 100

    age_category = posting_age_category(record.posting_age_in_days)
    age_points = age_category * MAX_POSTING_AGE_SCORE / 100

    total_points = salary + location + col_points + age_points
    overall = round_half_up(total_points * 100 / TOTAL_MAX_SCORE)

    scores = Scores(
        overall=min(max(overall, 0), 100),
        salary=round_half_up(salary * 100 / MAX_SALARY_SCORE),
        location=round_half_up(location * 100 / MAX_LOCATION_SCORE),
        cost_of_living=round_half_up(col_value),
        red_flags=age_category,
    )
    log.debug(
        "Scored posting — salary=%d location=%d col=%.1f age=%.1f → overall=%d",
        salary, location, col_points, age_points, scores.overall,
    )
    return ScoredAnalysis(record=record, scores=scores)


def score_band(score: int) -> str:
    """Colour band used by the UI gauge: poor (<50), fair (<75), good."""
    if score < 50:
        return "poor"
    if score < 75:
        return "fair"
    return "good"
