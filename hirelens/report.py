"""Render analysis results as Markdown reports."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from hirelens.config import REPORTS_DIR
from hirelens.log import get_logger
from hirelens.models import AtsMatch, ScoredAnalysis
from hirelens.scorer import score_band

log = get_logger(__name__)

_BAND_BADGES: dict[str, str] = {
    "poor": "\U0001f534",
    "fair": "\U0001f7e0",
    "good": "\U0001f7e2",
}


def _badge(score: int) -> str:
    return _BAND_BADGES[score_band(score)]


def salary_spread_percent(salary_min: float | None, salary_max: float | None) -> float | None:
    if not salary_min or not salary_max or salary_max <= 0:
        return None
    return (salary_max - salary_min) / salary_max * 100


def posting_age_text(days: int | None) -> str:
    if days is None:
        return "Posting date not found."
    return f"Posted {days} day{'' if days == 1 else 's'} ago."


def build_analysis_report(analysis: ScoredAnalysis) -> str:
    rec, scores = analysis.record, analysis.scores
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M")
    lines: list[str] = [f"# Job Posting Quality Report — {date}", ""]

    lines.append(f"## {_badge(scores.overall)} Overall Quality: {scores.overall}/100")
    lines.append("")
    lines.append(rec.overall_summary)
    lines.append("")

    lines.append("| Category | Score |")
    lines.append("|----------|------:|")
    lines.append(f"| Salary | {scores.salary} |")
    lines.append(f"| Work Location | {scores.location} |")
    lines.append(f"| Cost of Living | {scores.cost_of_living} |")
    lines.append(f"| Posting Age | {scores.posting_age} |")
    lines.append("")

    lines.append(f"### {_badge(scores.salary)} Salary")
    if rec.salary_min and rec.salary_max:
        lines.append(f"- **Range:** ${rec.salary_min:,.0f} - ${rec.salary_max:,.0f}")
        spread = salary_spread_percent(rec.salary_min, rec.salary_max)
        if spread is not None:
            lines.append(f"- **Spread:** {spread:.1f}%")
        lines.append("- _Score is based on providing a salary and the narrowness of the range._")
    else:
        lines.append("- No salary range provided.")
    lines.append("")

    lines.append(f"### {_badge(scores.location)} Work Location")
    lines.append(f"- **Type:** {rec.work_location_type.capitalize()}")
    if rec.location_label:
        lines.append(f"- **Location:** {rec.location_label}")
    lines.append("")

    col = rec.cost_of_living_analysis
    lines.append(f"### {_badge(scores.cost_of_living)} Cost of Living")
    if col.cost_of_living_score is not None:
        lines.append(f"- **Salary vs CoL Score:** {col.cost_of_living_score:g} / 100")
    lines.append(f"- {col.reasoning}")
    lines.append("")

    lines.append(f"### {_badge(scores.posting_age)} Posting Age")
    lines.append(f"- {posting_age_text(rec.posting_age_in_days)}")
    lines.append("")

    log.debug("Built analysis report (overall=%d)", scores.overall)
    return "\n".join(lines)


def build_ats_report(match: AtsMatch) -> str:
    lines: list[str] = ["# Resume ATS Check", ""]
    lines.append(f"## {_badge(match.match_score)} Match Score: {match.match_score}/100")
    lines.append("")
    lines.append(match.summary)
    lines.append("")
    if match.matching_keywords:
        lines.append("### Matching Keywords")
        lines.append(", ".join(f"`{k}`" for k in match.matching_keywords))
        lines.append("")
    if match.missing_keywords:
        lines.append("### Missing Keywords")
        lines.append(", ".join(f"`{k}`" for k in match.missing_keywords))
        lines.append("")
    if match.suggestions:
        lines.append("### Suggestions")
        lines.append(match.suggestions)
        lines.append("")
    return "\n".join(lines)


def write_report(content: str, stem: str = "analysis", directory: Path | None = None) -> Path:
    directory = directory or REPORTS_DIR
    directory.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S")
    path = directory / f"{stem}_{stamp}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
