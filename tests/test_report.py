"""
Tests for Markdown report rendering
"""

from hirelens.models import AtsMatch
from hirelens.report import (
    build_analysis_report,
    build_ats_report,
    posting_age_text,
    salary_spread_percent,
    write_report,
)
from hirelens.scorer import calculate_scores


def test_salary_spread_percent():
    assert salary_spread_percent(180000, 200000) == 10.0
    assert salary_spread_percent(None, 200000) is None
    assert salary_spread_percent(0, 0) is None


def test_posting_age_text():
    assert posting_age_text(1) == "Posted 1 day ago."
    assert posting_age_text(14) == "Posted 14 days ago."
    assert posting_age_text(None) == "Posting date not found."


def test_full_analysis_report(make_record):
    record = make_record(
        salary_min=180000,
        salary_max=200000,
        work_location_type="remote",
        job_city="Austin",
        job_state="TX",
        posting_age_in_days=1,
        cost_of_living_score=85,
    )
    report = build_analysis_report(calculate_scores(record))
    # 35 + 20 + 25.5 + 15 = 95.5
    assert "Overall Quality: 96/100" in report
    assert "$180,000 - $200,000" in report
    assert "**Spread:** 10.0%" in report
    assert "**Location:** Austin, TX" in report
    assert "85 / 100" in report
    assert "Posted 1 day ago." in report


def test_sparse_analysis_report(make_record):
    report = build_analysis_report(calculate_scores(make_record()))
    assert "No salary range provided." in report
    assert "Posting date not found." in report
    assert "Salary vs CoL Score" not in report
    assert "Overall Quality: 0/100" in report


def test_ats_report():
    match = AtsMatch(
        match_score=64,
        summary="Decent fit.",
        suggestions="Add metrics.",
        matching_keywords=("Python",),
        missing_keywords=("Airflow", "dbt"),
    )
    report = build_ats_report(match)
    assert "Match Score: 64/100" in report
    assert "`Airflow`, `dbt`" in report
    assert "Add metrics." in report


def test_ats_report_omits_empty_sections():
    report = build_ats_report(AtsMatch(match_score=10, summary="Poor fit.", suggestions=""))
    assert "Matching Keywords" not in report
    assert "Suggestions" not in report


def test_write_report(tmp_path):
    path = write_report("# hello", stem="analysis", directory=tmp_path / "reports")
    assert path.parent == tmp_path / "reports"
    assert path.name.startswith("analysis_")
    assert path.read_text(encoding="utf-8") == "# hello"
