"""Streamlit UI for Hirelens."""
from __future__ import annotations

import html
import json
import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from hirelens.config import load_settings
from hirelens.exceptions import HirelensError
from hirelens.log import get_logger
from hirelens.report import (
    build_analysis_report,
    build_ats_report,
    posting_age_text,
    salary_spread_percent,
)
from hirelens.samples import EXAMPLE_POSTINGS
from hirelens.scorer import score_band

log = get_logger(__name__)

st.set_page_config(page_title="Hirelens", page_icon="🔍", layout="wide")

_CSS = """
<style>
[data-testid="stAppViewContainer"] {
    background: linear-gradient(135deg, #0f172a 0%, #1e293b 60%, #1e1b4b 100%);
    color: #e2e8f0;
}
[data-testid="stMetric"] {
    background: rgba(30,41,59,0.6);
    padding: 0.75rem 1rem;
    border-radius: 12px;
    border: 1px solid rgba(148,163,184,0.25);
}
.score-poor { color: #ef4444; font-weight: 700; }
.score-fair { color: #fbbf24; font-weight: 700; }
.score-good { color: #22c55e; font-weight: 700; }
.kw {
    display: inline-block; padding: 0.15rem 0.6rem; margin: 0.15rem;
    border-radius: 999px; font-size: 0.8rem;
}
.kw-match { background: rgba(20,83,45,0.5); color: #86efac; }
.kw-miss { background: rgba(120,53,15,0.5); color: #fcd34d; }
</style>
"""

_HOW_IT_WORKS = """
**1. Provide a job posting.** Paste the text, fetch it from a job board URL,
or load one of the examples.

**2. Analyze.** The posting is sent to the language model, which extracts
salary, location, posting date and a cost-of-living assessment. Hirelens
then scores it:

| Category | Max points |
|---|---:|
| Salary (listed, narrow range) | 35 |
| Work location (remote > hybrid > onsite) | 20 |
| Cost of living vs. salary | 30 |
| Posting age (fresher is better) | 15 |

**3. Resume ATS check.** Switch to the *Resume ATS Check* tab and upload
your resume as a PDF to get a match score, matching and missing keywords,
and suggestions.
"""

# ── Helpers ──────────────────────────────────────────────────────────────


def _settings():
    settings = load_settings()
    session_key = st.session_state.get("_api_key", "")
    if session_key and not settings.api_key:
        settings = settings.with_api_key(session_key)
    return settings


def _client(settings):
    from hirelens.llm import build_client

    return build_client(settings)


def _score_html(score: int, suffix: str = "/100") -> str:
    return f'<span class="score-{score_band(score)}">{score}{suffix}</span>'


def _keywords_html(words, css: str) -> str:
    return "".join(f'<span class="kw {css}">{html.escape(w)}</span>' for w in words)


# ── Callbacks ────────────────────────────────────────────────────────────


def _load_example() -> None:
    name = st.session_state.get("example_choice")
    if name in EXAMPLE_POSTINGS:
        st.session_state["job_text"] = EXAMPLE_POSTINGS[name]
        st.session_state.pop("analysis", None)
        st.session_state.pop("analysis_error", None)


def _grab_from_url() -> None:
    from hirelens.service import grab_page_text

    url = st.session_state.get("job_url", "")
    st.session_state.pop("grab_error", None)
    try:
        st.session_state["job_text"] = grab_page_text(url, _settings())
    except HirelensError as exc:
        log.warning("Grab failed: %s", exc)
        st.session_state["grab_error"] = str(exc)


# ── Sections ─────────────────────────────────────────────────────────────


def _sidebar() -> None:
    with st.sidebar:
        st.markdown("**Status**")
        settings = _settings()
        icon = "✅" if settings.api_key else "⬜"
        st.markdown(f"{icon}  API key")
        st.caption(f"Model: `{settings.model}`")
        if not load_settings().api_key:
            key = st.text_input(
                "Groq API key (this session only)",
                value=st.session_state.get("_api_key", ""),
                type="password",
                placeholder="gsk_...",
            )
            st.session_state["_api_key"] = key.strip()


def _input_column() -> None:
    with st.form("grab_form", border=False):
        c1, c2 = st.columns([3, 1])
        with c1:
            st.text_input(
                "Job posting URL",
                key="job_url",
                placeholder="https://boards.greenhouse.io/...",
                label_visibility="collapsed",
            )
        with c2:
            st.form_submit_button("Grab Text", on_click=_grab_from_url, use_container_width=True)
    if st.session_state.get("grab_error"):
        st.error(st.session_state["grab_error"])

    c1, c2 = st.columns([3, 1])
    with c1:
        st.selectbox(
            "Example",
            list(EXAMPLE_POSTINGS),
            key="example_choice",
            label_visibility="collapsed",
        )
    with c2:
        st.button("Load Example", on_click=_load_example, use_container_width=True)

    st.text_area(
        "Job posting",
        key="job_text",
        height=470,
        placeholder="Paste job description here, or grab it from a job posting URL…",
    )

    if st.button("Analyze Posting", type="primary", use_container_width=True):
        st.session_state.pop("analysis", None)
        st.session_state.pop("analysis_error", None)
        with st.spinner("Analyzing job posting…"):
            try:
                from hirelens.service import analyze_posting

                settings = _settings()
                text = st.session_state.get("job_text", "")
                # Empty input is rejected by analyze_posting before the client is used.
                client = _client(settings) if text.strip() else None
                st.session_state["analysis"] = analyze_posting(text, client, settings)
            except HirelensError as exc:
                log.warning("Analysis failed: %s", exc)
                st.session_state["analysis_error"] = str(exc)


def _tab_analysis() -> None:
    if st.session_state.get("analysis_error"):
        st.error(st.session_state["analysis_error"])
        return

    analysis = st.session_state.get("analysis")
    if analysis is None:
        st.info("Results from your job posting analysis will appear here.")
        return

    rec, scores = analysis.record, analysis.scores
    c1, c2 = st.columns([1, 3])
    with c1:
        st.metric("Quality Score", f"{scores.overall}/100")
    with c2:
        st.subheader("Overall Quality Analysis")
        st.write(rec.overall_summary)

    left, right = st.columns(2)
    with left:
        with st.container(border=True):
            st.markdown(f"**💵 Salary** — {_score_html(scores.salary)}", unsafe_allow_html=True)
            if rec.salary_min and rec.salary_max:
                st.write(f"Range: ${rec.salary_min:,.0f} - ${rec.salary_max:,.0f}")
                spread = salary_spread_percent(rec.salary_min, rec.salary_max)
                if spread is not None:
                    st.write(f"Spread: **{spread:.1f}%**")
                st.caption("Score is based on providing a salary and the narrowness of the range.")
            else:
                st.write("No salary range provided.")
        with st.container(border=True):
            col = rec.cost_of_living_analysis
            st.markdown(f"**🏢 Cost of Living** — {_score_html(scores.cost_of_living)}", unsafe_allow_html=True)
            if col.cost_of_living_score is not None:
                st.write(f"Salary vs CoL Score: **{col.cost_of_living_score:g} / 100**")
            st.write(col.reasoning)
    with right:
        with st.container(border=True):
            st.markdown(f"**📍 Work Location** — {_score_html(scores.location)}", unsafe_allow_html=True)
            st.write(f"Type: **{rec.work_location_type.capitalize()}**")
            if rec.location_label:
                st.write(f"Location: {rec.location_label}")
        with st.container(border=True):
            st.markdown(f"**🕒 Posting Age** — {_score_html(scores.posting_age)}", unsafe_allow_html=True)
            st.write(posting_age_text(rec.posting_age_in_days))

    c1, c2 = st.columns(2)
    with c1:
        st.download_button(
            "Download report (Markdown)",
            build_analysis_report(analysis),
            file_name="hirelens_report.md",
            mime="text/markdown",
            use_container_width=True,
        )
    with c2:
        st.download_button(
            "Download data (JSON)",
            json.dumps(analysis.to_dict(), indent=2),
            file_name="hirelens_analysis.json",
            mime="application/json",
            use_container_width=True,
        )


def _tab_ats() -> None:
    with st.container(border=True):
        st.subheader("📄 ATS Resume Check")
        st.caption("Upload your PDF resume to see how it matches the job description.")
        uploaded = st.file_uploader("Resume (PDF)", type=["pdf"], key="resume_file")
        if uploaded:
            st.caption(f"Selected: {uploaded.name}")

        if st.button("Run ATS Check", type="primary", use_container_width=True):
            st.session_state.pop("ats", None)
            st.session_state.pop("ats_error", None)
            with st.spinner("Performing ATS analysis…"):
                try:
                    from hirelens.service import check_resume

                    settings = _settings()
                    job_text = st.session_state.get("job_text", "")
                    data = uploaded.getvalue() if uploaded else None
                    content_type = uploaded.type if uploaded else None
                    client = _client(settings) if job_text.strip() and data else None
                    st.session_state["ats"] = check_resume(data, content_type, job_text, client, settings)
                except HirelensError as exc:
                    log.warning("ATS check failed: %s", exc)
                    st.session_state["ats_error"] = str(exc)

    if st.session_state.get("ats_error"):
        st.error(st.session_state["ats_error"])
        return

    match = st.session_state.get("ats")
    if match is None:
        st.info("Upload your resume and run the check to see your match score.")
        return

    c1, c2 = st.columns([1, 3])
    with c1:
        st.metric("Match Score", f"{match.match_score}/100")
    with c2:
        st.subheader("ATS Summary")
        st.write(match.summary)

    with st.container(border=True):
        st.markdown("**Suggestions for Improvement**")
        st.markdown(match.suggestions or "_No suggestions._")

    left, right = st.columns(2)
    with left:
        st.markdown("**Matching Keywords**")
        st.markdown(_keywords_html(match.matching_keywords, "kw-match") or "—", unsafe_allow_html=True)
    with right:
        st.markdown("**Missing Keywords**")
        st.markdown(_keywords_html(match.missing_keywords, "kw-miss") or "—", unsafe_allow_html=True)

    st.download_button(
        "Download ATS report (Markdown)",
        build_ats_report(match),
        file_name="hirelens_ats.md",
        mime="text/markdown",
    )


# ── Main ─────────────────────────────────────────────────────────────────


def main() -> None:
    st.markdown(_CSS, unsafe_allow_html=True)
    _sidebar()

    st.title("🔍 Hirelens")
    st.caption("Analyze job descriptions and check your resume's match with AI-powered tools.")

    left, right = st.columns(2, gap="large")
    with left:
        _input_column()
    with right:
        tab_how, tab_job, tab_ats = st.tabs(["How It Works", "Job Quality Analysis", "Resume ATS Check"])
        with tab_how:
            st.markdown(_HOW_IT_WORKS)
        with tab_job:
            _tab_analysis()
        with tab_ats:
            _tab_ats()


main()
