"""
Tests for the Streamlit page, rendered headlessly with AppTest
"""

import pytest
from streamlit.testing.v1 import AppTest

from hirelens.config import ROOT_DIR
from hirelens.models import AtsMatch

APP_PATH = str(ROOT_DIR / "app.py")


@pytest.fixture
def app(monkeypatch, tmp_path):
    monkeypatch.setenv("HIRELENS_SETTINGS", str(tmp_path / "none.yaml"))
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    return AppTest.from_file(APP_PATH, default_timeout=30)


def _markdown_values(at):
    return [m.value for m in at.markdown]


def test_page_renders_without_results(app):
    app.run()
    assert not app.exception
    assert app.text_area(key="job_text").value == ""


def test_keywords_are_escaped(app):
    app.session_state["ats"] = AtsMatch(
        match_score=55,
        summary="Partial fit.",
        suggestions="",
        matching_keywords=("<img src=x onerror=alert(1)>", "C++ & Rust"),
        missing_keywords=("<script>steal()</script>",),
    )
    app.run()
    assert not app.exception

    keyword_html = "".join(v for v in _markdown_values(app) if 'class="kw ' in v)
    assert "&lt;img src=x onerror=alert(1)&gt;" in keyword_html
    assert "C++ &amp; Rust" in keyword_html
    assert "&lt;script&gt;steal()&lt;/script&gt;" in keyword_html
    assert "<img" not in keyword_html
    assert "<script>" not in keyword_html
