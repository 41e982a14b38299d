"""
Test fixtures for Hirelens tests
"""

import json
import os
from types import SimpleNamespace
from unittest.mock import MagicMock

os.environ.setdefault("HIRELENS_NO_LOG_FILE", "1")

import pytest

from hirelens.config import Settings
from hirelens.models import CostOfLivingAnalysis, ExtractionRecord


def _completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_client(*replies):
    """Chat client double; each reply is a dict (sent as JSON), a raw string, or an exception."""
    client = MagicMock()
    side_effects = []
    for reply in replies:
        if isinstance(reply, BaseException):
            side_effects.append(reply)
        elif isinstance(reply, str):
            side_effects.append(_completion(reply))
        else:
            side_effects.append(_completion(json.dumps(reply)))
    client.chat.completions.create.side_effect = side_effects
    return client


@pytest.fixture
def settings():
    """Settings with a dummy key; no file or env involved"""
    return Settings(api_key="test-key", model="test-model")


@pytest.fixture
def extraction_payload():
    """A complete, well-formed extractor reply"""
    return {
        "salaryMin": 100000,
        "salaryMax": 110000,
        "workLocationType": "remote",
        "jobCity": "Austin",
        "jobState": "TX",
        "jobCountry": "USA",
        "postingAgeInDays": 5,
        "costOfLivingAnalysis": {
            "costOfLivingScore": 80,
            "reasoning": "Salary is comfortable for Austin.",
        },
        "overallSummary": "A clear, well-paid remote role.",
    }


@pytest.fixture
def ats_payload():
    """A complete matcher reply"""
    return {
        "matchScore": 72,
        "matchingKeywords": ["Go", "Kubernetes", "AWS"],
        "missingKeywords": ["Terraform", "gRPC"],
        "summary": "Strong backend background; infra tooling gaps.",
        "suggestions": "Mention Terraform work.\nAdd gRPC projects.",
    }


@pytest.fixture
def make_record():
    """Factory for ExtractionRecord with only the fields a test cares about"""

    def _make(**overrides):
        col_score = overrides.pop("cost_of_living_score", None)
        fields = {
            "work_location_type": "unspecified",
            "cost_of_living_analysis": CostOfLivingAnalysis(
                reasoning="n/a", cost_of_living_score=col_score
            ),
            "overall_summary": "summary",
        }
        fields.update(overrides)
        return ExtractionRecord(**fields)

    return _make


@pytest.fixture
def fake_client():
    """Factory fixture around make_client"""
    return make_client
