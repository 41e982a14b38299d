"""
Tests for collaborator payload validation and normalization
"""

import pytest

from hirelens.exceptions import UpstreamServiceError
from hirelens.schema import parse_ats_match, parse_extraction


class TestExtraction:
    def test_complete_payload(self, extraction_payload):
        record = parse_extraction(extraction_payload)
        assert record.salary_min == 100000
        assert record.salary_max == 110000
        assert record.work_location_type == "remote"
        assert record.location_label == "Austin, TX, USA"
        assert record.posting_age_in_days == 5
        assert record.cost_of_living_analysis.cost_of_living_score == 80
        assert record.overall_summary == "A clear, well-paid remote role."

    def test_null_sentinels_become_absent(self, extraction_payload):
        extraction_payload.update({
            "salaryMin": None,
            "salaryMax": "null",
            "jobCity": "",
            "jobState": "N/A",
            "jobCountry": None,
            "postingAgeInDays": "null",
        })
        extraction_payload["costOfLivingAnalysis"]["costOfLivingScore"] = None
        record = parse_extraction(extraction_payload)
        assert record.salary_min is None
        assert record.salary_max is None
        assert record.job_city is None
        assert record.job_state is None
        assert record.job_country is None
        assert record.posting_age_in_days is None
        assert record.cost_of_living_analysis.cost_of_living_score is None
        assert "salaryMin" not in record.to_dict()

    def test_missing_optional_fields(self):
        record = parse_extraction({
            "workLocationType": "onsite",
            "costOfLivingAnalysis": {"reasoning": "No salary listed."},
            "overallSummary": "Vague.",
        })
        assert record.salary_min is None
        assert record.posting_age_in_days is None
        assert record.cost_of_living_analysis.cost_of_living_score is None

    @pytest.mark.parametrize("field", ["workLocationType", "overallSummary", "costOfLivingAnalysis"])
    def test_missing_required_field(self, extraction_payload, field):
        del extraction_payload[field]
        with pytest.raises(UpstreamServiceError) as exc_info:
            parse_extraction(extraction_payload)
        assert exc_info.value.service == "extractor"

    def test_missing_reasoning(self, extraction_payload):
        del extraction_payload["costOfLivingAnalysis"]["reasoning"]
        with pytest.raises(UpstreamServiceError):
            parse_extraction(extraction_payload)

    def test_null_required_field(self, extraction_payload):
        extraction_payload["overallSummary"] = None
        with pytest.raises(UpstreamServiceError):
            parse_extraction(extraction_payload)

    def test_not_an_object(self):
        with pytest.raises(UpstreamServiceError):
            parse_extraction(["not", "a", "dict"])

    @pytest.mark.parametrize(
        "raw,expected",
        [("Remote", "remote"), ("On-site", "onsite"), ("HYBRID", "hybrid"), ("flexible", "unspecified")],
    )
    def test_location_type_normalized(self, extraction_payload, raw, expected):
        extraction_payload["workLocationType"] = raw
        assert parse_extraction(extraction_payload).work_location_type == expected

    def test_single_salary_figure_used_for_both(self, extraction_payload):
        extraction_payload["salaryMax"] = None
        record = parse_extraction(extraction_payload)
        assert record.salary_min == record.salary_max == 100000

    def test_reversed_salary_swapped(self, extraction_payload):
        extraction_payload.update({"salaryMin": 150000, "salaryMax": 120000})
        record = parse_extraction(extraction_payload)
        assert (record.salary_min, record.salary_max) == (120000, 150000)

    def test_numeric_strings(self, extraction_payload):
        extraction_payload.update({"salaryMin": "$95,000", "salaryMax": "105000", "postingAgeInDays": "14"})
        record = parse_extraction(extraction_payload)
        assert record.salary_min == 95000
        assert record.salary_max == 105000
        assert record.posting_age_in_days == 14

    def test_out_of_range_numbers(self, extraction_payload):
        extraction_payload["postingAgeInDays"] = -3
        extraction_payload["costOfLivingAnalysis"]["costOfLivingScore"] = 130
        record = parse_extraction(extraction_payload)
        assert record.posting_age_in_days is None
        assert record.cost_of_living_analysis.cost_of_living_score == 100

    def test_unreadable_optional_number_is_absent(self, extraction_payload):
        extraction_payload["salaryMin"] = "competitive"
        extraction_payload["salaryMax"] = "competitive"
        record = parse_extraction(extraction_payload)
        assert record.salary_min is None
        assert record.salary_max is None


class TestAtsMatch:
    def test_complete_payload(self, ats_payload):
        match = parse_ats_match(ats_payload)
        assert match.match_score == 72
        assert match.matching_keywords == ("Go", "Kubernetes", "AWS")
        assert match.missing_keywords == ("Terraform", "gRPC")
        assert match.suggestions.startswith("Mention Terraform")

    def test_score_clamped(self, ats_payload):
        ats_payload["matchScore"] = 140
        assert parse_ats_match(ats_payload).match_score == 100

    def test_keywords_deduplicated(self, ats_payload):
        ats_payload["matchingKeywords"] = ["Go", "go ", "Go", "AWS", ""]
        assert parse_ats_match(ats_payload).matching_keywords == ("Go", "go", "AWS")

    def test_suggestion_list_joined(self, ats_payload):
        ats_payload["suggestions"] = ["Add metrics", "Add Terraform"]
        assert parse_ats_match(ats_payload).suggestions == "- Add metrics\n- Add Terraform"

    def test_null_keywords(self, ats_payload):
        ats_payload["missingKeywords"] = None
        assert parse_ats_match(ats_payload).missing_keywords == ()

    @pytest.mark.parametrize("field", ["matchScore", "summary"])
    def test_missing_required(self, ats_payload, field):
        del ats_payload[field]
        with pytest.raises(UpstreamServiceError) as exc_info:
            parse_ats_match(ats_payload)
        assert exc_info.value.service == "matcher"

    @pytest.mark.parametrize("value", [5, {"a": 1}, 3.5, True])
    def test_non_list_keywords_rejected(self, ats_payload, value):
        ats_payload["matchingKeywords"] = value
        with pytest.raises(UpstreamServiceError, match="matchingKeywords") as exc_info:
            parse_ats_match(ats_payload)
        assert exc_info.value.service == "matcher"

    def test_keyword_string_split(self, ats_payload):
        ats_payload["missingKeywords"] = "Terraform, gRPC"
        assert parse_ats_match(ats_payload).missing_keywords == ("Terraform", "gRPC")

    @pytest.mark.parametrize("value", ["excellent", [80], {"score": 80}, True, "NaN"])
    def test_unreadable_score_rejected(self, ats_payload, value):
        ats_payload["matchScore"] = value
        with pytest.raises(UpstreamServiceError, match="matchScore"):
            parse_ats_match(ats_payload)

    @pytest.mark.parametrize("value,expected", [(-12, 0), ("85", 85), ("72.5", 73), (64.4, 64)])
    def test_readable_score_normalized(self, ats_payload, value, expected):
        ats_payload["matchScore"] = value
        assert parse_ats_match(ats_payload).match_score == expected
