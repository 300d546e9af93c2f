"""
Test Response Parser Module

This module tests the extractors that turn free-form completion text into
question lists, scores, answer lists and JSON objects.

Dependencies:
- pytest: For testing framework
- app.helper.response_parser: The module being tested

Author: @kcaparas1630
"""

import pytest
from app.helper.response_parser import (
    extract_question_list,
    extract_score,
    extract_structured_list,
    extract_json_object
)

class TestExtractQuestionList:
    """Test the question-list extractor."""

    def test_blank_lines_dropped_numbering_preserved(self):
        """Test that blank lines are dropped and numbering is kept."""
        result = extract_question_list("1. What is X?\n\n2. What is Y?\n")
        assert result.ok
        assert result.value == ["1. What is X?", "2. What is Y?"]

    def test_lines_are_trimmed(self):
        """Test that surrounding whitespace is trimmed from each line."""
        result = extract_question_list("   1. First?  \r\n\t2. Second?\t")
        assert result.value == ["1. First?", "2. Second?"]

    @pytest.mark.parametrize("content", ["", "   ", "\n\n  \n", None])
    def test_empty_generation(self, content):
        """Test that text without usable lines is a failure, not an exception."""
        result = extract_question_list(content)
        assert not result.ok
        assert result.value is None
        assert result.error

class TestExtractScore:
    """Test the lenient score extractor."""

    def test_score_found(self):
        """Test the documented evaluation format."""
        result = extract_score("Score (out of 10): 7\nFeedback: good")
        assert result.ok
        assert result.value == 7

    def test_score_case_insensitive_and_spacing(self):
        """Test that case and spacing around the colon do not matter."""
        assert extract_score("score(OUT OF 10) :   9").value == 9

    def test_missing_score_defaults_to_zero(self):
        """Test that a missing pattern degrades to 0 without failing."""
        result = extract_score("Feedback: the answer was vague.")
        assert result.ok
        assert result.value == 0

    def test_first_score_wins(self):
        """Test that the first matching score is used."""
        assert extract_score("Score (out of 10): 4\nScore (out of 10): 8").value == 4

    def test_score_clamped_to_ten(self):
        """Test that out-of-range scores are clamped to the maximum."""
        assert extract_score("Score (out of 10): 42").value == 10

    def test_none_content(self):
        """Test that missing content is handled."""
        assert extract_score(None).value == 0

class TestExtractStructuredList:
    """Test the structured-list extractor."""

    def test_clean_json(self):
        """Test a response that is exactly the requested JSON."""
        raw = '[{"question": "Q1", "idealAnswer": "A1"}]'
        result = extract_structured_list(raw)
        assert result.ok
        assert result.value == [{"question": "Q1", "idealAnswer": "A1"}]

    def test_json_surrounded_by_prose(self):
        """Test that prose and code fences around the array are ignored."""
        raw = 'Here you go:\n```json\n[\n  {"question": "Q1", "idealAnswer": "A1"},\n  {"question": "Q2", "idealAnswer": "A2"}\n]\n```\nGood luck!'
        result = extract_structured_list(raw)
        assert result.ok
        assert [item["question"] for item in result.value] == ["Q1", "Q2"]

    def test_no_bracketed_region(self):
        """Test that text without an array is a parse failure."""
        result = extract_structured_list("I cannot help with that.")
        assert not result.ok
        assert result.error == "No JSON found"
        assert result.raw == "I cannot help with that."

    def test_invalid_json(self):
        """Test that a malformed array is a parse failure."""
        result = extract_structured_list('[{"question": "Q1", "idealAnswer": }]')
        assert not result.ok
        assert result.error.startswith("Invalid JSON")

    def test_greedy_region_spanning_two_arrays_fails(self):
        """Test that the greedy match does not silently pick one of two arrays."""
        raw = '[{"a": 1}] and also [{"b": 2}]'
        assert not extract_structured_list(raw).ok

class TestExtractJsonObject:
    """Test the JSON-object extractor."""

    def test_object_in_prose(self):
        """Test that an object embedded in prose is extracted."""
        result = extract_json_object('Sure! {"atsScore": 80, "summary": "Solid"} Thanks')
        assert result.ok
        assert result.value == {"atsScore": 80, "summary": "Solid"}

    def test_no_object(self):
        """Test that text without braces is a failure."""
        result = extract_json_object("no json here")
        assert not result.ok

    def test_invalid_object(self):
        """Test that a malformed object is a failure."""
        assert not extract_json_object("{atsScore: 80}").ok
