"""
Notes Backend - Validation and Sanitizer Unit Tests
===================================================

What:  Tests for validate_note, is_iso8601 and sanitize.
How:   Pure functions; no database or HTTP involved.
"""

import pytest

from notesapi.services.sanitizer import sanitize
from notesapi.services.validation import is_iso8601, validate_note

VALID_DATETIME = "2023-01-01T00:00:00Z"


def fields(errors):
    return [e.field for e in errors]


class TestValidateNote:
    """Field rules for title, text and datetime."""

    def test_valid_note_has_no_errors(self):
        assert validate_note("A", "", VALID_DATETIME) == []

    def test_empty_title_rejected(self):
        assert fields(validate_note("", "x", VALID_DATETIME)) == ["title"]

    def test_title_length_bounds(self):
        assert validate_note("a" * 255, "x", VALID_DATETIME) == []
        assert fields(validate_note("a" * 256, "x", VALID_DATETIME)) == ["title"]

    def test_title_length_counts_characters(self):
        """Non-ASCII characters count once each."""
        assert validate_note("é" * 255, "x", VALID_DATETIME) == []
        assert validate_note("😀" * 255, "x", VALID_DATETIME) == []

    @pytest.mark.parametrize("title", [None, 5, ["a"], {"a": 1}, True])
    def test_non_string_title_rejected(self, title):
        assert fields(validate_note(title, "x", VALID_DATETIME)) == ["title"]

    @pytest.mark.parametrize("text", [None, 0, [], False])
    def test_non_string_text_rejected(self, text):
        assert fields(validate_note("A", text, VALID_DATETIME)) == ["text"]

    def test_text_has_no_length_limit(self):
        assert validate_note("A", "x" * 100_000, VALID_DATETIME) == []

    def test_text_is_not_checked_as_datetime(self):
        assert validate_note("A", "not a date", VALID_DATETIME) == []

    @pytest.mark.parametrize("value", [None, 20230101, "bad-date", "", "2023-13-01"])
    def test_invalid_datetime_rejected(self, value):
        assert fields(validate_note("A", "x", value)) == ["datetime"]

    def test_all_rules_evaluated_in_field_order(self):
        errors = validate_note("", None, "bad-date")
        assert fields(errors) == ["title", "text", "datetime"]

    def test_error_messages(self):
        errors = validate_note(None, None, None)
        assert [e.message for e in errors] == [
            "Title must be a string of length 1 to 255 characters",
            "Text must be a string",
            "Datetime must be a ISO 8601 date",
        ]


class TestIsISO8601:

    @pytest.mark.parametrize("value", [
        "2023-01-01T00:00:00Z",
        "2023-01-01T00:00:00.123Z",
        "2023-01-01T10:30:00+02:00",
        "2023-01-01T10:30:00-0500",
        "2023-01-01 10:30",
        "2023-01-01",
        "20230101",
        "2023-01",
        "2023",
        "2023-W05",
        "2023-W05-2",
        "2023-031",
        "2023-01-01T24:00",
    ])
    def test_accepts(self, value):
        assert is_iso8601(value)

    @pytest.mark.parametrize("value", [
        "",
        "bad-date",
        "01/01/2023",
        "2023-00-10",
        "2023-01-32",
        "2023-01-01T25:00",
        "2023-01-01T10:60",
        "2023-W54",
        "2023-367",
        "2023-01-01T00:00:00Z\n",
        " 2023-01-01",
    ])
    def test_rejects(self, value):
        assert not is_iso8601(value)


class TestSanitize:

    def test_script_tags_escaped(self):
        assert sanitize("<script>x</script>") == "&lt;script&gt;x&lt;/script&gt;"

    def test_ampersand_escaped(self):
        assert sanitize("salt & pepper") == "salt &amp; pepper"

    def test_plain_text_unchanged(self):
        assert sanitize("Don't forget \"milk\"") == "Don't forget \"milk\""
        assert sanitize(VALID_DATETIME) == VALID_DATETIME

    def test_empty_string(self):
        assert sanitize("") == ""
