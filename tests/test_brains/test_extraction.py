"""
Tests for JSON Extraction

Tests for videobrain/brains/extraction.py
"""

import json

import pytest

from videobrain.brains.extraction import extract_json
from videobrain.core.exceptions import ExtractionError


class TestExtractJson:
    """Tests for extract_json."""

    @pytest.mark.parametrize("value", [
        {"a": 1, "b": [1, 2, {"c": None}]},
        [1, "two", 3.5],
        "plain string",
        42,
        True,
    ])
    def test_idempotent_on_valid_json(self, value):
        """Test already-valid JSON text parses to the same value."""
        assert extract_json(json.dumps(value)) == value

    def test_json_fence(self):
        """Test JSON inside a ```json fence."""
        raw = 'Here you go:\n```json\n{"designPack": "clean_saas"}\n```\nDone.'

        assert extract_json(raw) == {"designPack": "clean_saas"}

    def test_bare_fence(self):
        """Test JSON inside an untagged fence."""
        raw = '```\n{"x": [1, 2]}\n```'

        assert extract_json(raw) == {"x": [1, 2]}

    def test_json_in_prose(self):
        """Test an object embedded in surrounding prose."""
        raw = 'Sure! The plan is {"scenes": [{"layout": "TEXT_LEFT"}]} - hope it helps.'

        assert extract_json(raw) == {"scenes": [{"layout": "TEXT_LEFT"}]}

    def test_broken_fence_falls_back_to_braces(self):
        """Test the brace span is tried when the fenced text is not JSON."""
        raw = '```json\nnot json\n```\nActual: {"ok": true}'

        assert extract_json(raw) == {"ok": True}

    def test_whitespace_is_stripped(self):
        """Test surrounding whitespace does not matter."""
        assert extract_json('  \n {"a": 1} \n ') == {"a": 1}

    def test_prose_without_json_raises(self):
        """Test plain prose raises ExtractionError with a preview."""
        raw = "I think your product is great and would make a wonderful video."

        with pytest.raises(ExtractionError) as exc_info:
            extract_json(raw)

        assert exc_info.value.raw_preview == raw
        assert str(exc_info.value).startswith("Failed to parse JSON:")

    def test_preview_is_truncated(self):
        """Test the preview keeps at most 200 characters."""
        raw = "x" * 1000

        with pytest.raises(ExtractionError) as exc_info:
            extract_json(raw)

        assert len(exc_info.value.raw_preview) == 200

    def test_unbalanced_braces_raise(self):
        """Test a truncated object is not accepted."""
        with pytest.raises(ExtractionError):
            extract_json('{"scenes": [{"layout": "TEXT_LEFT"}')

    def test_non_string_raises(self):
        """Test non-text input raises ExtractionError."""
        with pytest.raises(ExtractionError):
            extract_json(None)

    @pytest.mark.parametrize("raw", ["[" * 200000, "{" + '"a":[' * 100000 + "}"])
    def test_deeply_nested_text_raises(self, raw):
        """Test nesting too deep to decode is an extraction failure."""
        with pytest.raises(ExtractionError) as exc_info:
            extract_json(raw)

        assert exc_info.value.raw_preview == raw[:200]
