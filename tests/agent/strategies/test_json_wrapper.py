"""
Tests for the JSON decoding strategy.

These tests verify:
1. Plain JSON objects decode unchanged
2. A surrounding markdown code fence is stripped only when both markers exist
3. Anything else (prose, arrays, broken JSON) raises MalformedResponse
"""

import pytest

from fit_evaluator.agent.exceptions import MalformedResponse
from fit_evaluator.agent.strategies import JSONWrapper, strip_code_fences

PAYLOAD = '{"fitScore": 82, "analysis": "Strong match.", "strengths": ["React"], "missing": []}'


class TestStripCodeFences:
    def test_strips_json_tagged_fence(self):
        assert strip_code_fences(f"```json\n{PAYLOAD}\n```") == PAYLOAD

    def test_strips_untagged_fence(self):
        assert strip_code_fences(f"```\n{PAYLOAD}\n```") == PAYLOAD

    def test_strips_single_line_fence(self):
        assert strip_code_fences(f"```{PAYLOAD}```") == PAYLOAD

    def test_ignores_surrounding_whitespace(self):
        assert strip_code_fences(f"\n  ```json\n{PAYLOAD}\n```  \n") == PAYLOAD

    def test_requires_trailing_marker(self):
        assert strip_code_fences(f"```json\n{PAYLOAD}") is None

    def test_requires_leading_marker(self):
        assert strip_code_fences(f"{PAYLOAD}\n```") is None

    def test_prose_around_fence_is_not_stripped(self):
        assert strip_code_fences(f"Here you go:\n```json\n{PAYLOAD}\n```") is None


class TestJSONWrapper:
    def test_decodes_plain_object(self):
        data = JSONWrapper()(PAYLOAD)

        assert data["fitScore"] == 82
        assert data["strengths"] == ["React"]

    def test_decodes_fenced_object(self):
        data = JSONWrapper()(f"```json\n{PAYLOAD}\n```")

        assert data["analysis"] == "Strong match."

    def test_fenced_object_rejected_when_disabled(self):
        with pytest.raises(MalformedResponse):
            JSONWrapper(strip_fences=False)(f"```json\n{PAYLOAD}\n```")

    def test_prose_is_malformed(self):
        with pytest.raises(MalformedResponse) as exc_info:
            JSONWrapper()("I think this candidate is a great fit!")

        assert exc_info.value.raw == "I think this candidate is a great fit!"

    def test_broken_json_inside_fence_is_malformed(self):
        with pytest.raises(MalformedResponse):
            JSONWrapper()('```json\n{"fitScore": 82,\n```')

    def test_top_level_array_is_malformed(self):
        with pytest.raises(MalformedResponse):
            JSONWrapper()("[1, 2, 3]")

    def test_fenced_scalar_is_malformed(self):
        with pytest.raises(MalformedResponse):
            JSONWrapper()("```\n82\n```")

    def test_prose_before_json_is_not_repaired(self):
        with pytest.raises(MalformedResponse):
            JSONWrapper()(f"Sure! {PAYLOAD}")
