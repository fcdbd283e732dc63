"""
Tests for json_extract.py — fenced blocks, brace scanning, and the known
string-literal limitation.
"""
import json

from worksheet_ai.utils.json_extract import extract_json


# ── fenced blocks ─────────────────────────────────────────────────────────────

class TestFencedBlock:
    def test_returns_trimmed_interior(self):
        text = 'Here you go:\n```json\n  {"title": "T", "questions": []}  \n```\nEnjoy!'
        assert extract_json(text) == '{"title": "T", "questions": []}'

    def test_fenced_array_is_returned_whole(self):
        text = '```json\n[{"id": "q_1"}, {"id": "q_2"}]\n```'
        assert extract_json(text) == '[{"id": "q_1"}, {"id": "q_2"}]'

    def test_fence_wins_over_earlier_brace(self):
        text = 'note {draft} then ```json\n{"a": 1}\n```'
        assert extract_json(text) == '{"a": 1}'

    def test_unclosed_fence_falls_back_to_brace_scan(self):
        text = '```json\n{"a": {"b": 2}}'
        assert extract_json(text) == '{"a": {"b": 2}}'


# ── raw brace scanning ────────────────────────────────────────────────────────

class TestBraceScan:
    def test_balanced_outer_braces(self):
        assert extract_json('noise{"a":{"b":1}}more') == '{"a":{"b":1}}'

    def test_stops_at_first_complete_object(self):
        assert extract_json('{"a": 1} {"b": 2}') == '{"a": 1}'

    def test_result_is_parseable(self):
        payload = {"title": "Fractions", "questions": [{"id": "q_1", "points": 2}]}
        text = "Sure! " + json.dumps(payload) + " Let me know if you need more."
        assert json.loads(extract_json(text)) == payload

    def test_bare_array_yields_first_object_only(self):
        # Arrays are only recognised inside a ```json fence.
        assert extract_json('[{"id": "q_1"}, {"id": "q_2"}]') == '{"id": "q_1"}'

    def test_brace_inside_string_is_counted(self):
        # Known limitation: braces in string literals are not special-cased.
        text = '{"question": "What is }?", "x": 1}'
        assert extract_json(text) == '{"question": "What is }'


# ── failure ───────────────────────────────────────────────────────────────────

class TestNoJson:
    def test_no_brace_returns_empty(self):
        assert extract_json("I could not generate a worksheet.") == ""

    def test_empty_input(self):
        assert extract_json("") == ""

    def test_unbalanced_object_returns_empty(self):
        assert extract_json('{"a": {"b": 1}') == ""
