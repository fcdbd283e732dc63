"""
Tests for AnswerVerifier — every failure mode falls back to the unverified
questions.
"""
import asyncio
import json

import pytest

from worksheet_ai.models.worksheet import Question
from worksheet_ai.services.ai import (
    ProviderStatusError,
    ResponseShapeError,
    TransportError,
)
from worksheet_ai.services.verifier import AnswerVerifier


def _run(coro):
    return asyncio.run(coro)


class StubAI:
    def __init__(self, reply):
        self.reply = reply
        self.prompts = []

    async def generate_completion(self, prompt, system_prompt=None):
        self.prompts.append(prompt)
        if isinstance(self.reply, BaseException):
            raise self.reply
        return self.reply


def _questions() -> list[Question]:
    return [
        Question(id="q_1", type="multiple_choice", question="2 + 2 = ?",
                 options=["3", "4"], correct_answer="3", explanation="Add.", points=2),
        Question(id="q_2", type="matching", question="Match.",
                 options=["A → 1", "B → 2"], correct_answer=["A-1", "B-2"], points=3),
    ]


class TestVerifySuccess:
    def test_corrected_list_returned(self):
        corrected = [q.model_dump(exclude_none=True) for q in _questions()]
        corrected[0]["correct_answer"] = "4"
        ai = StubAI("Checked.\n```json\n" + json.dumps(corrected) + "\n```")
        result = _run(AnswerVerifier(ai).verify(_questions(), "Math", "Addition"))
        assert result[0].correct_answer == "4"
        assert result[1].correct_answer == ["A-1", "B-2"]

    def test_prompt_contains_serialized_questions(self):
        ai = StubAI("")
        _run(AnswerVerifier(ai).verify(_questions(), "Math", "Addition"))
        prompt = ai.prompts[0]
        assert "SUBJECT: Math" in prompt
        assert "TOPIC: Addition" in prompt
        assert '"correct_answer": ["A-1", "B-2"]' in prompt
        assert "A → 1" in prompt
        # None fields are dropped
        assert "latex_diagram" not in prompt


class TestVerifyFallback:
    @pytest.mark.parametrize("failure", [
        ProviderStatusError(500, "internal error"),
        TransportError("connection reset"),
        ResponseShapeError("empty response from API"),
    ])
    def test_provider_failures(self, failure):
        original = _questions()
        result = _run(AnswerVerifier(StubAI(failure)).verify(original, "Math", "Addition"))
        assert result is original
        assert result == _questions()

    @pytest.mark.parametrize("reply", [
        "All answers look correct!",            # no JSON
        "```json\n[{\"id\": 1, \"points\": \"many\"}]\n```",  # wrong types
        "{broken",                                # unbalanced
        '[{"id": "q_1"}, {"id": "q_2"}]',         # bare array: only first object extracted
    ])
    def test_unusable_replies(self, reply):
        original = _questions()
        result = _run(AnswerVerifier(StubAI(reply)).verify(original, "Math", "Addition"))
        assert result is original

    def test_cancellation_propagates(self):
        with pytest.raises(asyncio.CancelledError):
            _run(AnswerVerifier(StubAI(asyncio.CancelledError())).verify(_questions(), "Math", "Addition"))
