"""
Answer verification — second pass asking the model to fact-check its own
questions.

Verification is an enhancement, not a requirement: every failure (network,
provider status, empty reply, missing or malformed JSON) is logged and the
original questions are returned untouched. Generation, by contrast, fails
loudly.
"""
from __future__ import annotations

import json
import logging

from pydantic import TypeAdapter, ValidationError

from worksheet_ai.models.worksheet import Question
from worksheet_ai.prompts.worksheet_generation import build_verification_prompt
from worksheet_ai.services.ai import AIService, GenerationError
from worksheet_ai.utils.json_extract import extract_json

logger = logging.getLogger(__name__)

_QUESTION_LIST = TypeAdapter(list[Question])


class AnswerVerifier:
    def __init__(self, ai: AIService):
        self.ai = ai

    async def verify(
        self,
        questions: list[Question],
        subject: str,
        topic: str,
    ) -> list[Question]:
        try:
            questions_json = json.dumps(
                [q.model_dump(mode="json", exclude_none=True) for q in questions],
                ensure_ascii=False,
            )
        except (TypeError, ValueError) as exc:
            logger.warning("Failed to serialize questions for verification: %s", exc)
            return questions

        prompt = build_verification_prompt(questions_json, subject, topic)

        try:
            response_text = await self.ai.generate_completion(prompt)
        except GenerationError as exc:
            logger.warning("Verification request failed: %s", exc)
            return questions

        json_str = extract_json(response_text)
        if not json_str:
            logger.warning("No JSON found in verification response")
            return questions

        try:
            verified = _QUESTION_LIST.validate_json(json_str)
        except ValidationError as exc:
            logger.warning("Failed to parse verified questions: %s", exc)
            return questions

        logger.info("Answer verification complete - %d questions verified", len(verified))
        return verified
