"""
Worksheet generators — interchangeable providers behind one async interface.

  MockGenerator       deterministic demo worksheets, no network
  AnthropicGenerator  LLM generation + diagrams/images + verification pass
  OpenAIGenerator     placeholder, currently serves demo worksheets

get_generator(settings) picks one from settings.llm_provider.
"""
from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from pydantic import ValidationError

from worksheet_ai.models.worksheet import (
    GeneratedWorksheet,
    Question,
    Worksheet,
    WorksheetGeneratorInput,
)
from worksheet_ai.prompts.worksheet_generation import (
    DEFAULT_QUESTION_TYPE,
    SYSTEM_PROMPT,
    build_worksheet_prompt,
)
from worksheet_ai.services.ai import AIService, GenerationError
from worksheet_ai.services.diagrams import add_diagrams, needs_diagrams
from worksheet_ai.services.images import ImageLookup, get_image_lookup
from worksheet_ai.services.verifier import AnswerVerifier
from worksheet_ai.utils.json_extract import extract_json

logger = logging.getLogger(__name__)

EARLY_GRADES = frozenset({"k", "kindergarten", "pre-k", "prek", "1", "2", "1st", "2nd"})

_DEFAULT_POINTS: dict[str, int] = {
    "essay": 10,
    "short_answer": 5,
    "matching": 3,
}


class NoJSONFoundError(GenerationError):
    pass


class WorksheetParseError(GenerationError):
    pass


def default_points(question_type: str) -> int:
    return _DEFAULT_POINTS.get(question_type, 2)


def is_early_grade(grade_level: str) -> bool:
    # Exact match only: "10th" must not count as grade "1".
    return grade_level.strip().lower() in EARLY_GRADES


def new_worksheet_id() -> str:
    return "ws_" + str(uuid.uuid4())[:8]


def _new_worksheet(request: WorksheetGeneratorInput, title: str, questions: list[Question]) -> Worksheet:
    now = datetime.now(timezone.utc)
    return Worksheet(
        id=new_worksheet_id(),
        title=title,
        subject=request.subject,
        topic=request.topic,
        grade_level=request.grade_level,
        difficulty=request.difficulty,
        language=request.language,
        questions=questions,
        include_answer_key=request.include_answer_key,
        additional_instructions=request.additional_instructions,
        status="draft",
        downloads=0,
        created_at=now,
        updated_at=now,
    )


class WorksheetGenerator(ABC):
    @abstractmethod
    async def generate_worksheet(self, request: WorksheetGeneratorInput) -> Worksheet:
        ...


# ──────────────────────────────────────────────
# Demo provider
# ──────────────────────────────────────────────

def demo_question(num: int, question_type: str, topic: str) -> Question:
    """Canned question number ``num`` (1-based) of the given type."""
    q = Question(id=f"q_{num}", type=question_type, points=default_points(question_type))

    if question_type == "multiple_choice":
        q.question = f"Question {num}: Which of the following best describes {topic}?"
        q.options = ["Option A - Correct answer", "Option B", "Option C", "Option D"]
        q.correct_answer = "Option A - Correct answer"
        q.explanation = "This is the correct answer based on the topic."
    elif question_type == "true_false":
        q.question = f"Question {num}: True or False: {topic} is an important concept to learn."
        q.options = ["True", "False"]
        q.correct_answer = "True"
        q.explanation = "This statement is true because of its educational significance."
    elif question_type == "fill_blank":
        q.question = f"Question {num}: The main concept of {topic} is called __________."
        q.correct_answer = "answer"
        q.explanation = "Fill in the blank with the appropriate term."
    elif question_type == "short_answer":
        q.question = f"Question {num}: Briefly explain the importance of {topic}."
        q.correct_answer = "A comprehensive answer explaining the importance..."
        q.explanation = "A good answer should include key concepts."
    elif question_type == "essay":
        q.question = f"Question {num}: Write a detailed essay about {topic} and its applications."
        q.correct_answer = "Essays are evaluated based on content, structure, and clarity."
        q.explanation = "Include an introduction, body paragraphs, and conclusion."
    elif question_type == "matching":
        q.question = f"Question {num}: Match the following terms related to {topic}:"
        q.options = ["Term A → Definition 1", "Term B → Definition 2", "Term C → Definition 3"]
        q.correct_answer = ["A-1", "B-2", "C-3"]
        q.explanation = "Match each term with its correct definition."
    else:
        q.question = f"Question {num}: Answer the following about {topic}."
        q.correct_answer = "Sample answer"

    return q


class MockGenerator(WorksheetGenerator):
    """Demo worksheets without any AI call. Never fails."""

    async def generate_worksheet(self, request: WorksheetGeneratorInput) -> Worksheet:
        return self.build(request)

    def build(self, request: WorksheetGeneratorInput) -> Worksheet:
        types = request.question_types or [DEFAULT_QUESTION_TYPE]
        questions = [
            demo_question(i + 1, types[i % len(types)], request.topic)
            for i in range(request.question_count)
        ]
        return _new_worksheet(request, f"{request.topic} Worksheet", questions)


# ──────────────────────────────────────────────
# Anthropic provider
# ──────────────────────────────────────────────

class AnthropicGenerator(WorksheetGenerator):
    def __init__(
        self,
        ai: AIService | None = None,
        image_lookup: ImageLookup | None = None,
        verifier: AnswerVerifier | None = None,
    ):
        self.ai = ai or AIService()
        self.image_lookup = image_lookup or get_image_lookup()
        self.verifier = verifier or AnswerVerifier(self.ai)

    async def generate_worksheet(self, request: WorksheetGeneratorInput) -> Worksheet:
        prompt = build_worksheet_prompt(request)
        response_text = await self.ai.generate_completion(prompt, system_prompt=SYSTEM_PROMPT)
        logger.info("AI response (first 500 chars): %.500s", response_text)

        generated = self.parse_response(response_text)
        questions = self.fill_defaults(generated.questions)

        if needs_diagrams(request.subject, request.topic):
            logger.info("Adding SVG diagrams for geometry/physics questions")
            questions = add_diagrams(questions)
        elif is_early_grade(request.grade_level):
            logger.info("Adding images for early grade worksheet")
            self.attach_images(questions, request.topic)

        logger.info("Double-checking answers for accuracy")
        verified = await self.verifier.verify(questions, request.subject, request.topic)
        # corrected replies may drop ids or points
        questions = self.fill_defaults(verified)

        return _new_worksheet(request, generated.title, questions)

    @staticmethod
    def parse_response(response_text: str) -> GeneratedWorksheet:
        json_str = extract_json(response_text)
        if not json_str:
            logger.error("Full response that failed parsing: %s", response_text)
            raise NoJSONFoundError("no JSON found in response")
        try:
            return GeneratedWorksheet.model_validate_json(json_str)
        except ValidationError as e:
            raise WorksheetParseError(f"failed to parse generated worksheet: {e}") from e

    @staticmethod
    def fill_defaults(questions: list[Question]) -> list[Question]:
        for i, q in enumerate(questions):
            if not q.id:
                q.id = f"q_{i + 1}"
            if q.points == 0:
                q.points = default_points(q.type)
        return questions

    def attach_images(self, questions: list[Question], topic: str) -> None:
        for i, q in enumerate(questions):
            if q.image:
                continue
            image = self.image_lookup.lookup(topic, q.question)
            if image:
                q.image = image
                logger.info("Added image for question %d", i + 1)


# ──────────────────────────────────────────────
# OpenAI provider (placeholder)
# ──────────────────────────────────────────────

class OpenAIGenerator(WorksheetGenerator):
    def __init__(self, api_key: str = ""):
        self.api_key = api_key

    async def generate_worksheet(self, request: WorksheetGeneratorInput) -> Worksheet:
        # TODO: call the OpenAI chat completions API once prompts are tuned for it
        logger.info("OpenAI provider not implemented; serving demo worksheet")
        return await MockGenerator().generate_worksheet(request)


def get_generator(settings=None) -> WorksheetGenerator:
    """Return the configured provider."""
    if settings is None:
        from worksheet_ai.core.config import get_settings
        settings = get_settings()

    provider = settings.llm_provider.lower()
    if provider == "mock":
        return MockGenerator()
    if provider == "anthropic":
        if not settings.anthropic_api_key:
            logger.warning("ANTHROPIC_API_KEY is not set; using demo generator")
            return MockGenerator()
        return AnthropicGenerator(
            ai=AIService(settings=settings),
            image_lookup=get_image_lookup(settings),
        )
    if provider == "openai":
        return OpenAIGenerator(api_key=settings.openai_api_key)
    raise ValueError(f"Unknown llm_provider: {settings.llm_provider!r}")
