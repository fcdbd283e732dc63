from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime


class WorksheetGeneratorInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    topic: str
    subject: str
    grade_level: str
    difficulty: str = "medium"
    language: str = "en"
    question_count: int = Field(default=10, ge=1, le=50)
    question_types: list[str] = []
    include_answer_key: bool = True
    additional_instructions: str = ""


class Question(BaseModel):
    id: str = ""
    type: str = ""
    question: str = ""
    options: list[str] | None = None
    correct_answer: str | list[str] | None = None
    explanation: str = ""
    points: int = 0
    image: str = ""
    latex_diagram: str | None = None

    @field_validator("id", "type", "question", "explanation", "image", mode="before")
    @classmethod
    def _null_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("points", mode="before")
    @classmethod
    def _null_points(cls, v):
        return 0 if v is None else v

    @field_validator("correct_answer", mode="before")
    @classmethod
    def _stringify_scalar_answer(cls, v):
        # Models often answer numeric questions with a bare number.
        if isinstance(v, (bool, int, float)):
            return str(v)
        return v


class GeneratedWorksheet(BaseModel):
    """The {title, questions} payload the model is asked to emit."""

    title: str = ""
    questions: list[Question] = []

    @field_validator("title", mode="before")
    @classmethod
    def _null_title(cls, v):
        return "" if v is None else v

    @field_validator("questions", mode="before")
    @classmethod
    def _null_questions(cls, v):
        return [] if v is None else v


class Worksheet(BaseModel):
    id: str
    title: str
    subject: str
    topic: str
    grade_level: str
    difficulty: str
    language: str
    questions: list[Question]
    include_answer_key: bool = True
    additional_instructions: str = ""
    status: str = "draft"
    downloads: int = 0
    created_at: datetime
    updated_at: datetime
