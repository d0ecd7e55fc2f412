from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


# ── Request models ────────────────────────────────────────────────────────────
# Fields are typed loosely on purpose: topic and count are sanitized by
# services.sanitizer so bad values become a 400 instead of a 422.

class CardsRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    topic: Optional[Any] = None
    count: Optional[Any] = None


class QuizRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    topic: Optional[Any] = None
    numQuestions: Optional[Any] = None


class GenerationRequest(BaseModel):
    topic: str
    item_count: int


class ModelConfig(BaseModel):
    model: str
    temperature: float


# ── Generated items ───────────────────────────────────────────────────────────

def _not_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("must not be empty")
    return v


class FlashcardItem(BaseModel):
    question: StrictStr
    answer: StrictStr

    @field_validator("question", "answer")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return _not_blank(v)


class QuizItem(BaseModel):
    question: StrictStr
    options: list[StrictStr] = Field(min_length=4, max_length=4)
    correct: Literal["A", "B", "C", "D"]

    @field_validator("question")
    @classmethod
    def question_not_empty(cls, v: str) -> str:
        return _not_blank(v)


# ── Response models ───────────────────────────────────────────────────────────

class CardsResponse(BaseModel):
    cards: list[FlashcardItem]


class QuizResponse(BaseModel):
    questions: list[QuizItem]


class ErrorResponse(BaseModel):
    error: str
