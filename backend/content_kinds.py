from dataclasses import dataclass

from pydantic import BaseModel

from models import FlashcardItem, QuizItem
from prompts import (
    FLASHCARDS_SYSTEM_PROMPT,
    FLASHCARDS_USER_PROMPT,
    QUIZ_SYSTEM_PROMPT,
    QUIZ_USER_PROMPT,
)


@dataclass(frozen=True)
class ContentKind:
    """Everything that differs between flashcard and quiz generation."""

    name: str
    system_prompt: str
    user_prompt: str
    field_name: str
    item_model: type[BaseModel]
    min_items: int
    max_items: int
    default_items: int
    count_param: str
    temperature_setting: str


FLASHCARDS = ContentKind(
    name="flashcards",
    system_prompt=FLASHCARDS_SYSTEM_PROMPT,
    user_prompt=FLASHCARDS_USER_PROMPT,
    field_name="cards",
    item_model=FlashcardItem,
    min_items=1,
    max_items=50,
    default_items=10,
    count_param="count",
    temperature_setting="flashcards_temperature",
)

QUIZ = ContentKind(
    name="quiz",
    system_prompt=QUIZ_SYSTEM_PROMPT,
    user_prompt=QUIZ_USER_PROMPT,
    field_name="questions",
    item_model=QuizItem,
    min_items=1,
    max_items=20,
    default_items=5,
    count_param="numQuestions",
    temperature_setting="quiz_temperature",
)
