from content_kinds import FLASHCARDS, QUIZ
from models import GenerationRequest
from prompts import build_prompt


def test_prompt_is_deterministic():
    request = GenerationRequest(topic="Photosynthesis", item_count=7)
    assert build_prompt(request, FLASHCARDS) == build_prompt(request, FLASHCARDS)
    assert build_prompt(request, QUIZ) == build_prompt(request, QUIZ)


def test_flashcard_prompt_states_count_shape_and_rules():
    system, user = build_prompt(GenerationRequest(topic="Photosynthesis", item_count=7), FLASHCARDS)

    assert system == FLASHCARDS.system_prompt
    assert "Generate exactly 7 flashcards" in user
    assert "Photosynthesis" in user
    assert '{"cards": [{"question": "...", "answer": "..."}]}' in user
    assert "markdown fences" in user
    assert "Do not number" in user
    assert "commentary" in user
    assert "other keys" in user


def test_quiz_prompt_states_shape():
    _, user = build_prompt(GenerationRequest(topic="World War I", item_count=4), QUIZ)

    assert "Generate exactly 4 multiple-choice questions" in user
    assert '"options": ["...", "...", "...", "..."]' in user
    assert '"correct": "A"' in user


def test_braces_in_topic_are_kept_literally():
    _, user = build_prompt(GenerationRequest(topic="Sets {a, b}", item_count=2), FLASHCARDS)
    assert "Sets {a, b}" in user
