from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from content_kinds import ContentKind
    from models import GenerationRequest


FLASHCARDS_SYSTEM_PROMPT = """
You are an expert educator who writes clear, accurate study flashcards.
You always answer with a single JSON object and nothing else.
""".strip()


FLASHCARDS_USER_PROMPT = """
Generate exactly {count} flashcards about the following topic: {topic}

Return ONLY a valid JSON object with exactly this shape:
{{"cards": [{{"question": "...", "answer": "..."}}]}}

Rules:
- The "cards" array must contain exactly {count} objects.
- "question": a clear, concise question or term (max 20 words)
- "answer": a clear, concise answer or definition (max 60 words)
- Do not wrap the output in markdown fences.
- Do not number the cards, do not add commentary, do not add any other keys.

Focus on key concepts, definitions, and important facts.
Vary the question types (what, why, how, who, when).
""".strip()


QUIZ_SYSTEM_PROMPT = """
You are an expert educator who writes fair multiple-choice quiz questions.
You always answer with a single JSON object and nothing else.
""".strip()


QUIZ_USER_PROMPT = """
Generate exactly {count} multiple-choice questions about the following topic: {topic}

Return ONLY a valid JSON object with exactly this shape:
{{"questions": [{{"question": "...", "options": ["...", "...", "...", "..."], "correct": "A"}}]}}

Rules:
- The "questions" array must contain exactly {count} objects.
- "question": the question text
- "options": an array of exactly 4 answer strings, without letter prefixes
- "correct": the letter of the correct option, one of "A", "B", "C", "D"
- Do not wrap the output in markdown fences.
- Do not number the questions, do not add commentary, do not add any other keys.

Make distractors plausible but clearly wrong upon reflection.
Vary difficulty: easy, medium, and harder questions.
""".strip()


def build_prompt(request: "GenerationRequest", kind: "ContentKind") -> tuple[str, str]:
    """Render the (system, user) instructions for one generation request."""
    user = kind.user_prompt.format(count=request.item_count, topic=request.topic)
    return kind.system_prompt, user
