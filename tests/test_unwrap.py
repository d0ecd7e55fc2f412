from utils import unwrap_completion

PAYLOAD = '{"cards": [{"question": "Q1", "answer": "A1"}]}'


def test_plain_json_is_left_alone():
    assert unwrap_completion(PAYLOAD) == PAYLOAD


def test_surrounding_whitespace_is_trimmed():
    assert unwrap_completion(f"\n\n  {PAYLOAD}  \n") == PAYLOAD


def test_json_fence_is_removed():
    assert unwrap_completion(f"```json\n{PAYLOAD}\n```") == PAYLOAD


def test_bare_fence_is_removed():
    assert unwrap_completion(f"  ```\n{PAYLOAD}\n```\n") == PAYLOAD


def test_missing_closing_fence_still_strips_opening():
    assert unwrap_completion(f"```json\n{PAYLOAD}") == PAYLOAD


def test_only_outermost_fence_is_stripped():
    double = f"```json\n```json\n{PAYLOAD}\n```\n```"
    assert unwrap_completion(double) == f"```json\n{PAYLOAD}\n```"


def test_fence_after_prose_is_not_touched():
    text = f"Here you go:\n```json\n{PAYLOAD}\n```"
    assert unwrap_completion(text) == text


def test_empty_input():
    assert unwrap_completion("") == ""
    assert unwrap_completion("```json\n```") == ""
