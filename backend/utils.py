import re

_OPENING_FENCE = re.compile(r"\A```[ \t]*[A-Za-z0-9_+.-]*[ \t]*\r?\n")
_CLOSING_FENCE = re.compile(r"\r?\n[ \t]*```[ \t]*\Z")


def unwrap_completion(text: str) -> str:
    """
    Strip the outermost markdown fence (```json ... ``` or ``` ... ```) that
    models tend to wrap around JSON despite being told not to.
    Only one layer is removed; text without a leading fence is just trimmed.
    """
    text = (text or "").strip()

    opening = _OPENING_FENCE.match(text)
    if not opening:
        return text

    text = text[opening.end():].rstrip()
    if text == "```":
        return ""
    text = _CLOSING_FENCE.sub("", text)
    return text.strip()
