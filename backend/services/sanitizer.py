import math
from typing import Any

from content_kinds import ContentKind
from errors import InvalidInput
from models import GenerationRequest


def _coerce_count(value: Any, kind: ContentKind) -> int:
    # bool is an int subclass but "count": true is not a count
    if value is None or isinstance(value, bool):
        return kind.default_items
    if isinstance(value, int):
        # arbitrarily large JSON integers must not go through float()
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return kind.default_items
    else:
        return kind.default_items
    if math.isnan(number):
        return kind.default_items
    if math.isinf(number):
        return kind.max_items if number > 0 else kind.min_items
    return int(number)


def sanitize_request(kind: ContentKind, topic: Any, count: Any = None) -> GenerationRequest:
    """
    Validate the topic and clamp the requested item count into the kind's range.
    Out-of-range counts are satisfied at the nearest bound, never rejected.
    """
    if not isinstance(topic, str) or not topic.strip():
        raise InvalidInput()

    number = _coerce_count(count, kind)
    item_count = min(max(number, kind.min_items), kind.max_items)
    return GenerationRequest(topic=topic.strip(), item_count=item_count)
