import json
import logging

from pydantic import BaseModel, ValidationError

from content_kinds import ContentKind
from errors import MalformedOutput, SchemaMismatch

logger = logging.getLogger(__name__)


def validate_completion(text: str, kind: ContentKind) -> list[BaseModel]:
    """
    Parse cleaned completion text and check it against the kind's shape.

    The container must be an object holding a list under `kind.field_name`.
    Items that fail the item model are dropped; the request only fails if
    none survive. Surviving items keep their original order.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("Completion is not valid JSON (%s). Raw response:\n%s", e, text[:500])
        raise MalformedOutput("not valid JSON") from e

    field = kind.field_name
    if not isinstance(data, dict) or not isinstance(data.get(field), list):
        logger.warning("Completion lacks a '%s' list. Raw response:\n%s", field, text[:500])
        raise SchemaMismatch(f"expected field '{field}' to be a list")

    raw_items = data[field]
    if not raw_items:
        logger.warning("Completion returned an empty '%s' list", field)
        return []

    items = []
    for index, raw in enumerate(raw_items):
        try:
            items.append(kind.item_model.model_validate(raw))
        except ValidationError as e:
            logger.warning(
                "Dropping invalid %s item %d: %s", kind.name, index, e.errors(include_url=False)
            )

    if not items:
        raise SchemaMismatch(f"no valid items in '{field}'")
    return items
