import logging
from typing import Any, Protocol

from pydantic import BaseModel

from config import Settings
from content_kinds import ContentKind
from models import ModelConfig
from prompts import build_prompt
from services.sanitizer import sanitize_request
from services.validation import validate_completion
from utils import unwrap_completion

logger = logging.getLogger(__name__)


class Completer(Protocol):
    async def complete(self, system: str, user: str, model_config: ModelConfig) -> str: ...


def model_config_for(kind: ContentKind, settings: Settings) -> ModelConfig:
    return ModelConfig(
        model=settings.chat_model,
        temperature=getattr(settings, kind.temperature_setting),
    )


async def generate(
    kind: ContentKind,
    topic: Any,
    count: Any,
    client: Completer,
    settings: Settings,
) -> list[BaseModel]:
    """
    Run one request through sanitize -> prompt -> complete -> unwrap -> validate.
    Any stage may raise a GenerationError; later stages are then skipped.
    """
    request = sanitize_request(kind, topic, count)
    logger.info(
        "Generating %d %s item(s) for topic %r", request.item_count, kind.name, request.topic
    )

    system, user = build_prompt(request, kind)
    raw = await client.complete(system, user, model_config_for(kind, settings))

    items = validate_completion(unwrap_completion(raw), kind)
    if len(items) != request.item_count:
        logger.info(
            "Requested %d %s item(s), model returned %d",
            request.item_count, kind.name, len(items),
        )
    return items
