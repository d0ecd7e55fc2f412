import asyncio
import logging
from typing import Optional

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from config import Settings
from errors import EmptyCompletion, UpstreamRejected, UpstreamUnavailable
from models import ModelConfig

logger = logging.getLogger(__name__)


def _upstream_message(exc: APIStatusError) -> str:
    """Pull the provider's own error message out of a non-2xx response."""
    body = exc.body
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return exc.message


class CompletionClient:
    """
    Thin wrapper around the chat-completions endpoint.

    One call per request, no automatic retries. A semaphore bounds how many
    upstream calls run at once; extra callers wait for a free slot.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        max_tokens: int = 2500,
        max_concurrency: int = 8,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url or None,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )
        self._max_tokens = max_tokens
        self._gate = asyncio.Semaphore(max_concurrency)

    @classmethod
    def from_settings(cls, s: Settings) -> "CompletionClient":
        return cls(
            api_key=s.openai_api_key,
            base_url=s.openai_base_url,
            timeout=s.completion_timeout_seconds,
            max_tokens=s.completion_max_tokens,
            max_concurrency=s.max_concurrent_completions,
        )

    async def complete(self, system: str, user: str, model_config: ModelConfig) -> str:
        """Send one prompt and return the raw completion text, untrimmed."""
        async with self._gate:
            try:
                response = await self._client.chat.completions.create(
                    model=model_config.model,
                    messages=[
                        {"role": "system", "content": system},
                        {"role": "user", "content": user},
                    ],
                    temperature=model_config.temperature,
                    max_tokens=self._max_tokens,
                )
            except APIConnectionError as e:
                # APITimeoutError is a subclass and lands here too
                logger.error("Completion service unreachable: %s", e)
                raise UpstreamUnavailable(str(e)) from e
            except APIStatusError as e:
                message = _upstream_message(e)
                logger.error(
                    "Completion service returned %s: %s", e.status_code, str(e.body)[:500]
                )
                raise UpstreamRejected(message, status=e.status_code) from e

        if not response.choices:
            raise EmptyCompletion("response contained no choices")
        raw = response.choices[0].message.content
        if not raw:
            raise EmptyCompletion("response contained no text")
        return raw

    async def close(self) -> None:
        await self._client.close()
