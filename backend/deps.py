from fastapi import Request

from services.completion import CompletionClient


def get_completion_client(request: Request) -> CompletionClient:
    """Shared completion client, built once at startup (see main.lifespan)."""
    return request.app.state.completion_client
