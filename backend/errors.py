import re

# API keys (sk-..., including masked echoes like sk-abc***wxyz)
_API_KEY = re.compile(r"\bsk-[A-Za-z0-9_*\-]+")


class ConfigurationError(Exception):
    """Raised at startup when required settings are missing."""


class GenerationError(Exception):
    """
    Base class for every failure of the generation pipeline.
    `public_message` is what the caller sees; `detail` is for the logs only.
    """

    kind = "generation_error"
    status_code = 500
    public_message = "generation failed"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.public_message
        super().__init__(self.detail)


class InvalidInput(GenerationError):
    kind = "invalid_input"
    status_code = 400
    public_message = "missing or invalid topic"


class UpstreamUnavailable(GenerationError):
    kind = "upstream_unavailable"
    status_code = 502
    public_message = "completion service unavailable"


class UpstreamRejected(GenerationError):
    kind = "upstream_rejected"
    public_message = "completion service rejected the request"

    def __init__(self, detail: str | None = None, status: int | None = None):
        super().__init__(detail)
        self.status = status
        if detail:
            safe = _API_KEY.sub("sk-***", detail)
            self.public_message = f"{self.public_message}: {safe[:200]}"


class EmptyCompletion(GenerationError):
    kind = "empty_completion"
    public_message = "completion service returned no content"


class MalformedOutput(GenerationError):
    kind = "malformed_output"
    public_message = "model output was not valid JSON"


class SchemaMismatch(GenerationError):
    kind = "schema_mismatch"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.public_message = detail
