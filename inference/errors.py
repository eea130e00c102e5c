"""
Handler error taxonomy.

Every error raised inside a provider pipeline carries the HTTP status and the
error envelope the caller should receive. The pipeline converts them to a
HandlerResponse at a single boundary.
"""

from typing import Any, Dict, Optional

from .types import error_envelope


class HandlerError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code = 500

    def __init__(self, body: Dict[str, Any], status_code: Optional[int] = None):
        super().__init__(body.get("error", "handler error"))
        self.body = body
        if status_code is not None:
            self.status_code = status_code


class MethodNotAllowedError(HandlerError):
    status_code = 405

    def __init__(self):
        super().__init__(error_envelope("Method not allowed"))


class ConfigurationError(HandlerError):
    """A server-side secret is missing."""

    status_code = 500

    def __init__(self, env_var: str):
        super().__init__(
            error_envelope(
                "API key not configured",
                message=f"Please set {env_var} in the server environment (or .env file)",
            )
        )


class InvalidRequestError(HandlerError):
    """Body is not a JSON object or a field has the wrong type."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(error_envelope("Invalid request body", message=message))


class MissingPromptError(HandlerError):
    status_code = 400

    def __init__(self):
        super().__init__(error_envelope("Prompt is required"))


class UpstreamError(HandlerError):
    """The provider answered with a non-2xx status."""

    def __init__(self, provider_label: str, status_code: int, details: Any):
        super().__init__(
            error_envelope(f"{provider_label} API error", details=details),
            status_code=status_code,
        )
