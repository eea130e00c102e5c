"""
Provider boundary layer for text generation.

This package hides provider API keys from callers and normalizes each
provider's reply into one shared shape, so routes stay agnostic of the
upstream service.

Supported providers:
- GeminiHandler: Google Gemini generateContent (with model fallback)
- GroqHandler: Groq OpenAI-compatible chat completions

Example usage:
    from inference import GroqHandler

    handler = GroqHandler()
    response = await handler.handle("POST", {"prompt": "Hello, world!"})
    response.status_code, response.body
"""

from .types import CORS_HEADERS, GenerateRequest, HandlerResponse
from .errors import (
    HandlerError,
    MethodNotAllowedError,
    ConfigurationError,
    InvalidRequestError,
    MissingPromptError,
    UpstreamError,
)
from .base import ProviderHandler
from .gemini import GeminiHandler
from .groq import GroqHandler

__all__ = [
    "CORS_HEADERS",
    "GenerateRequest",
    "HandlerResponse",
    "HandlerError",
    "MethodNotAllowedError",
    "ConfigurationError",
    "InvalidRequestError",
    "MissingPromptError",
    "UpstreamError",
    "ProviderHandler",
    "GeminiHandler",
    "GroqHandler",
]
