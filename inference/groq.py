import logging
from typing import Any, Dict

import httpx

from config import Config
from .base import ProviderHandler
from .errors import UpstreamError
from .types import GenerateRequest, candidates_envelope

logger = logging.getLogger(__name__)

GROQ_CHAT_URL = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_MODEL = "llama-3.3-70b-versatile"
DEFAULT_MAX_TOKENS = 2048
DEFAULT_TEMPERATURE = 0.7


def build_payload(request: GenerateRequest) -> Dict[str, Any]:
    """OpenAI-compatible chat completion body with defaults for omitted fields."""
    return {
        "model": request.model or DEFAULT_MODEL,
        "messages": [{"role": "user", "content": request.prompt}],
        "max_tokens": request.max_tokens if request.max_tokens is not None else DEFAULT_MAX_TOKENS,
        "temperature": request.temperature if request.temperature is not None else DEFAULT_TEMPERATURE,
    }


def to_candidates(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert a chat completion into the shared candidates shape.

    Only the first choice is kept. A reply without choices raises and is
    reported as an internal error.
    """
    return candidates_envelope(data["choices"][0]["message"]["content"])


class GroqHandler(ProviderHandler):
    """Groq proxy (OpenAI-compatible chat completions). No fallback model."""

    label = "Groq"
    api_key_env = Config.PROVIDER_KEYS["groq"]

    async def generate(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        request: GenerateRequest,
    ) -> Dict[str, Any]:
        response, data = await self.post_json(
            client,
            GROQ_CHAT_URL,
            build_payload(request),
            headers={"Authorization": f"Bearer {api_key}"},
        )

        if not response.is_success:
            logger.error(f"Groq API error ({response.status_code}): {data}")
            raise UpstreamError(self.label, response.status_code, data)

        return to_candidates(data)
