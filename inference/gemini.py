import logging
from typing import Any, Dict, Tuple

import httpx

from config import Config
from .base import ProviderHandler
from .errors import UpstreamError
from .types import GenerateRequest

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1/models"
DEFAULT_MODEL = "gemini-2.5-flash"
FALLBACK_MODEL = "gemini-1.5-pro"

# Primary statuses read as "model unavailable", not as a bad client payload
FALLBACK_STATUSES = frozenset({400, 404})

GENERATION_CONFIG = {
    "temperature": 0.7,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 8192,
}


def build_url(model: str) -> str:
    return f"{GEMINI_BASE_URL}/{model}:generateContent"


def build_payload(prompt: str) -> Dict[str, Any]:
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": dict(GENERATION_CONFIG),
    }


def require_candidates(data: Any) -> Dict[str, Any]:
    """
    Check that a 2xx reply carries generated text and return it unchanged.

    A blocked prompt comes back as 200 with only promptFeedback. That raises
    and is reported as an internal error, like an empty Groq reply.
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        text = None
    if not isinstance(text, str):
        raise ValueError(f"Gemini reply has no candidates: {data}")
    return data


class GeminiHandler(ProviderHandler):
    """
    Google Gemini proxy.

    Gemini's native generateContent reply already has the shared
    ``candidates[].content.parts[].text`` shape, so successful bodies are
    returned unchanged (extra fields such as usageMetadata included) once
    require_candidates() has checked them.

    When the requested model answers 400/404 the call is retried exactly once
    against FALLBACK_MODEL with the same prompt and generation config.
    """

    label = "Gemini"
    api_key_env = Config.PROVIDER_KEYS["gemini"]

    async def generate(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        request: GenerateRequest,
    ) -> Dict[str, Any]:
        model = request.model or DEFAULT_MODEL
        response, data = await self._call_model(client, api_key, model, request.prompt)

        if response.is_success:
            return require_candidates(data)

        logger.error(f"Gemini API error ({response.status_code}) from {model}: {data}")

        if response.status_code not in FALLBACK_STATUSES:
            raise UpstreamError(self.label, response.status_code, data)

        logger.warning(f"Retrying with fallback model {FALLBACK_MODEL}")
        fallback_response, fallback_data = await self._call_model(
            client, api_key, FALLBACK_MODEL, request.prompt
        )

        if not fallback_response.is_success:
            logger.error(
                f"Gemini fallback error ({fallback_response.status_code}) "
                f"from {FALLBACK_MODEL}: {fallback_data}"
            )
            raise UpstreamError(self.label, fallback_response.status_code, fallback_data)

        return require_candidates(fallback_data)

    async def _call_model(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        model: str,
        prompt: str,
    ) -> Tuple[httpx.Response, Any]:
        # Key travels as a query parameter; httpx request logging is kept at WARNING
        return await self.post_json(
            client,
            build_url(model),
            build_payload(prompt),
            params={"key": api_key},
        )
