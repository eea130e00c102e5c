from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from pydantic import BaseModel, ConfigDict

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

_MISSING = object()


class GenerateRequest(BaseModel):
    """Inbound body accepted by both provider handlers."""

    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    prompt: Optional[str] = None
    model: Optional[str] = None
    max_tokens: Optional[int] = None       # groq only
    temperature: Optional[float] = None    # groq only


@dataclass
class HandlerResponse:
    status_code: int
    body: Optional[Dict[str, Any]] = None  # None -> empty body
    headers: Dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))


def candidates_envelope(text: str) -> Dict[str, Any]:
    """
    Wrap generated text into the shared output shape.

    The shape mirrors Gemini's native generateContent response so callers can
    read ``candidates[0].content.parts[0].text`` regardless of provider.
    """
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def error_envelope(
    error: str,
    message: Optional[str] = None,
    details: Any = _MISSING,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": error}
    if message is not None:
        body["message"] = message
    if details is not _MISSING:
        body["details"] = details
    return body
