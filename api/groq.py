"""
Groq proxy route.

Replies use the same candidates shape as /api/gemini, so a frontend written
against Gemini works unchanged.

Expected payload:
    {"prompt": "Write a haiku", "model": "llama-3.3-70b-versatile",
     "max_tokens": 2048, "temperature": 0.7}
"""

from fastapi import APIRouter, Request, Response

from inference import GroqHandler
from api.responses import ALL_METHODS, serve

router = APIRouter(prefix="/api", tags=["groq"])

_handler = None


def get_groq_handler() -> GroqHandler:
    """Get or create the Groq handler (singleton)."""
    global _handler
    if _handler is None:
        _handler = GroqHandler()
    return _handler


@router.api_route("/groq", methods=ALL_METHODS)
async def groq_proxy(request: Request) -> Response:
    return await serve(get_groq_handler(), request)
