"""
Gemini proxy route.

Keeps GEMINI_API_KEY on the server; callers only send a prompt.

Expected payload:
    {"prompt": "Write a haiku", "model": "gemini-2.5-flash"}
"""

from fastapi import APIRouter, Request, Response

from inference import GeminiHandler
from api.responses import ALL_METHODS, serve

router = APIRouter(prefix="/api", tags=["gemini"])

# Storage for handler (initialized once)
_handler = None


def get_gemini_handler() -> GeminiHandler:
    """Get or create the Gemini handler (singleton)."""
    global _handler
    if _handler is None:
        _handler = GeminiHandler()
    return _handler


@router.api_route("/gemini", methods=ALL_METHODS)
async def gemini_proxy(request: Request) -> Response:
    return await serve(get_gemini_handler(), request)
