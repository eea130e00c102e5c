"""
API module - FastAPI routes exposing the provider handlers.

Includes:
- gemini.py: POST /api/gemini
- groq.py: POST /api/groq
"""

from api.gemini import router as gemini_router
from api.groq import router as groq_router

__all__ = ["gemini_router", "groq_router"]
