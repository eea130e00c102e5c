"""
FastAPI Application Entry Point

Integrates:
  - Gemini proxy route (POST /api/gemini)
  - Groq proxy route (POST /api/groq)
  - Health checks
  - Middleware for logging & error handling

Run: uvicorn main:app --reload --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api import gemini_router, groq_router
from config import Config
from inference import CORS_HEADERS

# Setup logging
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    # Startup
    logger.info("=" * 60)
    logger.info("Generative text proxy starting up...")
    logger.info(f"Environment: {Config.ENVIRONMENT}")
    for provider, configured in Config.provider_status().items():
        logger.info(f"Provider {provider}: {'configured' if configured else 'API key missing'}")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("Generative text proxy shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Generative Text Proxy",
    description="Server-side proxy for Gemini and Groq text generation",
    version="1.0.0",
    lifespan=lifespan,
)


# Middleware for logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.debug(f"{request.method} {request.url.path}")
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"Request error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
            headers=CORS_HEADERS,
        )


# Include routers
app.include_router(gemini_router)
app.include_router(groq_router)


# Health check endpoints
@app.get("/health/live")
async def health_live():
    """Live health check (Kubernetes liveness probe)."""
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready():
    """Readiness health check: reports which provider keys are set."""
    providers = Config.provider_status()
    return {
        "status": "ready" if any(providers.values()) else "not_ready",
        "providers": providers,
    }


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Generative Text Proxy",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "gemini": "POST /api/gemini",
            "groq": "POST /api/groq",
            "health_live": "GET /health/live",
            "health_ready": "GET /health/ready",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=Config.PORT,
        reload=Config.ENVIRONMENT == "development",
    )
