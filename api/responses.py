"""
Glue between FastAPI and the provider handlers.

Routes accept every method and let the handler decide: OPTIONS preflight,
405 for anything but POST, and the CORS headers on every response.
"""

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from inference import HandlerResponse, ProviderHandler

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def to_http_response(result: HandlerResponse) -> Response:
    if result.body is None:
        return Response(status_code=result.status_code, headers=result.headers)
    return JSONResponse(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )


async def serve(handler: ProviderHandler, request: Request) -> Response:
    """Run one request through a handler and render the result."""
    body = await request.body()
    result = await handler.handle(request.method, body)
    return to_http_response(result)
