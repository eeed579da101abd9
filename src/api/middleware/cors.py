"""Fixed CORS headers middleware."""

from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Client-Info, Apikey",
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Attach the permissive CORS headers to every response.

    Starlette's CORSMiddleware only answers preflights that carry an Origin
    header; the webhook must answer any OPTIONS request itself.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
