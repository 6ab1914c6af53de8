"""
CORS Middleware
---------------
Browser clients from any origin may call the API.

Every response gets the same three headers, whether or not the request
carried an Origin header. OPTIONS requests (preflight) are answered here
with an empty 200 and never reach the routes or the database.
"""

from fastapi import Request
from fastapi.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def cors_middleware(request: Request, call_next):
    """Attach CORS headers, short-circuit preflight."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response
