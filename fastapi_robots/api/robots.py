"""
GET /robots.txt route, plus an undocumented HEAD twin.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

CONTENT_TYPE = "text/plain; charset=utf-8"


def create_robots_router(payload: str, max_age: int, include_in_schema: bool = True) -> APIRouter:
    """Build a router serving `payload` verbatim with public caching."""
    router = APIRouter(tags=["System"])

    # Encoded once; every request gets the same bytes
    body = payload.encode("utf-8")
    headers = {"Cache-Control": f"public, max-age={max_age}"}

    @router.get(
        "/robots.txt",
        response_class=PlainTextResponse,
        include_in_schema=include_in_schema,
        summary="Returns robots.txt file content",
        responses={200: {"description": "Content of robots.txt file"}},
    )
    def robots():
        return PlainTextResponse(content=body, media_type=CONTENT_TYPE, headers=headers)

    # Same handler; a second method on one route would duplicate its OpenAPI operation id
    router.add_api_route("/robots.txt", robots, methods=["HEAD"], include_in_schema=False)

    return router
