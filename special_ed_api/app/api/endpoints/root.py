"""
Root informational endpoint.

Returns the service name as plain text so that a browser or a load
balancer health check can confirm the API is up.
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root(request: Request) -> str:
    return request.app.title
