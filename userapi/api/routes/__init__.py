"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic: adapt request, call registered handler

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""

import inspect

from fastapi import Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from userapi.api.http_adapters import HttpRequest, JsonResponseSink


async def run_handler(
    handler, request: Request, db: AsyncSession | None,
) -> Response:
    """Call a dispatch-registered (req, res) handler and return what it wrote."""
    req = await HttpRequest.from_request(request, db)
    res = JsonResponseSink()
    result = handler(req, res)
    if inspect.isawaitable(result):
        await result
    return res.to_response()
