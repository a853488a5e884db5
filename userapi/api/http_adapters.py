"""HTTP Adapters — FastAPI request/response shaped for (req, res) handlers.

Invariants:
    - HttpRequest.params_all() merges path, query and JSON-object body;
      later sources win (body > query > path)
    - JsonResponseSink accepts exactly one json() write
    - to_response() is 204 when the handler wrote nothing

Design Decisions:
    - Body read once in from_request(): handlers stay synchronous w.r.t. params
    - Non-object JSON bodies (lists, scalars) contribute no params
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class HttpRequest:
    """RequestLike over a FastAPI request, carrying the request's DB session."""

    def __init__(self, params: Mapping[str, Any], db: AsyncSession | None = None):
        self._params = dict(params)
        self.db = db

    @classmethod
    async def from_request(
        cls, request: Request, db: AsyncSession | None = None,
    ) -> "HttpRequest":
        params: dict[str, Any] = dict(request.path_params)
        params.update(request.query_params)
        body = await request.body()
        if body:
            try:
                payload = json.loads(body)
            except ValueError:
                logger.warning(
                    "Ignoring non-JSON request body",
                    extra={"path": request.url.path},
                )
                payload = None
            if isinstance(payload, dict):
                params.update(payload)
        return cls(params, db)

    def params_all(self) -> Mapping[str, Any]:
        return self._params


class JsonResponseSink:
    """ResponseSink that buffers one payload for the route to return."""

    def __init__(self):
        self.payload: Any = None
        self.status_code: int | None = None

    @property
    def sent(self) -> bool:
        return self.status_code is not None

    def json(self, payload: Any, status_code: int = status.HTTP_200_OK) -> None:
        if self.sent:
            raise RuntimeError("response already sent")
        self.payload = payload
        self.status_code = status_code

    def to_response(self) -> Response:
        if not self.sent:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return JSONResponse(status_code=self.status_code, content=self.payload)
