"""Boundary Protocols — contracts between the dispatch core and the transport.

Invariants:
    - Core NEVER imports from api/ or infrastructure/
    - Handlers receive (request, response) shaped by these Protocols only

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - ResponseSink.json takes status_code as keyword so fakes can ignore it
"""

from collections.abc import Mapping
from typing import Any, Protocol


class RequestLike(Protocol):
    """Inbound request: a flat mapping of parameter name -> value."""
    def params_all(self) -> Mapping[str, Any]: ...


class ResponseSink(Protocol):
    """Outbound response: accepts one JSON-serializable payload."""
    def json(self, payload: Any, status_code: int = 200) -> None: ...


class Schema(Protocol):
    """Validation engine contract — satisfied by pydantic BaseModel classes."""
    @classmethod
    def model_validate(cls, obj: Any) -> Any: ...
