"""Dispatch Context — the single point where handler failures become JSON.

Invariants:
    - SymbolicError (raised or returned) → exactly one res.json({"error": {code, message}})
    - Any other exception propagates unchanged (same object), nothing written
    - Awaitable handler results are awaited inside the dispatcher, so failures after
      an await are caught by the same policy
    - No per-request state: one instance serves every request concurrently

Design Decisions:
    - Response sink is the second positional argument (handler(req, res)),
      or the 'res' keyword
    - get_dispatch_context() is cached (lru_cache) — one instance per process,
      same pattern as get_settings(); tests and callers may inject their own
    - bug.* codes are still reported to the client but logged at ERROR
"""

import inspect
import logging
from collections.abc import Callable
from functools import lru_cache
from typing import Any

from userapi.core.method_interceptor import MethodInterceptor
from userapi.core.protocols import ResponseSink
from userapi.core.symbolic_error import SymbolicError

logger = logging.getLogger(__name__)

# ADR: status derived from the code namespace, exact codes override
_STATUS_BY_CODE = {
    "user.notFound": 404,
}
_STATUS_BY_NAMESPACE = {
    "api": 400,
    "call": 400,
    "auth": 401,
    "user": 409,
    "db": 503,
    "bug": 500,
}
DEFAULT_ERROR_STATUS = 400


def status_for(error: SymbolicError) -> int:
    """HTTP status for a SymbolicError, by exact code then by namespace."""
    if error.code in _STATUS_BY_CODE:
        return _STATUS_BY_CODE[error.code]
    return _STATUS_BY_NAMESPACE.get(error.namespace, DEFAULT_ERROR_STATUS)


class DispatchContext:
    """Catch-and-serialize policy applied to every registered handler collection."""

    def __init__(self):
        self._interceptor = MethodInterceptor(DispatchContext.dispatch, self)

    @staticmethod
    def get_instance() -> "DispatchContext":
        return get_dispatch_context()

    def register(self, handlers):
        """Wrap every handler of the collection. Call once per collection."""
        return self._interceptor.intercept(handlers)

    def dispatch(
        self, original: Callable, receiver: Any, args: tuple, kwargs: dict,
    ):
        """Interceptor callback: run the handler, report SymbolicErrors."""
        res = _response_of(args, kwargs)
        name = _name_of(original)
        try:
            result = original(*args, **kwargs)
        except SymbolicError as e:
            self.report_error(res, e, handler=name)
            return None
        # Covers async def handlers and any callable returning an awaitable
        if inspect.isawaitable(result):
            return self._dispatch_async(result, res, name)
        if isinstance(result, SymbolicError):
            self.report_error(res, result, handler=name)
            return None
        return result

    async def _dispatch_async(self, pending, res: ResponseSink, name: str):
        try:
            result = await pending
        except SymbolicError as e:
            self.report_error(res, e, handler=name)
            return None
        if isinstance(result, SymbolicError):
            self.report_error(res, result, handler=name)
            return None
        return result

    def report_error(
        self, res: ResponseSink, error: BaseException, handler: str | None = None,
    ) -> None:
        """Serialize a SymbolicError to res; re-raise anything else.

        Also the entry point for handlers that catch their own failures,
        e.g. inside a background task.
        """
        if not isinstance(error, SymbolicError):
            raise error
        log = logger.error if error.namespace == "bug" else logger.warning
        log(
            f"Handler failed: {error}",
            extra={"error_code": error.code, "handler": handler},
        )
        res.json(error.to_response(), status_code=status_for(error))


def _response_of(args: tuple, kwargs: dict) -> ResponseSink | None:
    if len(args) > 1:
        return args[1]
    return kwargs.get("res")


@lru_cache
def get_dispatch_context() -> DispatchContext:
    return DispatchContext()


def _name_of(handler: Callable) -> str:
    return getattr(handler, "__name__", repr(handler))
