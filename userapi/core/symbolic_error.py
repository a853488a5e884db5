"""Symbolic Error — chainable error with a stable, machine-readable code.

Invariants:
    - code is never empty at read time (falls back to "unknown")
    - to_dict() is {code, message} only: identical whether or not a cause was kept
    - cause retained only when debug was on at construction time
    - str() with debug off is exactly "SymbolicError(<code>): <message>"

Design Decisions:
    - Debug flag is module state, set once at startup from settings
      (ADR: tests reset it via fixture, never toggle concurrently)
    - Stack precedence in str(): own traceback > chained traceback > chained str
"""

import traceback

_debug = False


class SymbolicError(Exception):
    """Error with a dotted symbolic code, e.g. 'auth.badCredentials'."""

    def __init__(
        self,
        code: str | None = None,
        message: str | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message or "")
        self.code = code or "unknown"
        self.message = message or ""
        self.cause = cause if _debug else None

    @staticmethod
    def set_debug(enabled: bool) -> None:
        """Toggle cause retention and traceback output for future errors."""
        global _debug
        _debug = bool(enabled)

    @staticmethod
    def get_debug() -> bool:
        return _debug

    @property
    def namespace(self) -> str:
        """Leading segment of the code: 'auth' for 'auth.badCredentials'."""
        return self.code.split(".", 1)[0]

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}

    def to_response(self) -> dict:
        """Wrap in the {error: ...} envelope sent to clients."""
        return {"error": self.to_dict()}

    def __str__(self) -> str:
        s = f"SymbolicError({self.code}): {self.message}"
        if not _debug:
            return s
        if self.__traceback__ is not None:
            return s + "\n: " + "".join(traceback.format_tb(self.__traceback__))
        if self.cause is None:
            return s
        if self.cause.__traceback__ is not None:
            return s + "\n: " + "".join(traceback.format_exception(
                type(self.cause), self.cause, self.cause.__traceback__,
            ))
        return s + "\nChained: " + str(self.cause)

    def __repr__(self) -> str:
        return f"SymbolicError({self.code!r}, {self.message!r})"
