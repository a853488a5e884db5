"""String Utilities — parameter transforms applied before validation.

Invariants:
    - None or non-str input raises SymbolicError('call.badArgument'), never
      TypeError, and is never coerced to a string
"""

import re

from userapi.core.symbolic_error import SymbolicError

_WHITESPACE = re.compile(r"\s")


def clean_proper_name(value: str | None) -> str:
    """Remove all whitespace and upper-case the first character."""
    if value is None:
        raise SymbolicError(
            "call.badArgument", "null argument passed (requires string)",
        )
    if not isinstance(value, str):
        raise SymbolicError(
            "call.badArgument",
            f"{type(value).__name__} argument passed (requires string)",
        )
    cleaned = _WHITESPACE.sub("", value)
    if not cleaned:
        return cleaned
    return cleaned[0].upper() + cleaned[1:]
