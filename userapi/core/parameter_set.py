"""Parameter Set — request-scoped, transformable, validated view over inbound params.

Invariants:
    - items never contains the reserved transport key 'id' (stripped in __init__)
    - items is deep-independent of the source mapping and of get_all() results
    - validate() without a schema raises 'bug.schemaIsNull' before touching pydantic
    - validation never rewrites items: transforms happen through apply() only

Design Decisions:
    - pydantic model classes as schemas: same engine as the FastAPI layer
    - check() returns the failure instead of raising, for handlers that
      return errors as values (dispatcher reports both forms)
"""

import copy
import json
from collections.abc import Callable, Iterable
from typing import Any

from pydantic import ValidationError

from userapi.core.protocols import RequestLike, Schema
from userapi.core.symbolic_error import SymbolicError

# Injected by the router from the URL path, never a domain parameter
RESERVED_KEY = "id"


class ParameterSet:
    """Copy of a request's params with delete/apply/validate steps."""

    def __init__(self, request: RequestLike, schema: type[Schema] | None = None):
        self.items: dict[str, Any] = copy.deepcopy(dict(request.params_all()))
        self.schema = schema
        self.delete(RESERVED_KEY)

    def delete(self, name: str) -> "ParameterSet":
        self.items.pop(name, None)
        return self

    def has(self, name: str) -> bool:
        return name in self.items

    def get(self, name: str, default: Any = None) -> Any:
        return self.items.get(name, default)

    def apply(
        self, names: str | Iterable[str], fn: Callable[[Any], Any],
    ) -> "ParameterSet":
        """Replace each present name's value with fn(value). Absent names skipped."""
        if isinstance(names, str):
            names = [names]
        for name in names:
            if name in self.items:
                self.items[name] = fn(self.items[name])
        return self

    def check(self) -> SymbolicError | None:
        """Run the schema; return the failure as a SymbolicError, or None."""
        if self.schema is None:
            return SymbolicError(
                "bug.schemaIsNull", "call to validate() with null schema in ctor",
            )
        try:
            self.schema.model_validate(self.items)
        except ValidationError as e:
            return SymbolicError("api.paramInvalid", _describe(e), e)
        return None

    def validate(self) -> "ParameterSet":
        error = self.check()
        if error is not None:
            raise error
        return self

    def get_all(self) -> dict[str, Any]:
        return copy.deepcopy(self.items)

    def __str__(self) -> str:
        return json.dumps(self.items, sort_keys=True, default=str)


def _describe(error: ValidationError) -> str:
    """'field: msg; field: msg' using wire (alias) names."""
    parts = []
    for e in error.errors():
        field = ".".join(str(loc) for loc in e["loc"]) or "(root)"
        parts.append(f"{field}: {e['msg']}")
    return "; ".join(parts)
