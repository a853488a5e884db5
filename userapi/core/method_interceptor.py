"""Method Interceptor — route every call of a target's callables through one wrapper.

Invariants:
    - Only own entries are wrapped: dict values, or the instance __dict__ of an
      object; class attributes and non-callables are left as they are
    - intercept() mutates in place and returns the same target
    - Coroutine functions stay coroutine functions after wrapping
    - Wrapping twice nests wrappers (callers register each target once)

Design Decisions:
    - Explicit registry dict is the primary target shape: every handler name
      is visible at the registration site (ADR: no reflection over arbitrary objects)
    - functools.wraps keeps __name__ and inspect.signature for FastAPI/tests

Example:
    def audit(ctx, original, receiver, args, kwargs):
        ctx.append(original.__name__)
        return original(*args, **kwargs)

    calls = []
    handlers = MethodInterceptor(audit, calls).intercept({"ping": ping})
"""

import functools
import inspect
from collections.abc import Callable, MutableMapping
from typing import Any

# wrapper(context, original, receiver, args, kwargs) -> result
Wrapper = Callable[[Any, Callable, Any, tuple, dict], Any]


class MethodInterceptor:
    """Substitutes a wrapping callable for each own callable of a target."""

    def __init__(self, wrapper: Wrapper, context: Any = None):
        self.wrapper = wrapper
        self.context = context

    def intercept(self, target):
        if isinstance(target, MutableMapping):
            for name, value in list(target.items()):
                if callable(value):
                    target[name] = self._wrap(value, target)
            return target

        for name, value in list(vars(target).items()):
            if callable(value):
                setattr(target, name, self._wrap(value, target))
        return target

    def _wrap(self, original: Callable, receiver: Any) -> Callable:
        wrapper = self.wrapper
        context = self.context

        if inspect.iscoroutinefunction(original):
            @functools.wraps(original)
            async def wrapped_async(*args, **kwargs):
                return await wrapper(context, original, receiver, args, kwargs)
            return wrapped_async

        @functools.wraps(original)
        def wrapped(*args, **kwargs):
            return wrapper(context, original, receiver, args, kwargs)
        return wrapped
