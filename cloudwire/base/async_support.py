"""
Async support for Cloudwire.

Provides an ``async_wrap`` decorator that converts any synchronous method
into an awaitable coroutine using :func:`asyncio.to_thread`. Every client
operation can then be called from async code without blocking the event
loop, while the canonical implementations stay synchronous.

Usage::

    client = DynamoDbClient(config)
    result = await client.aget_item({"TableName": "t", "Key": {...}})
    item = await asyncio.to_thread(lambda: result.item)
"""

from __future__ import annotations

import asyncio
import functools
import inspect
from typing import Any, Callable, Coroutine, TypeVar

T = TypeVar("T")


def async_wrap(
    fn: Callable[..., T],
) -> Callable[..., Coroutine[Any, Any, T]]:
    """Return an async version of *fn* that runs it in a thread.

    The wrapper preserves the original function's signature and docstring.

    Args:
        fn: A synchronous callable to wrap.

    Returns:
        An async callable with the same parameters and return type.
    """

    @functools.wraps(fn)
    async def _wrapper(*args: Any, **kwargs: Any) -> T:
        return await asyncio.to_thread(fn, *args, **kwargs)

    return _wrapper


class AsyncMixin:
    """Mixin that auto-generates ``a<method>`` async variants.

    Every public method a subclass defines, and that is not already a
    coroutine, gains an async twin. The async methods are created once at
    class definition time.

    Example::

        class SqsClient(QueryApi):
            def delete_queue(self, input=None, /, **kwargs): ...
            # => self.adelete_queue(...) is now available
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for name in list(vars(cls)):
            if name.startswith("_"):
                continue
            attr = getattr(cls, name)
            if inspect.isfunction(attr) and not inspect.iscoroutinefunction(attr):
                async_name = f"a{name}"
                if not hasattr(cls, async_name):
                    setattr(cls, async_name, async_wrap(attr))
