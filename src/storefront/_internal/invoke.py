"""Calling user callbacks that may be plain functions or coroutines."""

import inspect
from collections.abc import Callable
from typing import Any


async def invoke(func: Callable[..., Any], *args: Any) -> Any:
    """Call *func* and await the result when it is awaitable."""
    result = func(*args)
    if inspect.isawaitable(result):
        return await result
    return result
