"""Callback aliases shared by the route table and the app."""

from collections.abc import Callable
from typing import Any, TypeAlias

# (request) -> anything negotiate() accepts; sync or async
Handler: TypeAlias = Callable[..., Any]

# (request, exc) -> anything negotiate() accepts; sync or async
ErrorHandler: TypeAlias = Callable[..., Any]
