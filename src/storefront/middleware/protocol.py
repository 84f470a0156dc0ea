"""The middleware shape and how chains are built from it.

A middleware is ``async (request, next) -> Response``. It continues the
chain by awaiting ``next`` with the request (or a derived copy of it)
and halts it by raising an ``HTTPError`` or returning its own response.
"""

from collections.abc import Awaitable, Callable, Sequence
from functools import partial
from typing import Protocol, TypeAlias

from storefront.http.request import Request
from storefront.http.response import Response

Next: TypeAlias = Callable[[Request], Awaitable[Response]]


class Middleware(Protocol):
    """Structural type for middleware; plain async functions qualify."""

    async def __call__(self, request: Request, next: Next) -> Response: ...


async def _step(middleware: Middleware, next: Next, request: Request) -> Response:
    return await middleware(request, next)


def compose(middleware: Sequence[Middleware], endpoint: Next) -> Next:
    """Chain *middleware* in front of *endpoint*; the first item runs first."""
    chain = endpoint
    for mw in reversed(middleware):
        chain = partial(_step, mw, chain)
    return chain
