"""The HTTP request pipeline.

``handle_request`` is the only place raw ASGI meets storefront types:
the scope becomes a ``Request``, app middleware wraps the lookup across
mounted tables, the matched binding runs its own chain and handler, and
the resulting ``Response`` is written back as ASGI messages.
"""

from collections.abc import Mapping, Sequence
from urllib.parse import parse_qsl

from storefront._internal.asgi import Scope, Send
from storefront._internal.invoke import invoke
from storefront._internal.types import ErrorHandler
from storefront.http.request import Request
from storefront.http.response import Response
from storefront.middleware.protocol import Middleware, compose
from storefront.routing.mount import Mount, resolve
from storefront.routing.route import RouteMatch
from storefront.server.errors import render_error
from storefront.server.negotiation import negotiate

# Statuses whose responses never carry a body
_EMPTY_STATUSES = frozenset({204, 304})


def read_request(scope: Scope) -> Request:
    """Build a ``Request`` from an ``http`` scope.

    Header names are lower-cased. For repeated headers and query keys the
    first occurrence wins.
    """
    headers: dict[str, str] = {}
    for raw_name, raw_value in scope.get("headers", ()):
        headers.setdefault(raw_name.decode("latin-1").lower(), raw_value.decode("latin-1"))

    query: dict[str, str] = {}
    query_string = scope.get("query_string", b"").decode("latin-1")
    for key, value in parse_qsl(query_string, keep_blank_values=True):
        query.setdefault(key, value)

    return Request(method=scope["method"], path=scope["path"], headers=headers, query=query)


async def write_response(response: Response, send: Send) -> None:
    """Send *response* as ``http.response.start`` plus one body message."""
    if response.status in _EMPTY_STATUSES or response.status < 200:
        body = b""
    else:
        body = response.body

    headers = [
        (b"content-type", response.content_type.encode("latin-1")),
        (b"content-length", str(len(body)).encode("latin-1")),
    ]
    headers.extend(
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers
    )
    await send({"type": "http.response.start", "status": response.status, "headers": headers})
    await send({"type": "http.response.body", "body": body})


async def invoke_binding(match: RouteMatch, request: Request) -> Response:
    """Run a matched binding: its middleware in order, then its handler.

    The handler gets the request exactly as the last middleware passed it
    on, so an identity attached by auth middleware is on ``request.user``.
    """

    async def endpoint(req: Request) -> Response:
        return negotiate(await invoke(match.handler, req))

    return await compose(match.middleware, endpoint)(request.with_path_params(match.path_params))


async def handle_request(
    scope: Scope,
    send: Send,
    *,
    mounts: Sequence[Mount],
    middleware: Sequence[Middleware],
    error_handlers: Mapping[int | type, ErrorHandler],
    debug: bool,
) -> None:
    """Serve one ``http`` scope."""
    request = read_request(scope)

    async def dispatch(req: Request) -> Response:
        return await invoke_binding(resolve(mounts, req.method, req.path), req)

    try:
        response = await compose(middleware, dispatch)(request)
    except Exception as exc:
        response = await render_error(exc, request, error_handlers, debug=debug)

    await write_response(response, send)
