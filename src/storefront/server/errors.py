"""Rendering failures as responses.

Every failure leaves the pipeline through ``render_error``: an
``HTTPError`` keeps its status and headers, anything else becomes a 500.
Without a registered handler the body is the JSON envelope
``{"error": {"status": ..., "detail": ...}}``.
"""

import logging
from collections.abc import Mapping
from typing import Any

from storefront._internal.invoke import invoke
from storefront._internal.types import ErrorHandler
from storefront.errors import HTTPError
from storefront.http.request import Request
from storefront.http.response import Response
from storefront.server.negotiation import negotiate

logger = logging.getLogger("storefront.server")


def error_body(status: int, detail: str) -> dict[str, Any]:
    return {"error": {"status": status, "detail": detail}}


async def render_error(
    exc: Exception,
    request: Request,
    error_handlers: Mapping[int | type, ErrorHandler],
    *,
    debug: bool = False,
) -> Response:
    """Build the response for *exc* raised while serving *request*.

    A handler registered for the exception type wins over one registered
    for the status code. A handler's plain 200 answer is given the error
    status, and the exception's own headers (``WWW-Authenticate`` on a
    401) are added unless the handler already set them.
    """
    if isinstance(exc, HTTPError):
        logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
        status = exc.status
        detail = exc.detail or f"Error {status}"
        headers = exc.headers
    else:
        logger.exception("500 %s %s", request.method, request.path)
        status = 500
        detail = f"{type(exc).__name__}: {exc}" if debug else "Internal Server Error"
        headers = ()

    handler = error_handlers.get(type(exc)) or error_handlers.get(status)
    if handler is None:
        response = Response.json(error_body(status, detail), status=status)
    else:
        response = negotiate(await invoke(handler, request, exc))
        if response.status == 200:
            response = response.with_status(status)

    for name, value in headers:
        if response.header(name) is None:
            response = response.with_header(name, value)
    return response
