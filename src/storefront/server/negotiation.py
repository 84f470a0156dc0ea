"""Turn what a handler returned into a ``Response``."""

from typing import Any

from storefront.http.response import Response


def negotiate(value: Any) -> Response:
    """Convert a handler or error-handler return value.

    - ``Response`` is used as is
    - ``dict`` / ``list`` become a JSON body
    - ``str`` becomes a text body
    - ``None`` becomes an empty 204
    - ``(value, status)`` converts *value*, then sets the status
    """
    match value:
        case Response():
            return value
        case dict() | list():
            return Response.json(value)
        case str():
            return Response.plain(value)
        case None:
            return Response(status=204)
        case (inner, int() as status):
            return negotiate(inner).with_status(status)
        case _:
            msg = (
                f"Handler returned {type(value).__name__}; "
                "expected dict, list, str, None or Response."
            )
            raise TypeError(msg)
