"""Outgoing responses.

Product endpoints answer in JSON, so that is the default content type.
``plain`` exists for middleware and error handlers that want a short
text body.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Any

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


@dataclass(frozen=True, slots=True)
class Response:
    """Status, encoded body and extra headers.

    ``Content-Type`` and ``Content-Length`` are written by the server from
    ``content_type`` and ``body``; ``headers`` holds everything else.
    """

    status: int = 200
    body: bytes = b""
    content_type: str = JSON_CONTENT_TYPE
    headers: tuple[tuple[str, str], ...] = ()

    @classmethod
    def json(cls, data: Any, status: int = 200) -> Response:
        return cls(status=status, body=json.dumps(data, default=str).encode())

    @classmethod
    def plain(cls, text: str, status: int = 200) -> Response:
        return cls(status=status, body=text.encode(), content_type=TEXT_CONTENT_TYPE)

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        return replace(self, headers=(*self.headers, (name, value)))

    def header(self, name: str) -> str | None:
        """First value of header *name*, ignoring case."""
        wanted = name.lower()
        return next((v for k, v in self.headers if k.lower() == wanted), None)

    @property
    def text(self) -> str:
        return self.body.decode()

    def json_body(self) -> Any:
        return json.loads(self.body)
