"""Exceptions raised by storefront and by product handlers.

Setup mistakes raise ``ConfigurationError``. Request-time failures that
should reach the client raise an ``HTTPError``, which the server renders
with its status, detail and headers.
"""

from dataclasses import dataclass


class StorefrontError(Exception):
    """Root of every storefront exception."""


class ConfigurationError(StorefrontError):
    """The app, a route table or a middleware was set up wrongly."""


@dataclass(frozen=True, slots=True)
class HTTPError(StorefrontError):
    """Failure with a fixed HTTP status.

    Handlers raise it directly for expected problems::

        raise HTTPError(409, "Out of stock")
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        return f"{self.status}: {self.detail}" if self.detail else str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """No mounted binding matches the method and path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class Unauthorized(HTTPError):  # noqa: N818
    """Mandatory authentication stopped the chain.

    The ``WWW-Authenticate`` challenge names the scheme the client should use.
    """

    def __init__(
        self,
        detail: str = "Authentication required",
        *,
        scheme: str = "Bearer",
        realm: str = "api",
    ) -> None:
        challenge = f'{scheme} realm="{realm}"'
        super().__init__(status=401, detail=detail, headers=(("WWW-Authenticate", challenge),))
