"""Bearer-token authentication for route bindings.

Token verification belongs to the application: ``AuthConfig.verify_token``
maps a token to a user, or to ``None`` when the token is unknown. These
middleware only decide what happens to the chain.

``RequireAuth`` halts with 401 when there is no valid credential, so the
handler behind it never runs. ``OptionalAuth`` attaches the user when it
can and lets every request through.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeAlias

from storefront.errors import ConfigurationError, Unauthorized
from storefront.http.request import ANONYMOUS, AnonymousUser, Request, User
from storefront.http.response import Response
from storefront.middleware.protocol import Next

logger = logging.getLogger("storefront.security")

__all__ = [
    "ANONYMOUS",
    "AnonymousUser",
    "AuthConfig",
    "OptionalAuth",
    "RequireAuth",
    "User",
]

TokenVerifier: TypeAlias = Callable[[str], Awaitable[User | None]]


@dataclass(frozen=True, slots=True)
class AuthConfig:
    """Where the credential lives and how to check it.

    Attributes:
        verify_token: Async ``(token) -> User | None``. Required by both
            middleware.
        token_header: Header carrying ``"<scheme> <token>"``.
        token_scheme: Scheme the header value must start with.
        realm: Realm named in the 401 ``WWW-Authenticate`` challenge.
    """

    verify_token: TokenVerifier | None = None
    token_header: str = "Authorization"
    token_scheme: str = "Bearer"
    realm: str = "api"


class _BearerAuth:
    __slots__ = ("_config", "_verify")

    def __init__(self, config: AuthConfig) -> None:
        if config.verify_token is None:
            msg = f"{type(self).__name__} needs AuthConfig(verify_token=...) to be set."
            raise ConfigurationError(msg)
        self._config = config
        self._verify: TokenVerifier = config.verify_token

    @property
    def config(self) -> AuthConfig:
        return self._config

    def _token(self, request: Request) -> str | None:
        value = request.header(self._config.token_header)
        if value is None:
            return None
        scheme, _, token = value.partition(" ")
        if scheme != self._config.token_scheme:
            return None
        return token.strip() or None

    async def _user(self, request: Request) -> User | None:
        token = self._token(request)
        if token is None:
            return None
        user = await self._verify(token)
        if user is None or not user.is_authenticated:
            logger.info("Invalid token on %s %s", request.method, request.path)
            return None
        return user


class RequireAuth(_BearerAuth):
    """Halt with ``Unauthorized`` unless the request carries a valid token.

    On success the next step receives ``request.with_user(user)``.
    """

    __slots__ = ()

    async def __call__(self, request: Request, next: Next) -> Response:
        user = await self._user(request)
        if user is None:
            logger.warning("Rejected unauthenticated %s %s", request.method, request.path)
            raise Unauthorized(scheme=self._config.token_scheme, realm=self._config.realm)
        return await next(request.with_user(user))


class OptionalAuth(_BearerAuth):
    """Attach the user when the token checks out; never halt."""

    __slots__ = ()

    async def __call__(self, request: Request, next: Next) -> Response:
        user = await self._user(request)
        return await next(request if user is None else request.with_user(user))
