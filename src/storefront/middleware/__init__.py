"""Middleware: ``async (request, next) -> Response`` callables.

RequireAuth halts with 401 when no valid bearer token is present.
OptionalAuth attaches the user when it can and never halts.
"""

from storefront.middleware.auth import AuthConfig, OptionalAuth, RequireAuth
from storefront.middleware.protocol import Middleware, Next, compose

__all__ = [
    "AuthConfig",
    "Middleware",
    "Next",
    "OptionalAuth",
    "RequireAuth",
    "compose",
]
