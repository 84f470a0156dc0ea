"""The request a product handler sees, and the identity it may carry.

A ``Request`` is built once per ASGI call and never mutated. The route
table derives a copy carrying the captured ``:slug``; auth middleware
derives a copy carrying the shopper. Handlers read everything else
(``query`` for search, ``headers`` for credentials) straight off it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Protocol, runtime_checkable


@runtime_checkable
class User(Protocol):
    """Anything with an ``id`` and an ``is_authenticated`` flag.

    The application's own account model satisfies this structurally.
    """

    @property
    def id(self) -> str: ...

    @property
    def is_authenticated(self) -> bool: ...


@dataclass(frozen=True, slots=True)
class AnonymousUser:
    """The identity of a request no auth middleware has vouched for."""

    id: str = ""
    is_authenticated: bool = False


ANONYMOUS: AnonymousUser = AnonymousUser()


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable incoming request.

    ``headers`` is keyed by lower-cased header name. ``query`` and
    ``headers`` keep the first value when a key repeats.
    """

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, str] = field(default_factory=dict)
    path_params: Mapping[str, str] = field(default_factory=dict)
    user: User = ANONYMOUS

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower())

    def with_path_params(self, path_params: Mapping[str, str]) -> Request:
        return replace(self, path_params=dict(path_params))

    def with_user(self, user: User) -> Request:
        return replace(self, user=user)
