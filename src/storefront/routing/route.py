"""RouteBinding and RouteMatch frozen dataclasses."""

from dataclasses import dataclass

from storefront._internal.types import Handler
from storefront.middleware.protocol import Middleware
from storefront.routing.pattern import Segment, format_pattern


@dataclass(frozen=True, slots=True)
class RouteBinding:
    """A registered (method, pattern, middleware, handler) tuple.

    Created during setup and never mutated afterwards.
    """

    method: str
    pattern: str
    segments: tuple[Segment, ...]
    middleware: tuple[Middleware, ...]
    handler: Handler
    name: str | None = None

    @property
    def path(self) -> str:
        """Normalised pattern, e.g. ``/:slug``."""
        return format_pattern(self.segments)

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful dispatch."""

    binding: RouteBinding
    path_params: dict[str, str]

    @property
    def handler(self) -> Handler:
        return self.binding.handler

    @property
    def middleware(self) -> tuple[Middleware, ...]:
        return self.binding.middleware
