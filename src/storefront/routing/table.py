"""Ordered route table with first-match dispatch.

Bindings are kept in registration order and scanned linearly. Order is
priority: the first binding whose method and pattern match wins, so a
catch-all capture such as ``/:slug`` must be registered after every
literal sibling it would otherwise swallow.
"""

import logging
import threading

from storefront._internal.types import Handler
from storefront.errors import NotFound
from storefront.middleware.protocol import Middleware
from storefront.routing.pattern import Capture, Literal, match_segments, parse_pattern, split_path
from storefront.routing.route import RouteBinding, RouteMatch

logger = logging.getLogger("storefront.routing")


def covers(earlier: RouteBinding, later: RouteBinding) -> bool:
    """True if every request *later* matches is also matched by *earlier*."""
    if earlier.method != later.method:
        return False
    if len(earlier.segments) != len(later.segments):
        return False
    for a, b in zip(earlier.segments, later.segments, strict=True):
        if isinstance(a, Capture):
            continue
        if not (isinstance(a, Literal) and isinstance(b, Literal) and a.value == b.value):
            return False
    return True


class RouteTable:
    """An ordered list of route bindings for one resource.

    Mutable during setup, read-only once frozen. Dispatch touches only the
    frozen tuple of bindings, so it is safe to call from any number of
    concurrent request tasks.

    Usage::

        table = RouteTable("products")
        table.get("/", list_products)
        table.get("/featured", featured_products)
        table.get("/:slug", product_by_slug)  # catch-all, last
        table.freeze()

        match = table.dispatch("GET", "/featured")
    """

    __slots__ = ("_bindings", "_frozen", "_lock", "name")

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._bindings: tuple[RouteBinding, ...] = ()
        self._frozen = False
        self._lock = threading.Lock()

    # -- Registration --

    def register(
        self,
        method: str,
        pattern: str,
        middleware: tuple[Middleware, ...] | list[Middleware],
        handler: Handler,
        *,
        name: str | None = None,
    ) -> RouteBinding:
        """Append a binding to the end of the table.

        Duplicate and shadowed registrations are accepted silently; use
        ``shadowed()`` to find them.
        """
        binding = RouteBinding(
            method=method.upper(),
            pattern=pattern,
            segments=parse_pattern(pattern),
            middleware=tuple(middleware),
            handler=handler,
            name=name or getattr(handler, "__name__", None),
        )
        with self._lock:
            if self._frozen:
                msg = f"Cannot register {binding} after the route table is frozen."
                raise RuntimeError(msg)
            self._bindings = (*self._bindings, binding)
        logger.debug("registered %s -> %s", binding, binding.name)
        return binding

    def get(
        self,
        pattern: str,
        handler: Handler,
        *,
        middleware: tuple[Middleware, ...] | list[Middleware] = (),
        name: str | None = None,
    ) -> RouteBinding:
        """Register a GET binding."""
        return self.register("GET", pattern, middleware, handler, name=name)

    def freeze(self) -> None:
        """Make the table read-only. Idempotent."""
        with self._lock:
            if self._frozen:
                return
            self._frozen = True
        for shadowed, by in self.shadowed():
            logger.debug("%s is unreachable: shadowed by %s", shadowed, by)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def bindings(self) -> tuple[RouteBinding, ...]:
        """All bindings, in registration order."""
        return self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"RouteTable({self.name!r}, bindings={len(self._bindings)})"

    # -- Dispatch --

    def dispatch(self, method: str, path: str) -> RouteMatch | None:
        """Return the first binding matching *method* and *path*, or ``None``."""
        method = method.upper()
        parts = split_path(path)
        for binding in self._bindings:
            if binding.method != method:
                continue
            params = match_segments(binding.segments, parts)
            if params is not None:
                return RouteMatch(binding=binding, path_params=params)
        return None

    def match(self, method: str, path: str) -> RouteMatch:
        """Like ``dispatch()`` but raises ``NotFound`` when nothing matches."""
        result = self.dispatch(method, path)
        if result is None:
            raise NotFound(f"No route matches {method.upper()} {path!r}")
        return result

    # -- Diagnostics --

    def shadowed(self) -> list[tuple[RouteBinding, RouteBinding]]:
        """List ``(unreachable, shadowing)`` pairs.

        A binding is unreachable when an earlier binding with the same
        method matches every path it could match.
        """
        found: list[tuple[RouteBinding, RouteBinding]] = []
        bindings = self._bindings
        for index, later in enumerate(bindings):
            for earlier in bindings[:index]:
                if covers(earlier, later):
                    found.append((later, earlier))
                    break
        return found
