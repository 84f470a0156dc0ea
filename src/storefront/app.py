"""The ASGI application that serves mounted resource tables.

Setup happens on a mutable ``App``: mount tables, add app-wide
middleware, register error handlers and lifespan hooks. The first
request (or the lifespan startup, or ``freeze()``) compiles all of it
into a read-only ``_Runtime`` and freezes every mounted table; from then
on setup calls raise ``RuntimeError``.
"""

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, TypeAlias

from storefront._internal.asgi import Receive, Scope, Send
from storefront._internal.invoke import invoke
from storefront._internal.types import ErrorHandler
from storefront.config import AppConfig
from storefront.errors import ConfigurationError, StorefrontError
from storefront.middleware.protocol import Middleware
from storefront.routing.mount import Mount, normalize_prefix
from storefront.routing.route import RouteBinding
from storefront.routing.table import RouteTable
from storefront.server.handler import handle_request

logger = logging.getLogger("storefront.app")

Hook: TypeAlias = Callable[[], Any]


@dataclass(frozen=True, slots=True)
class _Runtime:
    mounts: tuple[Mount, ...]
    middleware: tuple[Middleware, ...]
    error_handlers: Mapping[int | type, ErrorHandler]


class App:
    """Mounts route tables under path prefixes and serves them over ASGI.

    Usage::

        app = App(AppConfig(debug=True))
        app.mount("/api/v1/products", create_products_router(controller, auth))
        app.run()

    Mounts are searched in the order they were added; inside a mount the
    table's own first-match order applies.
    """

    __slots__ = (
        "_error_handlers",
        "_lock",
        "_middleware",
        "_mounts",
        "_runtime",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()
        self._mounts: list[Mount] = []
        self._middleware: list[Middleware] = []
        self._error_handlers: dict[int | type, ErrorHandler] = {}
        self._startup_hooks: list[Hook] = []
        self._shutdown_hooks: list[Hook] = []
        self._runtime: _Runtime | None = None
        self._lock = threading.Lock()

    # -- Setup --

    def mount(self, prefix: str, table: RouteTable) -> None:
        self._ensure_setup()
        self._mounts.append(Mount(prefix=normalize_prefix(prefix), table=table))

    def add_middleware(self, middleware: Middleware) -> None:
        """Run *middleware* around every request, matched or not."""
        self._ensure_setup()
        self._middleware.append(middleware)

    def error(self, key: int | type[Exception]) -> Callable[[ErrorHandler], ErrorHandler]:
        """Register ``(request, exc)`` as the renderer for a status or exception type.

        ::

            @app.error(404)
            def no_such_product(request, exc):
                return {"message": f"nothing at {request.path}"}
        """

        def register(handler: ErrorHandler) -> ErrorHandler:
            self._ensure_setup()
            self._error_handlers[key] = handler
            return handler

        return register

    def on_startup(self, hook: Hook) -> Hook:
        self._ensure_setup()
        self._startup_hooks.append(hook)
        return hook

    def on_shutdown(self, hook: Hook) -> Hook:
        self._ensure_setup()
        self._shutdown_hooks.append(hook)
        return hook

    # -- Introspection --

    @property
    def frozen(self) -> bool:
        return self._runtime is not None

    @property
    def routes(self) -> list[tuple[str, RouteBinding]]:
        """``(full path, binding)`` for every binding, in dispatch order."""
        return [
            (mount.prefix + ("" if binding.path == "/" else binding.path) or "/", binding)
            for mount in self._mounts
            for binding in mount.table.bindings
        ]

    def check(self) -> list[tuple[RouteBinding, RouteBinding]]:
        """Log and return every ``(unreachable, shadowing)`` pair across mounts."""
        found = []
        for mount in self._mounts:
            for hidden, by in mount.table.shadowed():
                logger.warning(
                    "%s%s is unreachable: shadowed by %s", mount.prefix, hidden.path, by
                )
                found.append((hidden, by))
        return found

    # -- Lifecycle --

    def freeze(self) -> None:
        """Compile the app for serving. Safe to call from several threads."""
        self._compiled()

    def _compiled(self) -> _Runtime:
        runtime = self._runtime
        if runtime is not None:
            return runtime
        with self._lock:
            runtime = self._runtime
            if runtime is None:
                for mount in self._mounts:
                    mount.table.freeze()
                if self.config.debug:
                    self.check()
                runtime = _Runtime(
                    mounts=tuple(self._mounts),
                    middleware=tuple(self._middleware),
                    error_handlers=MappingProxyType(dict(self._error_handlers)),
                )
                self._runtime = runtime
            return runtime

    async def startup(self) -> None:
        for hook in self._startup_hooks:
            await invoke(hook)

    async def shutdown(self) -> None:
        for hook in self._shutdown_hooks:
            await invoke(hook)

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve the app with uvicorn (``pip install storefront[serve]``)."""
        self.freeze()
        try:
            import uvicorn
        except ImportError:
            msg = "App.run() needs uvicorn. Install it with: pip install storefront[serve]"
            raise ConfigurationError(msg) from None

        uvicorn.run(
            self,
            host=self.config.host if host is None else host,
            port=self.config.port if port is None else port,
            log_level=self.config.log_level,
        )

    # -- ASGI --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        runtime = self._compiled()

        match scope["type"]:
            case "http":
                await handle_request(
                    scope,
                    send,
                    mounts=runtime.mounts,
                    middleware=runtime.middleware,
                    error_handlers=runtime.error_handlers,
                    debug=self.config.debug,
                )
            case "lifespan":
                await self._lifespan(receive, send)
            case "websocket":
                # Closing before accept makes the server reject the handshake
                await send({"type": "websocket.close", "code": 1000})
            case other:
                msg = f"Unsupported ASGI scope type {other!r}"
                raise StorefrontError(msg)

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                try:
                    await self.startup()
                except Exception as exc:
                    logger.exception("Startup hook failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    def _ensure_setup(self) -> None:
        if self._runtime is not None:
            msg = "Cannot modify the app once it is serving. Finish setup first."
            raise RuntimeError(msg)
