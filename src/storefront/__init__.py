"""storefront: ordered HTTP route tables for e-commerce resources.

Bindings match in registration order and the first match wins; each may
carry its own middleware ahead of the handler.

::

    from storefront import AuthConfig
    from storefront.products import create_app

    app = create_app(controller, AuthConfig(verify_token=verify))
    app.run()  # needs the ``serve`` extra (uvicorn)
"""

from importlib import import_module

__version__ = "0.1.0"

# Public name -> defining module, imported on first attribute access
_EXPORTS: dict[str, str] = {
    "App": "storefront.app",
    "AppConfig": "storefront.config",
    "AuthConfig": "storefront.middleware.auth",
    "ConfigurationError": "storefront.errors",
    "HTTPError": "storefront.errors",
    "Middleware": "storefront.middleware.protocol",
    "Next": "storefront.middleware.protocol",
    "NotFound": "storefront.errors",
    "OptionalAuth": "storefront.middleware.auth",
    "Request": "storefront.http.request",
    "RequireAuth": "storefront.middleware.auth",
    "Response": "storefront.http.response",
    "RouteTable": "storefront.routing.table",
    "StorefrontError": "storefront.errors",
    "Unauthorized": "storefront.errors",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> object:
    module = _EXPORTS.get(name)
    if module is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module), name)
