"""Route bindings for the products resource.

Mounted by the parent app under ``/api/v1/products``::

    GET /               -> get_all_products
    GET /best-sellers   -> get_best_sellers
    GET /new-arrivals   -> get_new_arrivals
    GET /featured       -> get_featured_products
    GET /search         -> search_products
    GET /recommended    -> get_recommended       (requires auth)
    GET /:slug          -> get_product_by_slug   (must be last)

Order matters: ``/:slug`` matches any single segment, so every literal
sibling must be registered before it.
"""

from storefront.errors import ConfigurationError
from storefront.middleware.auth import AuthConfig, OptionalAuth, RequireAuth
from storefront.products.controller import HANDLER_NAMES, ProductsController
from storefront.routing.table import RouteTable

# Exported for callers that want identity-aware listings. Not attached to
# any binding below.
__all__ = ["OptionalAuth", "create_products_router"]


def create_products_router(controller: ProductsController, auth: AuthConfig) -> RouteTable:
    """Build the frozen products route table.

    Raises ``ConfigurationError`` if *controller* is missing a handler.
    """
    missing = [name for name in HANDLER_NAMES if not callable(getattr(controller, name, None))]
    if missing:
        msg = f"Products controller is missing handlers: {', '.join(missing)}"
        raise ConfigurationError(msg)

    authenticate = RequireAuth(auth)

    router = RouteTable("products")
    router.get("/", controller.get_all_products)
    router.get("/best-sellers", controller.get_best_sellers)
    router.get("/new-arrivals", controller.get_new_arrivals)
    router.get("/featured", controller.get_featured_products)
    router.get("/search", controller.search_products)
    router.get("/recommended", controller.get_recommended, middleware=(authenticate,))
    # Catch-all, must stay last
    router.get("/:slug", controller.get_product_by_slug)
    router.freeze()
    return router
