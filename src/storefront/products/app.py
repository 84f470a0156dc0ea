"""Application factory for the products API."""

from storefront.app import App
from storefront.config import AppConfig
from storefront.middleware.auth import AuthConfig
from storefront.products.controller import ProductsController
from storefront.products.routes import create_products_router


def create_app(
    controller: ProductsController,
    auth: AuthConfig,
    config: AppConfig | None = None,
) -> App:
    """Create an App with the products resource mounted.

    The resource lives under ``f"{config.api_prefix}/products"``.
    """
    app = App(config)
    app.mount(f"{app.config.api_prefix}/products", create_products_router(controller, auth))
    return app
