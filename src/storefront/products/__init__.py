"""The products resource — route bindings and the controller contract."""

from storefront.products.app import create_app
from storefront.products.controller import ProductsController
from storefront.products.routes import create_products_router

__all__ = ["ProductsController", "create_app", "create_products_router"]
