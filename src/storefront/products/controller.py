"""The products controller contract.

Controllers own the business logic: listing, curation, search,
recommendations, and lookup by slug. The route table only needs to know
which method serves which endpoint, so the contract is a structural
protocol. Any object (or module) exposing these seven callables works.

Each handler receives the ``Request`` and returns anything the response
negotiator accepts (``Response``, ``dict``, ``list``, ``str``, or a
``(value, status)`` tuple). Handlers may be sync or async and may raise
``HTTPError`` subclasses for expected failures.
"""

from typing import Any, Protocol, runtime_checkable

from storefront.http.request import Request


@runtime_checkable
class ProductsController(Protocol):
    """Handlers for the products resource."""

    def get_all_products(self, request: Request) -> Any:
        """``GET /`` — the full, paginated product listing."""
        ...

    def get_best_sellers(self, request: Request) -> Any:
        """``GET /best-sellers`` — curated list."""
        ...

    def get_new_arrivals(self, request: Request) -> Any:
        """``GET /new-arrivals`` — curated list."""
        ...

    def get_featured_products(self, request: Request) -> Any:
        """``GET /featured`` — curated list."""
        ...

    def search_products(self, request: Request) -> Any:
        """``GET /search`` — driven by ``request.query``."""
        ...

    def get_recommended(self, request: Request) -> Any:
        """``GET /recommended`` — personalised for ``request.user``."""
        ...

    def get_product_by_slug(self, request: Request) -> Any:
        """``GET /:slug`` — single product, slug in ``request.path_params``."""
        ...


HANDLER_NAMES: tuple[str, ...] = (
    "get_all_products",
    "get_best_sellers",
    "get_new_arrivals",
    "get_featured_products",
    "search_products",
    "get_recommended",
    "get_product_by_slug",
)
