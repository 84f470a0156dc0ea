"""Routing — ordered route tables with first-match dispatch.

Bindings are registered during setup and frozen before the app serves
its first request.
"""

from storefront.routing.pattern import Capture, Literal, parse_pattern
from storefront.routing.route import RouteBinding, RouteMatch
from storefront.routing.table import RouteTable

__all__ = [
    "Capture",
    "Literal",
    "RouteBinding",
    "RouteMatch",
    "RouteTable",
    "parse_pattern",
]
