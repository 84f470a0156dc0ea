"""Tests for storefront.routing.mount — prefix mounting."""

import pytest

from storefront.errors import NotFound
from storefront.routing.mount import Mount, normalize_prefix, resolve
from storefront.routing.table import RouteTable


def _table(*patterns: str) -> RouteTable:
    table = RouteTable()
    for pattern in patterns:
        table.get(pattern, lambda request: pattern)
    table.freeze()
    return table


class TestNormalizePrefix:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/api/v1/products", "/api/v1/products"),
            ("api/v1/products/", "/api/v1/products"),
            ("/", ""),
            ("", ""),
        ],
    )
    def test_normalize(self, raw, expected) -> None:
        assert normalize_prefix(raw) == expected


class TestMountStrip:
    def test_exact_prefix_is_root(self) -> None:
        assert Mount("/api/v1/products", _table()).strip("/api/v1/products") == "/"

    def test_below_prefix(self) -> None:
        mount = Mount("/api/v1/products", _table())
        assert mount.strip("/api/v1/products/featured") == "/featured"

    def test_partial_segment_not_owned(self) -> None:
        mount = Mount("/api/v1/products", _table())
        assert mount.strip("/api/v1/productsearch") is None

    def test_elsewhere(self) -> None:
        assert Mount("/api/v1/products", _table()).strip("/api/v1/orders") is None

    def test_root_mount_owns_everything(self) -> None:
        assert Mount("", _table()).strip("/featured") == "/featured"


class TestResolve:
    def test_first_mount_wins(self) -> None:
        first = Mount("/shop", _table("/:slug"))
        second = Mount("/shop", _table("/featured"))
        match = resolve([first, second], "GET", "/shop/featured")
        assert match.binding.path == "/:slug"

    def test_falls_through_to_next_mount(self) -> None:
        products = Mount("/api/v1/products", _table("/featured"))
        orders = Mount("/api/v1/orders", _table("/"))
        match = resolve([products, orders], "GET", "/api/v1/orders")
        assert match.binding.path == "/"

    def test_not_found(self) -> None:
        with pytest.raises(NotFound):
            resolve([Mount("/api", _table("/"))], "GET", "/other")
