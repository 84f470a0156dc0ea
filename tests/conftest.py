"""Shared fixtures: a recording products controller and token auth."""

from dataclasses import dataclass

import pytest

from storefront.http.request import Request
from storefront.middleware.auth import AuthConfig


@dataclass(frozen=True, slots=True)
class Shopper:
    id: str
    is_authenticated: bool = True


TOKENS = {"tok_alice": Shopper(id="alice")}


async def verify_token(token: str) -> Shopper | None:
    return TOKENS.get(token)


class RecordingController:
    """Products controller that records which handler ran, and with what."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Request]] = []

    def _record(self, name: str, request: Request) -> dict:
        self.calls.append((name, request))
        return {"handler": name, "params": request.path_params}

    def get_all_products(self, request):
        return self._record("get_all_products", request)

    def get_best_sellers(self, request):
        return self._record("get_best_sellers", request)

    def get_new_arrivals(self, request):
        return self._record("get_new_arrivals", request)

    def get_featured_products(self, request):
        return self._record("get_featured_products", request)

    async def search_products(self, request):
        body = self._record("search_products", request)
        body["q"] = request.query.get("q")
        return body

    async def get_recommended(self, request):
        body = self._record("get_recommended", request)
        body["user"] = request.user.id
        return body

    def get_product_by_slug(self, request):
        return self._record("get_product_by_slug", request)

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def controller() -> RecordingController:
    return RecordingController()


@pytest.fixture
def auth() -> AuthConfig:
    return AuthConfig(verify_token=verify_token)
