"""Testing helpers.

    from storefront.testing import TestClient
"""

from storefront.testing.client import TestClient

__all__ = ["TestClient"]
