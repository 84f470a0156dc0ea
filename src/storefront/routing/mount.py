"""Mount points — attach route tables under a base path.

A parent app mounts each resource table under a prefix such as
``/api/v1/products``. The table itself only ever sees the path below
its prefix.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from storefront.errors import NotFound
from storefront.routing.route import RouteMatch
from storefront.routing.table import RouteTable


def normalize_prefix(prefix: str) -> str:
    """``"api/v1/"`` -> ``"/api/v1"``; the root prefix becomes ``""``."""
    stripped = prefix.strip("/")
    return f"/{stripped}" if stripped else ""


@dataclass(frozen=True, slots=True)
class Mount:
    """A route table attached under a path prefix."""

    prefix: str
    table: RouteTable

    def strip(self, path: str) -> str | None:
        """Return the path below the prefix, or ``None`` if it is elsewhere.

        Prefixes match whole segments only: ``/api/v1/products`` does not
        own ``/api/v1/productsearch``.
        """
        if not self.prefix:
            return path
        if path == self.prefix:
            return "/"
        if path.startswith(self.prefix + "/"):
            return path[len(self.prefix) :]
        return None

    def dispatch(self, method: str, path: str) -> RouteMatch | None:
        """Dispatch into the table if *path* lies under this mount."""
        sub_path = self.strip(path)
        if sub_path is None:
            return None
        return self.table.dispatch(method, sub_path)


def resolve(mounts: Sequence[Mount], method: str, path: str) -> RouteMatch:
    """Find the first matching binding across *mounts*, in mount order.

    Raises ``NotFound`` when no mount claims the request.
    """
    for mount in mounts:
        match = mount.dispatch(method, path)
        if match is not None:
            return match
    raise NotFound(f"No route matches {method.upper()} {path!r}")
