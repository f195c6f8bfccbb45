"""
Gateway route table

A route maps a public path prefix to a backend base address and the path
the backend mounts its collection on. The table is built once at startup
and never mutated; resolving a path is a pure function of the table and
the path.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from services.gateway.config import GatewaySettings


@dataclass(frozen=True)
class Route:
    """One prefix -> backend mapping"""
    name: str
    prefix: str
    target: str
    mount: str

    def matches(self, path: str) -> bool:
        """Prefix match on a path-segment boundary (case-sensitive)"""
        return path == self.prefix or path.startswith(self.prefix.rstrip("/") + "/")

    def rewrite(self, path: str) -> str:
        """Replace the matched prefix with the mount path, keeping the remainder"""
        remainder = path[len(self.prefix.rstrip("/")):]
        return (self.mount.rstrip("/") + remainder) or "/"


@dataclass(frozen=True)
class RouteMatch:
    route: Route
    path: str

    def target_url(self, query: str = "") -> str:
        url = self.route.target.rstrip("/") + self.path
        return f"{url}?{query}" if query else url


def resolve_route(routes: Sequence[Route], path: str) -> Optional[RouteMatch]:
    """Return the longest matching route for ``path``, rewritten, or None"""
    best: Optional[Route] = None
    for route in routes:
        if route.matches(path) and (best is None or len(route.prefix) > len(best.prefix)):
            best = route
    if best is None:
        return None
    return RouteMatch(route=best, path=best.rewrite(path))


class RouteTable:
    """Immutable, ordered collection of routes"""

    def __init__(self, routes: Iterable[Route]):
        self._routes: Tuple[Route, ...] = tuple(routes)
        prefixes = [route.prefix for route in self._routes]
        if len(prefixes) != len(set(prefixes)):
            raise ValueError("Duplicate route prefix in gateway route table")

    @property
    def routes(self) -> Tuple[Route, ...]:
        return self._routes

    def resolve(self, path: str) -> Optional[RouteMatch]:
        return resolve_route(self._routes, path)


def build_route_table(settings: GatewaySettings) -> RouteTable:
    """Routes for the three resource services"""
    return RouteTable([
        Route("customer-service", "/api/customers", settings.customer_service_url, "/customers"),
        Route("product-service", "/api/products", settings.product_service_url, "/products"),
        Route("order-service", "/api/orders", settings.order_service_url, "/orders"),
    ])
