"""Route compilation and matching for pre-rendered shells."""

from shellgate.routing.compiler import RouteCompiler
from shellgate.routing.route import DynamicRoute, RouteMatch, RouteRecord
from shellgate.routing.table import RouteTable

__all__ = ["DynamicRoute", "RouteCompiler", "RouteMatch", "RouteRecord", "RouteTable"]
