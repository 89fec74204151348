"""JSON shapes shared by API endpoints."""

from typing import Any

from docnav.core.index import NavigationIndex, Neighbors
from docnav.core.tree import RouteNode


def route_summary(node: RouteNode, index: NavigationIndex) -> dict[str, Any]:
    """Title, path and effective canary flag of a route."""
    result: dict[str, Any] = {"title": node.title, "path": node.path}
    if node.path is not None:
        result["canary"] = index.is_canary(node.path)
    return result


def breadcrumb_items(breadcrumb: tuple[RouteNode, ...]) -> list[dict[str, Any]]:
    return [{"title": node.title, "path": node.path} for node in breadcrumb]


def neighbors_dict(neighbors: Neighbors, index: NavigationIndex) -> dict[str, Any]:
    return {
        "previous": (
            route_summary(neighbors.previous, index) if neighbors.previous else None
        ),
        "next": route_summary(neighbors.next, index) if neighbors.next else None,
    }
