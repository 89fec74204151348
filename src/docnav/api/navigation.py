"""Navigation API endpoints.

Provides the sidebar tree, the flattened page order, and per-route
breadcrumb and prev/next data.
"""

from aiohttp import web

from docnav.api.params import get_channel, normalize_path
from docnav.api.serialize import breadcrumb_items, neighbors_dict, route_summary
from docnav.app_keys import loader_key
from docnav.core.errors import NotFound


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
        web.get("/api/navigation/flat", get_flat_navigation),
        web.get("/api/routes/{path:.*}", get_route),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    channel = get_channel(request)
    index = request.app[loader_key].load()
    return web.json_response({"channel": channel.value, "items": index.sidebar(channel)})


async def get_flat_navigation(request: web.Request) -> web.Response:
    channel = get_channel(request)
    index = request.app[loader_key].load()
    items = [route_summary(node, index) for node in index.flatten(channel)]
    return web.json_response({"channel": channel.value, "items": items})


async def get_route(request: web.Request) -> web.Response:
    path = request.match_info["path"]
    channel = get_channel(request)
    # One index reference for the whole request, even if a reload swaps it
    index = request.app[loader_key].load()

    normalized = normalize_path(path)
    try:
        node = index.lookup(normalized)
        breadcrumb = index.breadcrumb(normalized)
        neighbors = index.neighbors(normalized, channel)
    except NotFound:
        return web.json_response(
            {"error": "Route not found", "path": path},
            status=404,
        )

    return web.json_response(
        {
            "route": route_summary(node, index),
            "breadcrumbs": breadcrumb_items(breadcrumb),
            "neighbors": neighbors_dict(neighbors, index),
        }
    )
