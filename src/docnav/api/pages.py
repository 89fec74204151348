"""Pages API endpoint.

Combines the authored page body with its navigation context. Bodies
are returned as stored; rendering happens in the frontend.
"""

import json
from hashlib import md5

from aiohttp import web

from docnav.api.params import get_channel, normalize_path
from docnav.api.serialize import breadcrumb_items, neighbors_dict
from docnav.app_keys import content_key, loader_key
from docnav.core.errors import NotFound


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/pages/{path:.*}", get_page),
    ]


async def get_page(request: web.Request) -> web.Response:
    path = request.match_info["path"]
    channel = get_channel(request)
    index = request.app[loader_key].load()
    content = request.app[content_key]

    normalized = normalize_path(path)
    try:
        node = index.lookup(normalized)
        neighbors = index.neighbors(normalized, channel)
    except NotFound:
        return web.json_response(
            {"error": "Page not found", "path": path},
            status=404,
        )

    try:
        body = content.read(normalized)
    except FileNotFoundError:
        return web.json_response(
            {"error": "Page content not found", "path": path},
            status=404,
        )

    response_data = {
        "meta": {
            "title": node.title,
            "path": node.path,
            "canary": index.is_canary(normalized),
        },
        "breadcrumbs": breadcrumb_items(index.breadcrumb(normalized)),
        "neighbors": neighbors_dict(neighbors, index),
        "content": body,
    }

    etag = _compute_etag(json.dumps(response_data, sort_keys=True))
    if request.headers.get("If-None-Match") == etag:
        return web.Response(status=304)

    return web.json_response(
        response_data,
        headers={
            "ETag": etag,
            "Cache-Control": "private, max-age=60",
        },
    )


def _compute_etag(content: str) -> str:
    # First 16 hex chars (64 bits) are enough for cache validation
    content_hash = md5(content.encode("utf-8"), usedforsecurity=False).hexdigest()[:16]
    return f'"{content_hash}"'
