"""Shared query parameter parsing for API endpoints."""

import json

from aiohttp import web

from docnav.app_keys import default_channel_key
from docnav.core.types import Channel


def get_channel(request: web.Request) -> Channel:
    """Read the channel query parameter, falling back to the configured default.

    Raises:
        web.HTTPBadRequest: If the channel is unknown
    """
    raw = request.query.get("channel")
    if raw is None:
        return request.app[default_channel_key]
    try:
        return Channel(raw)
    except ValueError:
        body = json.dumps({"error": "Invalid channel", "channel": raw})
        raise web.HTTPBadRequest(text=body, content_type="application/json") from None


def normalize_path(path: str) -> str:
    """Ensure a matched path has a leading slash."""
    return path if path.startswith("/") else f"/{path}"
