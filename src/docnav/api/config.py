"""Config API endpoint."""

from aiohttp import web

from docnav.app_keys import default_channel_key, live_reload_enabled_key


def create_config_routes() -> list[web.RouteDef]:
    return [web.get("/api/config", get_config)]


async def get_config(request: web.Request) -> web.Response:
    return web.json_response(
        {
            "defaultChannel": request.app[default_channel_key].value,
            "liveReloadEnabled": request.app[live_reload_enabled_key],
        }
    )
