"""aiohttp server for docnav.

Application factory and route registration for standalone server mode.
"""

from aiohttp import web

from docnav.api.config import create_config_routes
from docnav.api.navigation import create_navigation_routes
from docnav.api.pages import create_pages_routes
from docnav.app_keys import (
    content_key,
    default_channel_key,
    live_reload_enabled_key,
    loader_key,
)
from docnav.config import Config
from docnav.core.content import ContentSource
from docnav.core.loader import ManifestLoader
from docnav.live import ManifestWatcher
from docnav.live.reload import create_live_reload_routes

watcher_key = web.AppKey("watcher", ManifestWatcher)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    The navigation index is built before the application is returned,
    so an invalid manifest prevents the server from starting.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application

    Raises:
        FileNotFoundError: If the manifest doesn't exist
        ValidationError: If the manifest is invalid
    """
    app = web.Application()

    loader = ManifestLoader(config.docs.manifest)
    loader.load()

    app[loader_key] = loader
    app[content_key] = ContentSource(config.docs.source_dir)
    app[default_channel_key] = config.navigation.default_channel
    app[live_reload_enabled_key] = config.live_reload.enabled

    app.router.add_routes(create_config_routes())
    app.router.add_routes(create_pages_routes())
    app.router.add_routes(create_navigation_routes())

    if config.live_reload.enabled:
        watcher = ManifestWatcher(loader)
        app[watcher_key] = watcher
        app.router.add_routes(create_live_reload_routes(watcher))
        app.on_startup.append(_start_live_reload)
        app.on_cleanup.append(_stop_live_reload)

    return app


async def _start_live_reload(app: web.Application) -> None:
    await app[watcher_key].start()


async def _stop_live_reload(app: web.Application) -> None:
    await app[watcher_key].stop()


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
