"""Application keys for type-safe app configuration access."""

from aiohttp import web

from docnav.core.content import ContentSource
from docnav.core.loader import ManifestLoader
from docnav.core.types import Channel

loader_key = web.AppKey("loader", ManifestLoader)
content_key = web.AppKey("content", ContentSource)
default_channel_key = web.AppKey("default_channel", Channel)
live_reload_enabled_key = web.AppKey("live_reload_enabled", bool)
