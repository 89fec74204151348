"""WebSocket-based live reload for the navigation manifest.

Watches the sidebar manifest for changes, rebuilds the navigation
index, and notifies connected clients so they refetch navigation.
"""

import asyncio
import json
import logging
import weakref
from pathlib import Path

from aiohttp import WSMsgType, web
from watchfiles import Change, awatch

from docnav.core.errors import ValidationError
from docnav.core.loader import ManifestLoader

logger = logging.getLogger(__name__)


class ManifestWatcher:
    """Manages WebSocket connections and manifest watching.

    A failed rebuild leaves the previous index in place, so clients
    keep being served a consistent tree until the manifest is fixed.
    """

    def __init__(self, loader: ManifestLoader) -> None:
        """Initialize the watcher.

        Args:
            loader: Loader owning the index to rebuild on change
        """
        self._loader = loader
        self._connections: weakref.WeakSet[web.WebSocketResponse] = weakref.WeakSet()
        self._watch_task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        """Start the file watcher."""
        if self._watch_task is not None:
            return
        self._watch_task = asyncio.create_task(self._watch_manifest())

    async def stop(self) -> None:
        """Stop the file watcher and close all connections."""
        if self._watch_task is not None:
            self._watch_task.cancel()
            try:
                await self._watch_task
            except asyncio.CancelledError:
                pass
            self._watch_task = None

        for ws in list(self._connections):
            await ws.close()

    async def handle_websocket(self, request: web.Request) -> web.WebSocketResponse:
        """Handle WebSocket connection for live reload."""
        ws = web.WebSocketResponse()
        await ws.prepare(request)

        self._connections.add(ws)

        try:
            async for msg in ws:
                if msg.type == WSMsgType.ERROR:
                    break
        finally:
            self._connections.discard(ws)

        return ws

    async def _watch_manifest(self) -> None:
        manifest = self._loader.manifest_path
        async for changes in awatch(manifest.parent):
            if self.is_manifest_change(changes):
                await self.handle_change()

    def is_manifest_change(self, changes: set[tuple[Change, str]]) -> bool:
        """Whether a watchfiles change set touches the manifest."""
        manifest = self._loader.manifest_path.resolve()
        return any(
            change_type != Change.deleted and Path(path_str).resolve() == manifest
            for change_type, path_str in changes
        )

    async def handle_change(self) -> bool:
        """Rebuild the index and notify clients.

        Returns:
            True if the index was replaced
        """
        try:
            self._loader.reload()
        except (ValidationError, FileNotFoundError) as e:
            logger.warning(f"Ignoring manifest change: {e}")
            return False

        await self._broadcast({"type": "navigation"})
        return True

    async def _broadcast(self, event: dict[str, str]) -> None:
        if not self._connections:
            return

        message = json.dumps(event)

        for ws in list(self._connections):
            if ws.closed:
                continue
            try:
                await ws.send_str(message)
            except ConnectionResetError:
                # Client disconnected mid-send, will be cleaned up by WeakSet
                pass


def create_live_reload_routes(watcher: ManifestWatcher) -> list[web.RouteDef]:
    """Create routes for live reload WebSocket."""
    return [web.get("/ws/live-reload", watcher.handle_websocket)]
