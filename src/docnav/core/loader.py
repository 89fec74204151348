"""Manifest loading with atomic index replacement."""

import logging
import threading
from pathlib import Path

from docnav.core.errors import ValidationError
from docnav.core.index import NavigationIndex
from docnav.core.tree import TreeBuilder

logger = logging.getLogger(__name__)


class ManifestLoader:
    """Loads the sidebar manifest and holds the current NavigationIndex.

    The held index is never modified. A reload builds a complete new
    index and replaces the reference in one assignment, so callers that
    already obtained an index keep a consistent view of the old tree.
    """

    def __init__(self, manifest_path: Path) -> None:
        """Initialize loader.

        Args:
            manifest_path: Path to the JSON sidebar manifest
        """
        self._manifest_path = manifest_path
        self._index: NavigationIndex | None = None
        self._lock = threading.Lock()

    @property
    def manifest_path(self) -> Path:
        """Path to the JSON sidebar manifest."""
        return self._manifest_path

    @property
    def current(self) -> NavigationIndex | None:
        """Current index, or None before the first successful load."""
        return self._index

    def load(self) -> NavigationIndex:
        """Return the current index, building it on first use.

        Raises:
            FileNotFoundError: If the manifest doesn't exist
            ValidationError: If the manifest is invalid
        """
        index = self._index
        if index is not None:
            return index
        with self._lock:
            if self._index is None:
                self._index = self._build()
            return self._index

    def reload(self) -> NavigationIndex:
        """Rebuild the index from the manifest and swap it in.

        On failure the previous index stays in place and the error is
        re-raised.

        Raises:
            FileNotFoundError: If the manifest doesn't exist
            ValidationError: If the manifest is invalid
        """
        with self._lock:
            try:
                index = self._build()
            except (ValidationError, FileNotFoundError) as e:
                if self._index is not None:
                    logger.error(f"Manifest reload failed, keeping previous index: {e}")
                raise
            self._index = index
        logger.info(f"Reloaded navigation index from {self._manifest_path}")
        return index

    def _build(self) -> NavigationIndex:
        tree = TreeBuilder().build_from_file(self._manifest_path)
        return NavigationIndex.from_tree(tree)
