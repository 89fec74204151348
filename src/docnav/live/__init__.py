"""Live reload of the navigation manifest."""

from .reload import ManifestWatcher

__all__ = ["ManifestWatcher"]
