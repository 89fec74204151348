"""docnav - documentation sidebar navigation.

Builds an immutable route tree from a sidebar manifest and answers
lookup, breadcrumb and prev/next queries for documentation pages.
"""

from docnav.core.errors import NotFound, ValidationError
from docnav.core.index import NavigationIndex
from docnav.core.loader import ManifestLoader
from docnav.core.tree import RouteNode, RouteTree, TreeBuilder
from docnav.core.types import Channel

__all__ = [
    "Channel",
    "ManifestLoader",
    "NavigationIndex",
    "NotFound",
    "RouteNode",
    "RouteTree",
    "TreeBuilder",
    "ValidationError",
]
