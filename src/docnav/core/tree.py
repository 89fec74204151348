"""Route tree for the sidebar manifest.

Parses the nested route specification into an immutable tree of
RouteNode instances. The tree is built once and never mutated; a
rebuild produces a new tree.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from docnav.core.errors import ValidationError
from docnav.core.types import canonical_path

logger = logging.getLogger(__name__)

MAX_DEPTH = 64


@dataclass(frozen=True)
class RouteNode:
    """Single node of the route tree."""

    title: str
    path: str | None = None
    is_section_header: bool = False
    section_header_text: str | None = None
    canary: bool = False
    children: tuple[RouteNode, ...] = ()

    @property
    def is_navigable(self) -> bool:
        """Whether the node can be resolved and paged to."""
        return self.path is not None and not self.is_section_header

    def to_dict(self) -> dict[str, Any]:
        """Convert to manifest-shaped dictionary for JSON serialization."""
        if self.is_section_header:
            result: dict[str, Any] = {
                "hasSectionHeader": True,
                "sectionHeader": self.section_header_text,
            }
            if self.title != self.section_header_text:
                result["title"] = self.title
        else:
            result = {"title": self.title}
            if self.path is not None:
                result["path"] = self.path
        if self.canary:
            result["canary"] = True
        if self.children:
            result["routes"] = [child.to_dict() for child in self.children]
        return result


@dataclass(frozen=True)
class RouteTree:
    """Immutable route tree under a synthetic, pathless root."""

    root: RouteNode
    source: Path | None = field(default=None, compare=False)

    def walk(self) -> Iterator[tuple[RouteNode, int]]:
        """Yield (node, depth) pairs depth-first in source order.

        The synthetic root is not yielded; its children have depth 0.
        """
        stack = [(child, 0) for child in reversed(self.root.children)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            stack.extend((child, depth + 1) for child in reversed(node.children))

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())


class TreeBuilder:
    """Builder for constructing RouteTree instances from a manifest.

    Accepts either a single root object (its own title and path, with
    nested routes) or a list of top-level route objects.
    """

    def __init__(self) -> None:
        self._seen_paths: dict[str, str] = {}

    def build(self, manifest: object, source: Path | None = None) -> RouteTree:
        """Build an immutable tree from parsed manifest data.

        Args:
            manifest: Parsed manifest (mapping or list of mappings)
            source: Optional file the manifest was read from

        Returns:
            RouteTree with the manifest's nodes in source order

        Raises:
            ValidationError: If the manifest violates a structural rule
        """
        self._seen_paths = {}
        if isinstance(manifest, Mapping):
            children = (self._build_node(manifest, "root", 0),)
        elif isinstance(manifest, list):
            children = self._build_routes(manifest, "", 0)
        else:
            raise ValidationError("manifest must be an object or a list of objects")

        root = RouteNode(title="", children=children)
        return RouteTree(root=root, source=source)

    def build_from_file(self, path: Path) -> RouteTree:
        """Read a JSON manifest and build a tree from it.

        Raises:
            FileNotFoundError: If the manifest doesn't exist
            ValidationError: If the manifest is not valid JSON or is malformed
        """
        raw = path.read_bytes()
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValidationError(
                f"invalid UTF-8: {e.reason} at byte {e.start}", path.name
            ) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"invalid JSON: {e.msg}", f"{path.name}:{e.lineno}:{e.colno}"
            ) from e

        tree = self.build(data, source=path)
        logger.info(f"Loaded manifest {path} with {len(tree)} nodes")
        return tree

    def _build_routes(
        self, routes: Sequence[object], prefix: str, depth: int
    ) -> tuple[RouteNode, ...]:
        return tuple(
            self._build_node(item, f"{prefix}[{i}]", depth) for i, item in enumerate(routes)
        )

    def _build_node(self, data: object, location: str, depth: int) -> RouteNode:
        if depth >= MAX_DEPTH:
            raise ValidationError(f"routes nested deeper than {MAX_DEPTH} levels", location)
        if not isinstance(data, Mapping):
            raise ValidationError("route must be an object", location)

        path = data.get("path")
        if path is not None and not isinstance(path, str):
            raise ValidationError("path must be a string", location)
        if path == "":
            path = None

        canary = data.get("canary", False)
        if not isinstance(canary, bool):
            raise ValidationError("canary must be a boolean", location)

        routes = data.get("routes")
        if routes is not None and not isinstance(routes, list):
            raise ValidationError("routes must be a list", location)

        is_header = data.get("hasSectionHeader", False)
        if not isinstance(is_header, bool):
            raise ValidationError("hasSectionHeader must be a boolean", location)

        if is_header:
            return self._build_section_header(data, path, routes, canary, location)

        title = data.get("title")
        if title is None:
            raise ValidationError("route is missing a title", location)
        if not isinstance(title, str):
            raise ValidationError("title must be a string", location)

        if path is not None:
            self._register_path(path, location)

        children = (
            self._build_routes(routes, f"{location}.routes", depth + 1) if routes else ()
        )
        return RouteNode(title=title, path=path, canary=canary, children=children)

    def _build_section_header(
        self,
        data: Mapping[str, object],
        path: str | None,
        routes: list[object] | None,
        canary: bool,
        location: str,
    ) -> RouteNode:
        if path is not None:
            raise ValidationError("section header must not have a path", location)
        if routes:
            raise ValidationError("section header must not have routes", location)

        text = data.get("sectionHeader")
        if text is None:
            raise ValidationError("section header is missing sectionHeader", location)
        if not isinstance(text, str):
            raise ValidationError("sectionHeader must be a string", location)

        title = data.get("title", text)
        if not isinstance(title, str):
            raise ValidationError("title must be a string", location)

        return RouteNode(
            title=title,
            is_section_header=True,
            section_header_text=text,
            canary=canary,
        )

    def _register_path(self, path: str, location: str) -> None:
        if not path.startswith("/"):
            raise ValidationError(f"path must start with '/': {path}", location)

        key = canonical_path(path)
        previous = self._seen_paths.get(key)
        if previous is not None:
            raise ValidationError(
                f"duplicate path {path} (first declared at {previous})", location
            )
        self._seen_paths[key] = location
