"""Navigation index over a route tree.

Provides the queries a documentation site needs: path lookup,
flattened ordering per channel, breadcrumbs, and prev/next paging.
Everything is computed once at construction; queries never walk the
tree again.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, NamedTuple

from docnav.core.errors import NotFound, ValidationError
from docnav.core.tree import RouteNode, RouteTree
from docnav.core.types import Channel, canonical_path

logger = logging.getLogger(__name__)


class DisplayEntry(NamedTuple):
    """Sidebar display list entry, including section headers."""

    node: RouteNode
    depth: int


class Neighbors(NamedTuple):
    """Previous and next pages in flattened order."""

    previous: RouteNode | None
    next: RouteNode | None


class NavigationIndex:
    """Immutable query index built from a RouteTree.

    Stores nodes in a flat depth-first list with parent/children
    relationships tracked by indices. Canary status is resolved once
    per node, including inheritance from ancestors. Provides O(1) path
    lookups and paging, and O(d) breadcrumbs where d is the node depth.
    """

    __slots__ = (
        "_canary",
        "_children",
        "_depths",
        "_flat",
        "_nodes",
        "_parents",
        "_path_index",
        "_positions",
        "_roots",
        "_tree",
    )

    def __init__(self, tree: RouteTree) -> None:
        """Index a tree. Prefer `NavigationIndex.from_tree`.

        Raises:
            ValidationError: If two paths collide after canonicalization
        """
        self._tree = tree
        self._nodes: list[RouteNode] = []
        self._parents: list[int | None] = []
        self._children: list[list[int]] = []
        self._depths: list[int] = []
        self._canary: list[bool] = []
        self._roots: list[int] = []
        self._path_index: dict[str, int] = {}

        stack: list[tuple[RouteNode, int | None, bool]] = [
            (child, None, False) for child in reversed(tree.root.children)
        ]
        while stack:
            node, parent_idx, inherited = stack.pop()
            idx = self._add(node, parent_idx, inherited or node.canary)
            stack.extend(
                (child, idx, self._canary[idx]) for child in reversed(node.children)
            )

        self._flat: dict[Channel, tuple[int, ...]] = {
            channel: tuple(
                i
                for i, node in enumerate(self._nodes)
                if node.is_navigable and self._visible(i, channel)
            )
            for channel in Channel
        }
        self._positions: dict[Channel, dict[int, int]] = {
            channel: {idx: pos for pos, idx in enumerate(order)}
            for channel, order in self._flat.items()
        }

    @classmethod
    def from_tree(cls, tree: RouteTree) -> NavigationIndex:
        """Build an index for the given tree."""
        index = cls(tree)
        logger.debug(
            f"Indexed {len(index._nodes)} nodes, "
            f"{len(index._flat[Channel.STABLE])} stable and "
            f"{len(index._flat[Channel.CANARY])} canary pages"
        )
        return index

    def _add(self, node: RouteNode, parent_idx: int | None, canary: bool) -> int:
        idx = len(self._nodes)
        self._nodes.append(node)
        self._parents.append(parent_idx)
        self._children.append([])
        self._canary.append(canary)

        if parent_idx is None:
            self._roots.append(idx)
            self._depths.append(0)
        else:
            self._children[parent_idx].append(idx)
            self._depths.append(self._depths[parent_idx] + 1)

        if node.is_navigable and node.path is not None:
            key = canonical_path(node.path)
            if key in self._path_index:
                raise ValidationError(f"duplicate path {node.path}")
            self._path_index[key] = idx

        return idx

    def _visible(self, idx: int, channel: Channel) -> bool:
        return channel is Channel.CANARY or not self._canary[idx]

    def _resolve(self, path: str) -> int:
        idx = self._path_index.get(canonical_path(path))
        if idx is None:
            logger.debug(f"Lookup miss: {path}")
            raise NotFound(path)
        return idx

    @property
    def tree(self) -> RouteTree:
        """Tree this index was built from."""
        return self._tree

    def lookup(self, path: str) -> RouteNode:
        """Get node by exact path.

        Args:
            path: Route path (e.g., "/reference/react/useId")

        Returns:
            RouteNode owning the path

        Raises:
            NotFound: If no node has this path
        """
        return self._nodes[self._resolve(path)]

    def get(self, path: str) -> RouteNode | None:
        """Get node by exact path, or None if not found."""
        idx = self._path_index.get(canonical_path(path))
        if idx is None:
            return None
        return self._nodes[idx]

    def is_canary(self, path: str) -> bool:
        """Whether the node at path is canary-only, counting ancestors.

        Raises:
            NotFound: If no node has this path
        """
        return self._canary[self._resolve(path)]

    def flatten(self, channel: Channel = Channel.STABLE) -> tuple[RouteNode, ...]:
        """Navigable nodes in depth-first source order for a channel.

        Section headers and pathless grouping nodes are excluded. The
        stable channel also excludes canary-only nodes.
        """
        return tuple(self._nodes[i] for i in self._flat[Channel(channel)])

    def display_list(self, channel: Channel = Channel.STABLE) -> tuple[DisplayEntry, ...]:
        """All visible nodes with depth, keeping section headers in place.

        Used to render grouping labels. Not suitable for paging.
        """
        channel = Channel(channel)
        return tuple(
            DisplayEntry(node, self._depths[i])
            for i, node in enumerate(self._nodes)
            if self._visible(i, channel)
        )

    def breadcrumb(self, path: str) -> tuple[RouteNode, ...]:
        """Nodes from the top of the tree down to and including the node.

        Returns an empty tuple for the root ("" or "/" when no node owns
        "/"). Grouping nodes without a path are included.

        Raises:
            NotFound: If the path doesn't resolve
        """
        key = canonical_path(path)
        if key in ("", "/") and key not in self._path_index:
            return ()

        chain: list[RouteNode] = []
        current: int | None = self._resolve(path)
        while current is not None:
            chain.append(self._nodes[current])
            current = self._parents[current]

        chain.reverse()
        return tuple(chain)

    def neighbors(self, path: str, channel: Channel = Channel.STABLE) -> Neighbors:
        """Previous and next pages around path in flattened channel order.

        Raises:
            NotFound: If the path doesn't resolve or is hidden from channel
        """
        channel = Channel(channel)
        idx = self._resolve(path)
        position = self._positions[channel].get(idx)
        if position is None:
            raise NotFound(path, channel.value)

        order = self._flat[channel]
        previous = self._nodes[order[position - 1]] if position > 0 else None
        following = self._nodes[order[position + 1]] if position + 1 < len(order) else None
        return Neighbors(previous=previous, next=following)

    def sidebar(self, channel: Channel = Channel.STABLE) -> list[dict[str, Any]]:
        """Channel-filtered nested structure for sidebar rendering."""
        channel = Channel(channel)
        items: dict[int, dict[str, Any]] = {}

        # Nodes are stored depth-first, so children are built before parents.
        for idx in reversed(range(len(self._nodes))):
            if not self._visible(idx, channel):
                continue

            node = self._nodes[idx]
            if node.is_section_header:
                items[idx] = {"sectionHeader": node.section_header_text}
                continue

            item: dict[str, Any] = {"title": node.title}
            if node.path is not None:
                item["path"] = node.path
            if self._canary[idx]:
                item["canary"] = True
            children = [items[i] for i in self._children[idx] if i in items]
            if children:
                item["children"] = children
            items[idx] = item

        return [items[i] for i in self._roots if i in items]

    def paths(self) -> Iterator[str]:
        """Iterate over indexed paths in source order."""
        for idx in self._path_index.values():
            path = self._nodes[idx].path
            if path is not None:
                yield path

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and canonical_path(path) in self._path_index

    def __len__(self) -> int:
        return len(self._nodes)
