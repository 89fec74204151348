"""Core type definitions."""

from enum import StrEnum


class Channel(StrEnum):
    """Release channel used to filter navigation."""

    STABLE = "stable"
    CANARY = "canary"


def canonical_path(path: str) -> str:
    """Strip trailing slashes from a non-root path.

    This is the only normalization applied to paths, both when indexing
    and when querying.
    """
    if path == "/":
        return path
    stripped = path.rstrip("/")
    return stripped or "/"
