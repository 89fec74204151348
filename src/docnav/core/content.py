"""Filesystem content source.

Resolves validated navigation paths to authored markdown files. Page
bodies are returned as raw text and never interpreted here.
"""

from pathlib import Path

CONTENT_SUFFIXES = (".md", ".mdx")


class ContentSource:
    """Reads page bodies from a source directory keyed by path."""

    def __init__(self, source_dir: Path) -> None:
        """Initialize content source.

        Args:
            source_dir: Root directory containing markdown sources
        """
        self._source_dir = source_dir

    @property
    def source_dir(self) -> Path:
        """Root directory containing markdown sources."""
        return self._source_dir

    def resolve(self, path: str) -> Path | None:
        """Resolve a path to its source file.

        "/reference/react/useId" maps to "reference/react/useId.md" (or
        ".mdx"), falling back to "reference/react/useId/index.md".

        Args:
            path: Route path (with or without leading slash)

        Returns:
            Existing source file, or None if there is none
        """
        relative = path.strip("/")
        if not relative:
            candidates = [self._source_dir / f"index{s}" for s in CONTENT_SUFFIXES]
        else:
            if ".." in Path(relative).parts:
                return None
            base = self._source_dir / relative
            candidates = [base.with_name(base.name + s) for s in CONTENT_SUFFIXES]
            candidates.extend(base / f"index{s}" for s in CONTENT_SUFFIXES)

        for candidate in candidates:
            if candidate.is_file():
                return candidate
        return None

    def read(self, path: str) -> str:
        """Read the page body for a path.

        Raises:
            FileNotFoundError: If no source file exists for the path
        """
        source_path = self.resolve(path)
        if source_path is None:
            raise FileNotFoundError(f"Source file not found for path: {path}")
        return source_path.read_text(encoding="utf-8")
