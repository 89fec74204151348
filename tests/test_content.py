"""Tests for ContentSource."""

from pathlib import Path

import pytest
from docnav.core.content import ContentSource


class TestContentSource:
    """Tests for ContentSource class."""

    def test__source_dir__returns_path(self, docs_dir: Path) -> None:
        """Expose the configured source directory."""
        assert ContentSource(docs_dir).source_dir == docs_dir

    def test__resolve__markdown_file(self, docs_dir: Path) -> None:
        """Resolve path to a .md file."""
        content = ContentSource(docs_dir)

        source = content.resolve("/reference/react/useCallback")

        assert source == docs_dir / "reference" / "react" / "useCallback.md"

    def test__resolve__mdx_file(self, docs_dir: Path) -> None:
        """Resolve path to a .mdx file."""
        content = ContentSource(docs_dir)

        assert content.resolve("/reference/react/hooks") == (
            docs_dir / "reference" / "react" / "hooks.mdx"
        )

    def test__resolve__index_file(self, docs_dir: Path) -> None:
        """Fall back to index.md inside a directory."""
        content = ContentSource(docs_dir)

        assert content.resolve("/reference/react") == (
            docs_dir / "reference" / "react" / "index.md"
        )

    def test__resolve__without_leading_slash(self, docs_dir: Path) -> None:
        """Leading slash is optional."""
        content = ContentSource(docs_dir)

        assert content.resolve("reference/react/use") is not None

    def test__resolve__missing__returns_none(self, docs_dir: Path) -> None:
        """Return None when no file exists."""
        assert ContentSource(docs_dir).resolve("/reference/react/useId") is None

    def test__resolve__parent_traversal__returns_none(self, docs_dir: Path) -> None:
        """Refuse paths escaping the source directory."""
        (docs_dir.parent / "secret.md").write_text("secret")

        assert ContentSource(docs_dir).resolve("/../secret") is None

    def test__read__returns_body(self, docs_dir: Path) -> None:
        """Read the raw page body."""
        body = ContentSource(docs_dir).read("/reference/react/useCallback")

        assert body == "# useCallback\n\nCaches a function."

    def test__read__missing__raises(self, docs_dir: Path) -> None:
        """Missing page raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ContentSource(docs_dir).read("/reference/react/useId")
