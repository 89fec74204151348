"""Tests for link checking."""

from pathlib import Path

from docnav.core.content import ContentSource
from docnav.core.index import NavigationIndex
from docnav.core.links import (
    BrokenLink,
    check_links,
    check_manifest_sources,
    extract_links,
)


class TestExtractLinks:
    """Tests for extract_links()."""

    def test__markdown_links(self) -> None:
        """Find root-relative markdown links with line numbers."""
        text = "Intro\n\nSee [useId](/reference/react/useId) and [docs](https://react.dev)."

        assert list(extract_links(text)) == [(3, "/reference/react/useId")]

    def test__link_with_title(self) -> None:
        """Link titles are not part of the target."""
        text = '[a](/reference/react/use "The use API")'

        assert list(extract_links(text)) == [(1, "/reference/react/use")]

    def test__href_attributes(self) -> None:
        """Find href attributes in embedded markup."""
        text = '<a href="/learn/thinking-in-react">Thinking</a>'

        assert list(extract_links(text)) == [(1, "/learn/thinking-in-react")]

    def test__relative_links__ignored(self) -> None:
        """Relative links are not extracted."""
        assert list(extract_links("[a](./other) [b](#anchor)")) == []


class TestCheckLinks:
    """Tests for check_links()."""

    def test__all_resolve__no_broken_links(
        self, index: NavigationIndex, docs_dir: Path
    ) -> None:
        """Sample docs only link to existing routes."""
        assert check_links(index, docs_dir) == []

    def test__unknown_target__reported(self, index: NavigationIndex, docs_dir: Path) -> None:
        """Report links to paths missing from the manifest."""
        page = docs_dir / "reference" / "react" / "useContext.md"
        page.write_text("# useContext\n\nPair with [useId](/reference/react/useId#usage).")

        broken = check_links(index, docs_dir)

        assert broken == [
            BrokenLink(
                source=Path("reference/react/useContext.md"),
                line=3,
                target="/reference/react/useId#usage",
            )
        ]
        assert str(broken[0]) == "reference/react/useContext.md:3: /reference/react/useId#usage"

    def test__fragment_and_query__stripped(
        self, index: NavigationIndex, docs_dir: Path
    ) -> None:
        """Fragments and query strings don't affect resolution."""
        (docs_dir / "page.md").write_text(
            "[a](/reference/react/use#reference) [b](/reference/react/hooks?tab=1)"
        )

        assert check_links(index, docs_dir) == []

    def test__other_prefixes__ignored(self, index: NavigationIndex, docs_dir: Path) -> None:
        """Only configured prefixes are checked."""
        (docs_dir / "page.md").write_text("[blog](/blog/2024/react-19)")

        assert check_links(index, docs_dir) == []
        assert len(check_links(index, docs_dir, prefixes=["/blog/"])) == 1

    def test__missing_source_dir__no_links(self, index: NavigationIndex, tmp_path: Path) -> None:
        """Missing source directory has nothing to check."""
        assert check_links(index, tmp_path / "nonexistent") == []


class TestCheckManifestSources:
    """Tests for check_manifest_sources()."""

    def test__reports_paths_without_content(
        self, index: NavigationIndex, docs_dir: Path
    ) -> None:
        """List manifest paths with no content file."""
        missing = check_manifest_sources(index, ContentSource(docs_dir))

        assert "/reference/react/useContext" in missing
        assert "/reference/react/useCallback" not in missing
        assert "/reference/react" not in missing
