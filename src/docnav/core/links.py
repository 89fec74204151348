"""Build-time link checking.

Validates that root-relative cross-references in authored pages, and
the pages named by the manifest, resolve.
"""

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from docnav.core.content import CONTENT_SUFFIXES, ContentSource
from docnav.core.index import NavigationIndex

logger = logging.getLogger(__name__)

DEFAULT_LINK_PREFIXES = ("/reference/", "/learn/")

_MARKDOWN_LINK_RE = re.compile(r"\]\((/[^)\s]*)(?:\s+\"[^\"]*\")?\)")
_HREF_RE = re.compile(r"href=[\"'](/[^\"']*)[\"']")


@dataclass(frozen=True)
class BrokenLink:
    """Cross-reference that does not resolve."""

    source: Path
    line: int
    target: str

    def __str__(self) -> str:
        return f"{self.source}:{self.line}: {self.target}"


def extract_links(text: str) -> Iterator[tuple[int, str]]:
    """Yield (line number, target) for root-relative links in markdown."""
    for lineno, line in enumerate(text.splitlines(), start=1):
        for pattern in (_MARKDOWN_LINK_RE, _HREF_RE):
            for match in pattern.finditer(line):
                yield lineno, match.group(1)


def _strip_target(target: str) -> str:
    return target.split("#", 1)[0].split("?", 1)[0]


def check_links(
    index: NavigationIndex,
    source_dir: Path,
    prefixes: Iterable[str] = DEFAULT_LINK_PREFIXES,
) -> list[BrokenLink]:
    """Find links under the given prefixes that the index can't resolve.

    Args:
        index: Navigation index to resolve against
        source_dir: Directory of authored markdown pages
        prefixes: Only targets starting with one of these are checked

    Returns:
        Broken links ordered by file and line
    """
    prefixes = tuple(prefixes)
    broken: list[BrokenLink] = []
    if not source_dir.exists():
        return broken

    files = sorted(
        p for p in source_dir.rglob("*") if p.is_file() and p.suffix in CONTENT_SUFFIXES
    )
    for file_path in files:
        text = file_path.read_text(encoding="utf-8")
        relative = file_path.relative_to(source_dir)
        for lineno, target in extract_links(text):
            path = _strip_target(target)
            if not path.startswith(prefixes):
                continue
            if path not in index:
                broken.append(BrokenLink(source=relative, line=lineno, target=target))

    logger.info(f"Checked {len(files)} files, {len(broken)} broken links")
    return broken


def check_manifest_sources(index: NavigationIndex, content: ContentSource) -> list[str]:
    """List manifest paths that have no content file."""
    return [path for path in index.paths() if content.resolve(path) is None]
