"""Shared test fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest
from docnav.config import (
    Config,
    DocsConfig,
    LiveReloadConfig,
    NavigationConfig,
    ServerConfig,
)
from docnav.core.index import NavigationIndex
from docnav.core.tree import TreeBuilder

SAMPLE_MANIFEST: dict[str, Any] = {
    "title": "API Reference",
    "path": "/reference/react",
    "routes": [
        {"hasSectionHeader": True, "sectionHeader": "react@18.2.0"},
        {
            "title": "Hooks",
            "path": "/reference/react/hooks",
            "routes": [
                {"title": "useCallback", "path": "/reference/react/useCallback"},
                {"title": "use", "path": "/reference/react/use", "canary": True},
                {"title": "useContext", "path": "/reference/react/useContext"},
            ],
        },
        {
            "title": "Components",
            "path": "/reference/react/components",
            "routes": [
                {"title": "<Suspense>", "path": "/reference/react/Suspense"},
            ],
        },
        {"hasSectionHeader": True, "sectionHeader": "Canary", "canary": True},
        {
            "title": "Directives",
            "path": "/reference/react/directives",
            "canary": True,
            "routes": [
                {"title": "'use client'", "path": "/reference/react/use-client"},
            ],
        },
        {
            "title": "Legacy APIs",
            "routes": [
                {"title": "Children", "path": "/reference/react/Children"},
                {"title": "cloneElement", "path": "/reference/react/cloneElement"},
            ],
        },
    ],
}

STABLE_PATHS = [
    "/reference/react",
    "/reference/react/hooks",
    "/reference/react/useCallback",
    "/reference/react/useContext",
    "/reference/react/components",
    "/reference/react/Suspense",
    "/reference/react/Children",
    "/reference/react/cloneElement",
]

CANARY_PATHS = [
    "/reference/react",
    "/reference/react/hooks",
    "/reference/react/useCallback",
    "/reference/react/use",
    "/reference/react/useContext",
    "/reference/react/components",
    "/reference/react/Suspense",
    "/reference/react/directives",
    "/reference/react/use-client",
    "/reference/react/Children",
    "/reference/react/cloneElement",
]


@pytest.fixture
def manifest_data() -> dict[str, Any]:
    """Fresh copy of the sample manifest."""
    return json.loads(json.dumps(SAMPLE_MANIFEST))


@pytest.fixture
def manifest_file(tmp_path: Path, manifest_data: dict[str, Any]) -> Path:
    """Sample manifest written to sidebar.json."""
    path = tmp_path / "sidebar.json"
    path.write_text(json.dumps(manifest_data), encoding="utf-8")
    return path


@pytest.fixture
def index(manifest_data: dict[str, Any]) -> NavigationIndex:
    """Navigation index over the sample manifest."""
    return NavigationIndex.from_tree(TreeBuilder().build(manifest_data))


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Content directory with a few authored pages."""
    docs = tmp_path / "docs"
    react = docs / "reference" / "react"
    react.mkdir(parents=True)
    (react / "index.md").write_text("# API Reference\n\nSee [Hooks](/reference/react/hooks).")
    (react / "useCallback.md").write_text("# useCallback\n\nCaches a function.")
    (react / "use.md").write_text("# use\n\nReads a resource.")
    (react / "hooks.mdx").write_text("# Hooks\n\n[useCallback](/reference/react/useCallback)")
    return docs


@pytest.fixture
def test_config(manifest_file: Path, docs_dir: Path) -> Config:
    """Create a test configuration with tmp_path files.

    Live reload is disabled so no watcher task is started.
    """
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(source_dir=docs_dir, manifest=manifest_file),
        navigation=NavigationConfig(),
        live_reload=LiveReloadConfig(enabled=False),
    )
