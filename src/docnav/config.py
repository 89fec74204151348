"""Configuration management for docnav.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from docnav.core.links import DEFAULT_LINK_PREFIXES
from docnav.core.types import Channel

CONFIG_FILENAME = "docnav.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class DocsConfig:
    """Documentation sources configuration."""

    source_dir: Path = field(default_factory=lambda: Path("docs"))
    manifest: Path = field(default_factory=lambda: Path("sidebar.json"))


@dataclass
class NavigationConfig:
    """Navigation query configuration."""

    default_channel: Channel = Channel.STABLE
    link_prefixes: list[str] = field(default_factory=lambda: list(DEFAULT_LINK_PREFIXES))


@dataclass
class LiveReloadConfig:
    """Live reload configuration."""

    enabled: bool = True


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    docs: DocsConfig
    navigation: NavigationConfig
    live_reload: LiveReloadConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for docnav.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(
            server=ServerConfig(),
            docs=DocsConfig(),
            navigation=NavigationConfig(),
            live_reload=LiveReloadConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            docs=cls._parse_docs(data.get("docs"), config_dir),
            navigation=cls._parse_navigation(data.get("navigation")),
            live_reload=cls._parse_live_reload(data.get("live_reload")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_docs(cls, data: object, config_dir: Path) -> DocsConfig:
        """Parse docs configuration section.

        Args:
            data: Raw docs section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            DocsConfig instance
        """
        if data is None:
            return DocsConfig(
                source_dir=config_dir / "docs",
                manifest=config_dir / "sidebar.json",
            )

        if not isinstance(data, dict):
            raise ValueError("docs section must be a dictionary")

        source_dir = data.get("source_dir", "docs")
        if not isinstance(source_dir, str):
            raise ValueError("docs.source_dir must be a string")

        manifest = data.get("manifest", "sidebar.json")
        if not isinstance(manifest, str):
            raise ValueError("docs.manifest must be a string")

        return DocsConfig(
            source_dir=config_dir / source_dir,
            manifest=config_dir / manifest,
        )

    @classmethod
    def _parse_navigation(cls, data: object) -> NavigationConfig:
        if data is None:
            return NavigationConfig()

        if not isinstance(data, dict):
            raise ValueError("navigation section must be a dictionary")

        default_channel = data.get("default_channel", Channel.STABLE.value)
        if not isinstance(default_channel, str):
            raise ValueError("navigation.default_channel must be a string")
        try:
            channel = Channel(default_channel)
        except ValueError:
            choices = ", ".join(c.value for c in Channel)
            raise ValueError(
                f"navigation.default_channel must be one of: {choices}"
            ) from None

        prefixes_raw = data.get("link_prefixes", list(DEFAULT_LINK_PREFIXES))
        if not isinstance(prefixes_raw, list):
            raise ValueError("navigation.link_prefixes must be a list")
        link_prefixes: list[str] = []
        for item in prefixes_raw:
            if not isinstance(item, str):
                raise ValueError("navigation.link_prefixes items must be strings")
            link_prefixes.append(item)

        return NavigationConfig(default_channel=channel, link_prefixes=link_prefixes)

    @classmethod
    def _parse_live_reload(cls, data: object) -> LiveReloadConfig:
        if data is None:
            return LiveReloadConfig()

        if not isinstance(data, dict):
            raise ValueError("live_reload section must be a dictionary")

        enabled = data.get("enabled", True)
        if not isinstance(enabled, bool):
            raise ValueError("live_reload.enabled must be a boolean")

        return LiveReloadConfig(enabled=enabled)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        source_dir: Path | None = None,
        manifest: Path | None = None,
        default_channel: Channel | None = None,
        live_reload_enabled: bool | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        docs = self.docs
        if source_dir is not None or manifest is not None:
            docs = replace(
                self.docs,
                source_dir=source_dir if source_dir is not None else self.docs.source_dir,
                manifest=manifest if manifest is not None else self.docs.manifest,
            )

        navigation = self.navigation
        if default_channel is not None:
            navigation = replace(self.navigation, default_channel=default_channel)

        live_reload = self.live_reload
        if live_reload_enabled is not None:
            live_reload = replace(self.live_reload, enabled=live_reload_enabled)

        return replace(
            self,
            server=server,
            docs=docs,
            navigation=navigation,
            live_reload=live_reload,
        )
