"""Configuration management for docrepo."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import ConfigError
from .types import DEFAULT_DOCUMENT_KIND


@dataclass
class StoreConfig:
    """Document store connection configuration."""

    # http(s):// for a REST endpoint, memory:// for the in-process store
    url: str = "http://localhost:9200"
    timeout: float = 30.0
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Main application configuration."""

    store: StoreConfig = field(default_factory=StoreConfig)
    default_kind: str = DEFAULT_DOCUMENT_KIND

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls()._apply_env()

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to the TOML file.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to load config file {path}: {e}") from e

        config = cls._from_dict(data)
        return config._apply_env()

    @classmethod
    def from_env_or_file(cls, path: Path | None = None) -> "Config":
        """Load from ``path`` or ``DOCREPO_CONFIG`` if given, else from env."""
        if path is None and (env_path := os.environ.get("DOCREPO_CONFIG")):
            path = Path(env_path)
        if path is not None:
            return cls.from_file(path)
        return cls.from_env()

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        config = cls()
        store = data.get("store", {})
        if not isinstance(store, dict):
            raise ConfigError("[store] must be a table")

        if "url" in store:
            config.store.url = str(store["url"])
        if "timeout" in store:
            config.store.timeout = float(store["timeout"])
        if "headers" in store:
            if not isinstance(store["headers"], dict):
                raise ConfigError("[store.headers] must be a table")
            config.store.headers = {str(k): str(v) for k, v in store["headers"].items()}
        if kind := data.get("default_kind"):
            config.default_kind = str(kind)
        return config

    def _apply_env(self) -> "Config":
        if url := os.environ.get("DOCREPO_URL"):
            self.store.url = url

        if timeout := os.environ.get("DOCREPO_TIMEOUT"):
            try:
                self.store.timeout = float(timeout)
            except ValueError as e:
                raise ConfigError(f"Invalid DOCREPO_TIMEOUT: {timeout!r}") from e

        return self
