"""Document store client construction.

``default_client()`` returns the process-wide client repositories fall back
to when none is configured. It is built once from ``Config.from_env_or_file()``
and cached; ``reset_default_client()`` drops the cached instance.
"""

from __future__ import annotations

import threading
from urllib.parse import urlparse

from loguru import logger

from ..core.config import Config
from ..core.exceptions import ConfigError
from .http import HttpDocumentStore
from .memory import InMemoryDocumentStore
from .ports import DocumentStoreClient

_default_client: DocumentStoreClient | None = None
_lock = threading.Lock()


def create_client(config: Config) -> DocumentStoreClient:
    """Create a client for the configured store URL.

    Args:
        config: Application configuration.

    Returns:
        ``InMemoryDocumentStore`` for ``memory://`` URLs, otherwise
        ``HttpDocumentStore``.

    Raises:
        ConfigError: If the URL scheme is not supported.
    """
    scheme = urlparse(config.store.url).scheme
    if scheme == "memory":
        return InMemoryDocumentStore()
    if scheme in ("http", "https"):
        return HttpDocumentStore(config.store)
    raise ConfigError(f"Unsupported store URL: {config.store.url!r}")


def default_client() -> DocumentStoreClient:
    """Get the process-wide default client, creating it on first use."""
    global _default_client

    with _lock:
        if _default_client is None:
            config = Config.from_env_or_file()
            _default_client = create_client(config)
            logger.debug(f"Created default store client: {_default_client!r}")
        return _default_client


def set_default_client(client: DocumentStoreClient | None) -> None:
    """Replace the process-wide default client (``None`` resets it)."""
    global _default_client

    with _lock:
        _default_client = client


def reset_default_client() -> None:
    """Forget the cached default client."""
    set_default_client(None)
