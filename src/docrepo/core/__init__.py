"""Core types, configuration and exceptions for docrepo."""

from .config import Config, StoreConfig
from .exceptions import (
    CollectionExistsError,
    CollectionNotFoundError,
    ConfigError,
    DocRepoError,
    DocumentNotFound,
    InstantiationNotAllowed,
    RepositoryError,
    StoreError,
)
from .types import DEFAULT_DOCUMENT_KIND, StoredEnvelope

__all__ = [
    "Config",
    "StoreConfig",
    "DocRepoError",
    "ConfigError",
    "RepositoryError",
    "DocumentNotFound",
    "InstantiationNotAllowed",
    "StoreError",
    "CollectionNotFoundError",
    "CollectionExistsError",
    "DEFAULT_DOCUMENT_KIND",
    "StoredEnvelope",
]
