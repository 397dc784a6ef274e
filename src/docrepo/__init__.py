"""docrepo: a document repository abstraction over document stores."""

from .core.exceptions import (
    CollectionExistsError,
    CollectionNotFoundError,
    DocRepoError,
    DocumentNotFound,
    InstantiationNotAllowed,
    StoreError,
)
from .repository import Repository
from .store import HttpDocumentStore, InMemoryDocumentStore

__version__ = "0.1.0"

__all__ = [
    "Repository",
    "InMemoryDocumentStore",
    "HttpDocumentStore",
    "DocRepoError",
    "DocumentNotFound",
    "InstantiationNotAllowed",
    "StoreError",
    "CollectionNotFoundError",
    "CollectionExistsError",
]
