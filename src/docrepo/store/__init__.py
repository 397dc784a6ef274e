"""Document store clients for docrepo.

This package provides the narrow client interface repositories depend on
and two implementations of it:

- InMemoryDocumentStore: dictionary-backed store for tests and ``memory://``
- HttpDocumentStore: Elasticsearch-compatible REST client built on httpx

Example:
    from docrepo.store import InMemoryDocumentStore

    store = InMemoryDocumentStore()
    store.index("people", "_doc", {"name": "Ada"}, id="1")
"""

from .factory import create_client, default_client, reset_default_client, set_default_client
from .http import HttpDocumentStore
from .memory import InMemoryDocumentStore
from .ports import DocumentStoreClient

__all__ = [
    "DocumentStoreClient",
    "InMemoryDocumentStore",
    "HttpDocumentStore",
    "create_client",
    "default_client",
    "set_default_client",
    "reset_default_client",
]
