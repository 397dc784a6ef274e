"""Port definition for the document store client.

The repository engine talks to a document store only through this narrow
protocol. Any object implementing these methods can be configured as a
repository client, including the in-memory fakes used in tests.

Payload shapes follow the Elasticsearch document APIs:

- ``get`` returns an envelope ``{"_index", "_type", "_id", "_version",
  "_source", "found"}``; a missing document is ``found: False``, not an error.
- ``multi_get`` returns one envelope per requested id.
- Missing collections raise ``CollectionNotFoundError``.

Usage:
    from docrepo.store.ports import DocumentStoreClient

    client: DocumentStoreClient = InMemoryDocumentStore()
    client.index("people", "_doc", {"name": "Ada"}, id="1")
    client.get("people", "_doc", "1")["_source"]
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DocumentStoreClient(Protocol):
    """Document store capability required by repositories."""

    def get(self, collection: str, kind: str, id: str, **params: Any) -> dict[str, Any]:
        """Fetch one document envelope."""
        ...

    def multi_get(
        self, collection: str, kind: str, ids: list[str], **params: Any
    ) -> list[dict[str, Any]]:
        """Fetch many envelopes in a single round-trip."""
        ...

    def exists(self, collection: str, kind: str, id: str, **params: Any) -> bool:
        """Check whether a document exists."""
        ...

    def index(
        self,
        collection: str,
        kind: str,
        document: dict[str, Any],
        id: str | None = None,
        **params: Any,
    ) -> dict[str, Any]:
        """Create or replace a document, returning the write response."""
        ...

    def update(
        self, collection: str, kind: str, id: str, fields: dict[str, Any], **params: Any
    ) -> dict[str, Any]:
        """Merge ``fields`` into an existing document."""
        ...

    def delete(self, collection: str, kind: str, id: str, **params: Any) -> dict[str, Any]:
        """Delete a document."""
        ...

    def create_collection(self, collection: str, body: dict[str, Any] | None = None) -> None:
        """Create a collection."""
        ...

    def delete_collection(self, collection: str) -> None:
        """Delete a collection and its documents."""
        ...

    def collection_exists(self, collection: str) -> bool:
        """Check whether a collection exists."""
        ...

    def refresh_collection(self, collection: str) -> None:
        """Make recent writes visible to reads."""
        ...
