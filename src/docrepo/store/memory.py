"""In-process document store.

Implements the DocumentStoreClient port with plain dictionaries. Used for
``memory://`` configurations and throughout the test suite.
"""

from __future__ import annotations

import copy
import threading
import uuid
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from ..core.exceptions import CollectionExistsError, CollectionNotFoundError


@dataclass
class _StoredDocument:
    source: dict[str, Any]
    version: int = 1


@dataclass
class _Collection:
    body: dict[str, Any] = field(default_factory=dict)
    # keyed by (kind, id)
    documents: dict[tuple[str, str], _StoredDocument] = field(default_factory=dict)


class InMemoryDocumentStore:
    """Dictionary-backed document store.

    Documents are keyed by ``(kind, id)`` inside each collection, so a
    document saved under one kind is not visible under another. Sources are
    deep-copied on the way in and out; callers never share state with the
    store.

    Example:
        >>> store = InMemoryDocumentStore()
        >>> store.index("people", "_doc", {"name": "Ada"}, id="1")["result"]
        'created'
        >>> store.get("people", "_doc", "1")["_source"]
        {'name': 'Ada'}
    """

    def __init__(self) -> None:
        self._collections: dict[str, _Collection] = {}
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"InMemoryDocumentStore(collections={sorted(self._collections)!r})"

    # -------------------------------------------------------------------------
    # Documents
    # -------------------------------------------------------------------------

    def get(self, collection: str, kind: str, id: str, **params: Any) -> dict[str, Any]:
        with self._lock:
            coll = self._require(collection)
            return self._envelope(collection, kind, str(id), coll)

    def multi_get(
        self, collection: str, kind: str, ids: list[str], **params: Any
    ) -> list[dict[str, Any]]:
        with self._lock:
            coll = self._require(collection)
            return [self._envelope(collection, kind, str(id), coll) for id in ids]

    def exists(self, collection: str, kind: str, id: str, **params: Any) -> bool:
        with self._lock:
            coll = self._collections.get(collection)
            return coll is not None and (kind, str(id)) in coll.documents

    def index(
        self,
        collection: str,
        kind: str,
        document: dict[str, Any],
        id: str | None = None,
        **params: Any,
    ) -> dict[str, Any]:
        with self._lock:
            # Writing to a missing collection creates it
            coll = self._collections.setdefault(collection, _Collection())
            doc_id = str(id) if id is not None else uuid.uuid4().hex
            key = (kind, doc_id)

            existing = coll.documents.get(key)
            version = existing.version + 1 if existing else 1
            coll.documents[key] = _StoredDocument(copy.deepcopy(dict(document)), version)

        result = "updated" if existing else "created"
        logger.debug(f"Indexed document: collection={collection!r} id={doc_id!r} result={result}")
        return self._write_response(collection, kind, doc_id, version, result)

    def update(
        self, collection: str, kind: str, id: str, fields: dict[str, Any], **params: Any
    ) -> dict[str, Any]:
        with self._lock:
            coll = self._require(collection)
            stored = coll.documents.get((kind, str(id)))
            if stored is None:
                return self._write_response(collection, kind, str(id), None, "not_found")

            stored.source.update(copy.deepcopy(dict(fields)))
            stored.version += 1
            version = stored.version

        return self._write_response(collection, kind, str(id), version, "updated")

    def delete(self, collection: str, kind: str, id: str, **params: Any) -> dict[str, Any]:
        with self._lock:
            coll = self._require(collection)
            stored = coll.documents.pop((kind, str(id)), None)

        if stored is None:
            return self._write_response(collection, kind, str(id), None, "not_found")
        return self._write_response(collection, kind, str(id), stored.version + 1, "deleted")

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------

    def create_collection(self, collection: str, body: dict[str, Any] | None = None) -> None:
        with self._lock:
            if collection in self._collections:
                raise CollectionExistsError(collection)
            self._collections[collection] = _Collection(body=dict(body or {}))

    def delete_collection(self, collection: str) -> None:
        with self._lock:
            if self._collections.pop(collection, None) is None:
                raise CollectionNotFoundError(collection)

    def collection_exists(self, collection: str) -> bool:
        with self._lock:
            return collection in self._collections

    def refresh_collection(self, collection: str) -> None:
        # Writes are visible immediately
        with self._lock:
            self._require(collection)

    def close(self) -> None:
        """Drop all collections."""
        with self._lock:
            self._collections.clear()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _require(self, collection: str) -> _Collection:
        coll = self._collections.get(collection)
        if coll is None:
            raise CollectionNotFoundError(collection)
        return coll

    def _envelope(
        self, collection: str, kind: str, id: str, coll: _Collection
    ) -> dict[str, Any]:
        envelope: dict[str, Any] = {"_index": collection, "_type": kind, "_id": id}
        stored = coll.documents.get((kind, id))
        if stored is None:
            envelope["found"] = False
            return envelope

        envelope["_version"] = stored.version
        envelope["found"] = True
        envelope["_source"] = copy.deepcopy(stored.source)
        return envelope

    @staticmethod
    def _write_response(
        collection: str, kind: str, id: str, version: int | None, result: str
    ) -> dict[str, Any]:
        response: dict[str, Any] = {
            "_index": collection,
            "_type": kind,
            "_id": id,
            "result": result,
        }
        if version is not None:
            response["_version"] = version
        return response
