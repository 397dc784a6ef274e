"""Document lookup for repositories."""

from typing import Any

from loguru import logger

from ..core.exceptions import DocumentNotFound
from ..core.types import StoredEnvelope


class FindMixin:
    """Existence checks and single/batch retrieval by id.

    Lookups accept per-call options. ``collection`` and ``kind`` override the
    configured collection name and document kind for that call only; any
    other option (``routing``, ``preference``, ...) is passed to the client.
    """

    def exists(self, id: Any, **options: Any) -> bool:
        """Check whether a document exists.

        A missing document is ``False``, never an error.
        """
        collection, kind, params = self._lookup_target(options)
        found = self.client().exists(collection, kind, id, **params)
        logger.debug(f"exists: collection={collection!r} kind={kind!r} id={id!r} -> {found}")
        return bool(found)

    def find(self, *ids: Any, **options: Any) -> Any:
        """Retrieve one or many documents by id.

        ``find(id)`` returns the document or raises ``DocumentNotFound``.
        ``find([id1, id2])`` and ``find(id1, id2)`` return a list in input
        order, with ``None`` in the slots of documents that were not found.

        Raises:
            DocumentNotFound: Single-id form only, when the document is absent.
            ValueError: When called without ids.
        """
        if not ids:
            raise ValueError("find() requires at least one id")

        if len(ids) == 1 and isinstance(ids[0], (list, tuple)):
            return self._find_many(list(ids[0]), options)
        if len(ids) > 1:
            return self._find_many(list(ids), options)
        return self._find_one(ids[0], options)

    def _find_one(self, id: Any, options: dict[str, Any]) -> Any:
        collection, kind, params = self._lookup_target(options)
        raw = self.client().get(collection, kind, id, **params)

        if not raw or not raw.get("found"):
            logger.debug(f"find: collection={collection!r} kind={kind!r} id={id!r} not found")
            raise DocumentNotFound(id, collection, kind)
        return self.deserialize(StoredEnvelope.from_raw(raw))

    def _find_many(self, ids: list[Any], options: dict[str, Any]) -> list[Any]:
        if not ids:
            return []

        collection, kind, params = self._lookup_target(options)
        docs = self.client().multi_get(collection, kind, ids, **params)

        # Slots are matched by id; the store may answer in any order
        found: dict[str, StoredEnvelope] = {}
        for raw in docs:
            if raw.get("found"):
                found.setdefault(str(raw.get("_id")), StoredEnvelope.from_raw(raw))

        logger.debug(
            f"find: collection={collection!r} kind={kind!r} requested={len(ids)} found={len(found)}"
        )
        return [self.deserialize(found[str(id)]) if str(id) in found else None for id in ids]

    def _lookup_target(self, options: dict[str, Any]) -> tuple[str, str, dict[str, Any]]:
        params = dict(options)
        collection = params.pop("collection", None) or self.collection_name()
        kind = params.pop("kind", None) or self.document_kind()
        return collection, kind, params
