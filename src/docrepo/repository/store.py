"""Document persistence for repositories."""

from typing import Any, Mapping

from loguru import logger

from ..core.exceptions import DocumentNotFound


def document_id(document: Any, serialized: Any = None) -> Any:
    """Extract the id of a document.

    Looks at the ``id`` attribute of the object first, then at the ``id`` and
    ``_id`` keys of its serialized mapping, then of the document itself.
    """
    if isinstance(document, (str, int)):
        return document

    id = getattr(document, "id", None)
    for mapping in (serialized, document):
        if id is not None:
            break
        if isinstance(mapping, Mapping):
            id = mapping.get("id")
            if id is None:
                id = mapping.get("_id")
    return id


def _strip_metadata(serialized: Any) -> Any:
    # _id is envelope metadata, not part of the stored source
    if isinstance(serialized, Mapping) and "_id" in serialized:
        return {k: v for k, v in serialized.items() if k != "_id"}
    return serialized


class StoreMixin:
    """Save, update and delete documents."""

    def save(self, document: Any, **options: Any) -> dict[str, Any]:
        """Serialize and store a document.

        The id comes from the document (see ``document_id``); without one the
        store generates it.

        Returns:
            The store response, including ``_id`` and ``result``.
        """
        serialized = self.serialize(document)
        id = document_id(document, serialized)
        collection, kind, params = self._lookup_target(options)

        response = self.client().index(collection, kind, _strip_metadata(serialized), id=id, **params)
        logger.debug(
            f"save: collection={collection!r} kind={kind!r} id={response.get('_id')!r} "
            f"result={response.get('result')}"
        )
        return response

    def update(self, document_or_id: Any, doc: Mapping[str, Any] | None = None, **options: Any) -> dict[str, Any]:
        """Merge fields into a stored document.

        Args:
            document_or_id: A document (its serialized fields are merged) or
                an id (``doc`` gives the fields).
            doc: Fields to merge when an id is given.
            **options: Per-call options, as for ``find``.

        Raises:
            DocumentNotFound: If the document does not exist.
            ValueError: If no id or no fields can be determined.
        """
        if isinstance(document_or_id, (str, int)):
            id = document_or_id
            if doc is None:
                raise ValueError("update() by id requires doc=")
            fields = dict(doc)
        else:
            serialized = self.serialize(document_or_id)
            id = document_id(document_or_id, serialized)
            fields = dict(_strip_metadata(serialized))
            if doc:
                fields.update(doc)

        if id is None:
            raise ValueError("update() requires a document with an id")

        collection, kind, params = self._lookup_target(options)
        response = self.client().update(collection, kind, id, fields, **params)
        if response.get("result") == "not_found":
            raise DocumentNotFound(id, collection, kind)

        logger.debug(f"update: collection={collection!r} kind={kind!r} id={id!r}")
        return response

    def delete(self, document_or_id: Any, **options: Any) -> dict[str, Any]:
        """Delete a document by id, or the document's own id.

        Raises:
            DocumentNotFound: If the document does not exist.
        """
        id = document_id(document_or_id, self.serialize(document_or_id))
        if id is None:
            raise ValueError("delete() requires an id or a document with an id")

        collection, kind, params = self._lookup_target(options)
        response = self.client().delete(collection, kind, id, **params)
        if response.get("result") == "not_found":
            raise DocumentNotFound(id, collection, kind)

        logger.debug(f"delete: collection={collection!r} kind={kind!r} id={id!r}")
        return response
