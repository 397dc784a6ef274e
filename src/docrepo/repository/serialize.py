"""Conversion between domain objects and stored source mappings."""

from typing import Any, Mapping

from ..core.types import StoredEnvelope


class SerializeMixin:
    """Serialize documents for the store and deserialize envelopes from it."""

    def serialize(self, document: Any) -> Any:
        """Convert a domain object into the mapping that gets stored.

        Objects with a callable ``to_dict`` are converted through it; anything
        else is assumed to be a mapping already and returned unchanged.
        """
        to_dict = getattr(document, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        return document

    def deserialize(self, envelope: StoredEnvelope | Mapping[str, Any]) -> Any:
        """Materialize the source of a stored envelope.

        Args:
            envelope: A ``StoredEnvelope`` or a raw store payload carrying
                a ``_source`` key.

        Returns:
            An instance of the configured ``object_class`` built from the
            source (via ``object_class.from_dict`` when available, otherwise
            ``object_class(source)``), or the raw source mapping when no
            object class is configured.
        """
        if isinstance(envelope, StoredEnvelope):
            source = envelope.source
        else:
            source = envelope["_source"]

        klass = self.object_class()
        if klass is None:
            return source

        from_dict = getattr(klass, "from_dict", None)
        if callable(from_dict):
            return from_dict(source)
        return klass(source)
