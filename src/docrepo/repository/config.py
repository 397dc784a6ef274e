"""Per-repository configuration state.

Each repository definition owns exactly one ``RepositoryConfig``. It holds
the store client, the collection name, the document kind and the optional
class documents are materialized into.

Every field has two ways in:

- ``field(value=UNSET)``: read-or-set. Without an argument it returns the
  current value. An empty argument (``None`` or ``""``) is ignored so that a
  caller forwarding a possibly-empty variable cannot wipe configuration.
- ``set_field(value)``: plain setter. An empty value resets ``client``,
  ``collection_name`` and ``document_kind`` to their defaults.

``object_class`` has no default: ``None`` is a legitimate value meaning
"return raw source mappings", and both entry points store it. ``""`` is
stored as ``None``.
"""

from __future__ import annotations

from typing import Any, Callable

from loguru import logger

from ..core.types import DEFAULT_DOCUMENT_KIND
from ..store import factory
from ..store.ports import DocumentStoreClient

CONFIG_FIELDS = ("client", "collection_name", "document_kind", "object_class")


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def is_empty(value: Any) -> bool:
    """Whether ``value`` counts as empty for configuration purposes."""
    return value is None or (isinstance(value, str) and value == "")


class RepositoryConfig:
    """Mutable configuration for one repository definition."""

    def __init__(self, name: str, declared: dict[str, Any] | None = None):
        """Initialize configuration.

        Args:
            name: Name of the repository definition; the default collection
                name is derived from it.
            declared: Initial values declared on the repository class body.
        """
        self._name = name
        self._client: DocumentStoreClient | None = None
        self._collection_name: str | None = None
        self._document_kind: str | None = None
        self._object_class: Any = None

        for field_name, value in (declared or {}).items():
            if field_name == "object_class":
                self._object_class = None if is_empty(value) else value
            elif not is_empty(value):
                setattr(self, f"_{field_name}", value)

    def __repr__(self) -> str:
        return (
            f"RepositoryConfig(name={self._name!r}, collection_name={self.collection_name()!r}, "
            f"document_kind={self.document_kind()!r}, object_class={self._object_class!r})"
        )

    # -------------------------------------------------------------------------
    # Defaults
    # -------------------------------------------------------------------------

    def default_client(self) -> DocumentStoreClient:
        return factory.default_client()

    def default_collection_name(self) -> str:
        return self._name.lower()

    def default_document_kind(self) -> str:
        return DEFAULT_DOCUMENT_KIND

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def client(self, value: Any = UNSET) -> DocumentStoreClient:
        """Read the client, or set it when given a non-empty value."""
        return self._read_or_set("client", value, self.default_client)

    def set_client(self, value: DocumentStoreClient | None) -> DocumentStoreClient:
        """Set the client; ``None`` reverts to the default client."""
        return self._assign("client", value, self.default_client)

    def collection_name(self, value: Any = UNSET) -> str:
        """Read the collection name, or set it when given a non-empty value."""
        return self._read_or_set("collection_name", value, self.default_collection_name)

    def set_collection_name(self, value: str | None) -> str:
        """Set the collection name; empty reverts to the default name."""
        return self._assign("collection_name", value, self.default_collection_name)

    def document_kind(self, value: Any = UNSET) -> str:
        """Read the document kind, or set it when given a non-empty value."""
        return self._read_or_set("document_kind", value, self.default_document_kind)

    def set_document_kind(self, value: str | None) -> str:
        """Set the document kind; empty reverts to ``"_doc"``."""
        return self._assign("document_kind", value, self.default_document_kind)

    def object_class(self, value: Any = UNSET) -> Any:
        """Read the object class, or set it (``None`` included)."""
        if value is not UNSET:
            self.set_object_class(value)
        return self._object_class

    def set_object_class(self, value: Any) -> Any:
        """Set the object class; an empty value clears it."""
        self._object_class = None if is_empty(value) else value
        logger.debug(f"{self._name}: object_class = {self._object_class!r}")
        return self._object_class

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _read_or_set(self, field_name: str, value: Any, default: Callable[[], Any]) -> Any:
        attr = f"_{field_name}"
        if value is not UNSET and not is_empty(value):
            setattr(self, attr, value)
            logger.debug(f"{self._name}: {field_name} = {value!r}")
        elif getattr(self, attr) is None:
            setattr(self, attr, default())
        return getattr(self, attr)

    def _assign(self, field_name: str, value: Any, default: Callable[[], Any]) -> Any:
        if is_empty(value):
            value = default()
            logger.debug(f"{self._name}: {field_name} reset to default {value!r}")
        else:
            logger.debug(f"{self._name}: {field_name} = {value!r}")
        setattr(self, f"_{field_name}", value)
        return value
