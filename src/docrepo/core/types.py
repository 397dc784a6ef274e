"""Type definitions for docrepo."""

from dataclasses import dataclass, field
from typing import Any, Mapping

DEFAULT_DOCUMENT_KIND = "_doc"


@dataclass
class StoredEnvelope:
    """Raw stored-document wrapper returned by a lookup.

    Only ``id`` and ``source`` matter to the repository; the remaining
    fields are store metadata carried along for callers that want it.
    """

    id: str
    source: dict[str, Any] = field(default_factory=dict)
    collection: str | None = None
    kind: str | None = None
    version: int | None = None
    found: bool = True

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "StoredEnvelope":
        """Build an envelope from a store payload (``_id``, ``_source``, ...)."""
        return cls(
            id=str(raw.get("_id")),
            source=raw.get("_source") or {},
            collection=raw.get("_index"),
            kind=raw.get("_type"),
            version=raw.get("_version"),
            found=bool(raw.get("found", "_source" in raw)),
        )

    def to_raw(self) -> dict[str, Any]:
        """Convert back into the store payload shape."""
        raw: dict[str, Any] = {
            "_index": self.collection,
            "_type": self.kind,
            "_id": self.id,
            "found": self.found,
        }
        if self.found:
            raw["_version"] = self.version
            raw["_source"] = self.source
        return raw
