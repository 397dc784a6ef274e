"""Collection lifecycle for repositories."""

from typing import Any

from loguru import logger


class ManagementMixin:
    """Create, delete, check and refresh the configured collection."""

    def create_collection(self, force: bool = False, body: dict[str, Any] | None = None) -> None:
        """Create the configured collection.

        Args:
            force: Delete the collection first if it already exists.
            body: Optional settings/mappings passed to the store verbatim.

        Raises:
            CollectionExistsError: If it exists and ``force`` is False.
        """
        client = self.client()
        name = self.collection_name()

        if force and client.collection_exists(name):
            client.delete_collection(name)
            logger.info(f"Deleted collection {name!r} before re-creating it")

        client.create_collection(name, body)
        logger.info(f"Created collection {name!r}")

    def delete_collection(self) -> None:
        """Delete the configured collection and all of its documents."""
        name = self.collection_name()
        self.client().delete_collection(name)
        logger.info(f"Deleted collection {name!r}")

    def collection_exists(self) -> bool:
        return self.client().collection_exists(self.collection_name())

    def refresh_collection(self) -> None:
        self.client().refresh_collection(self.collection_name())
