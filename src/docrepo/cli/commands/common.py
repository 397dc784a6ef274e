"""Helpers shared by CLI commands."""

from ...repository import Repository
from ...store.ports import DocumentStoreClient


def repository_for(client: DocumentStoreClient, collection: str, kind: str | None = None) -> type[Repository]:
    """Build a throwaway repository definition bound to a collection.

    Args:
        client: Store client to use.
        collection: Collection name.
        kind: Document kind; the repository default when omitted.

    Returns:
        The repository class, usable through class-level calls.
    """

    class CliRepository(Repository):
        pass

    CliRepository.client(client)
    CliRepository.collection_name(collection)
    CliRepository.document_kind(kind)
    return CliRepository
