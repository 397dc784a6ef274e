"""Collection management commands for the docrepo CLI."""

from ...store.ports import DocumentStoreClient
from .common import repository_for


def handle_create_collection(args, client: DocumentStoreClient) -> int:
    """Create a collection, replacing it when ``--force`` is given."""
    repo = repository_for(client, args.collection)
    repo.create_collection(force=args.force)
    print(f"✓ Created collection: {args.collection}")
    return 0


def handle_delete_collection(args, client: DocumentStoreClient) -> int:
    """Delete a collection.

    Raises:
        CollectionNotFoundError: If the collection does not exist.
    """
    repo = repository_for(client, args.collection)
    repo.delete_collection()
    print(f"✓ Deleted collection: {args.collection}")
    return 0
