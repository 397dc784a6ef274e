"""Document lookup commands for the docrepo CLI."""

import argparse
import json

from ...core.exceptions import DocumentNotFound
from ...store.ports import DocumentStoreClient
from .common import repository_for


def add_lookup_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments shared by lookup commands."""
    parser.add_argument("collection", help="Collection name")
    parser.add_argument("-k", "--kind", default=None, help="Document kind (default: _doc)")


def handle_get(args, client: DocumentStoreClient) -> int:
    """Print one document, or a list of documents when several ids are given.

    Returns:
        Exit code: 0 on success, 1 if a single requested document is missing.
    """
    repo = repository_for(client, args.collection, args.kind)

    if len(args.ids) == 1:
        try:
            document = repo.find(args.ids[0])
        except DocumentNotFound as e:
            print(f"✗ {e}")
            return 1
    else:
        document = repo.find(args.ids)

    print(json.dumps(document, indent=2, default=str))
    return 0


def handle_exists(args, client: DocumentStoreClient) -> int:
    """Print whether a document exists; the exit code mirrors the answer."""
    repo = repository_for(client, args.collection, args.kind)
    found = repo.exists(args.id)
    print("true" if found else "false")
    return 0 if found else 1
