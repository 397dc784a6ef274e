"""Command implementations for the docrepo CLI."""

from .collection import handle_create_collection, handle_delete_collection
from .common import repository_for
from .documents import add_lookup_arguments, handle_exists, handle_get

__all__ = [
    "add_lookup_arguments",
    "handle_get",
    "handle_exists",
    "handle_create_collection",
    "handle_delete_collection",
    "repository_for",
]
