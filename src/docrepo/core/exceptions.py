"""Custom exceptions for docrepo."""

from typing import Any


class DocRepoError(Exception):
    """Base exception for all docrepo errors."""

    pass


class ConfigError(DocRepoError):
    """Configuration is invalid or cannot be loaded."""

    pass


class RepositoryError(DocRepoError):
    """Repository operation failed."""

    pass


class DocumentNotFound(RepositoryError):
    """Document does not exist in the searched collection/kind."""

    def __init__(self, id: Any, collection: str, kind: str):
        """Initialize exception with the lookup coordinates.

        Args:
            id: Identifier that was requested.
            collection: Collection that was searched.
            kind: Document kind that was searched.
        """
        self.id = id
        self.collection = collection
        self.kind = kind
        super().__init__(
            f"Document not found: id={id!r} collection={collection!r} kind={kind!r}"
        )


class InstantiationNotAllowed(RepositoryError):
    """A repository definition was constructed directly."""

    def __init__(self, repository: str):
        self.repository = repository
        super().__init__(
            f"{repository} is a singleton; use {repository}.instance() instead"
        )


class StoreError(DocRepoError):
    """Document store request failed."""

    def __init__(self, message: str, status: int | None = None, body: Any = None):
        """Initialize exception with the store response.

        Args:
            message: Human readable description.
            status: HTTP-like status code, if any.
            body: Raw response body, if any.
        """
        self.status = status
        self.body = body
        super().__init__(message)


class CollectionNotFoundError(StoreError):
    """Collection does not exist."""

    def __init__(self, collection: str, body: Any = None):
        self.collection = collection
        super().__init__(f"Collection not found: {collection}", status=404, body=body)


class CollectionExistsError(StoreError):
    """Collection already exists."""

    def __init__(self, collection: str, body: Any = None):
        self.collection = collection
        super().__init__(f"Collection already exists: {collection}", status=400, body=body)
