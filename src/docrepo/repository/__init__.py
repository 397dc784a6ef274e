"""Repository pattern engine.

Subclass ``Repository`` to define a repository for one kind of document:

    from docrepo.repository import Repository

    class NoteRepository(Repository):
        collection_name = "notes"

    id = NoteRepository.save({"title": "hello"})["_id"]
    NoteRepository.find(id)           # {"title": "hello"}
    NoteRepository.find([id, "nope"]) # [{"title": "hello"}, None]
"""

from .base import Repository, RepositoryMeta, repositorymethod
from .config import CONFIG_FIELDS, UNSET, RepositoryConfig
from .find import FindMixin
from .management import ManagementMixin
from .serialize import SerializeMixin
from .store import StoreMixin, document_id

__all__ = [
    "Repository",
    "RepositoryMeta",
    "repositorymethod",
    "RepositoryConfig",
    "CONFIG_FIELDS",
    "UNSET",
    "FindMixin",
    "SerializeMixin",
    "StoreMixin",
    "ManagementMixin",
    "document_id",
]
