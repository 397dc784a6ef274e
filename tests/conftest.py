"""Pytest configuration and fixtures."""

import pytest

from docrepo.repository import Repository
from docrepo.store import InMemoryDocumentStore, reset_default_client
from tests.fakes import RecordingDocumentStore


@pytest.fixture(autouse=True)
def isolated_default_client(monkeypatch):
    """Build the default client from a clean environment in every test."""
    monkeypatch.delenv("DOCREPO_URL", raising=False)
    monkeypatch.delenv("DOCREPO_TIMEOUT", raising=False)
    monkeypatch.delenv("DOCREPO_CONFIG", raising=False)
    reset_default_client()
    yield
    reset_default_client()


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Provide an empty in-memory store."""
    return InMemoryDocumentStore()


@pytest.fixture
def recording_store() -> RecordingDocumentStore:
    """Provide an in-memory store that records calls."""
    return RecordingDocumentStore()


@pytest.fixture
def repo_class():
    """Provide a fresh repository definition with default configuration."""

    class MyRepository(Repository):
        pass

    return MyRepository


@pytest.fixture
def stored_repo(repo_class, store):
    """Provide a repository definition bound to the in-memory store."""
    repo_class.client(store)
    return repo_class


@pytest.fixture(params=["class", "instance"])
def repository(request, repo_class):
    """Provide the same repository through the class and the instance path."""
    if request.param == "class":
        return repo_class
    return repo_class.instance()
