"""Test fakes for testing without a real document store.

Example:
    from tests.fakes import RecordingDocumentStore

    store = RecordingDocumentStore(reverse_multi_get=True)
    MyRepository.client(store)
"""

from .stores import RecordedCall, RecordingDocumentStore

__all__ = [
    "RecordedCall",
    "RecordingDocumentStore",
]
