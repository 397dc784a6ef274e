"""Tests for exists() and find()."""

import pytest

from docrepo.core.exceptions import CollectionNotFoundError, DocumentNotFound
from docrepo.repository import Repository
from tests.fakes import RecordingDocumentStore


@pytest.fixture
def saved_ids(stored_repo) -> list[str]:
    """Save {a: 0}, {a: 1}, {a: 2} in order and return their ids."""
    return [stored_repo.save({"a": i})["_id"] for i in range(3)]


class TestExists:
    """Tests for exists()."""

    def test_existing_document(self, stored_repo):
        """A saved document exists."""
        id = stored_repo.save({"a": 1})["_id"]

        assert stored_repo.exists(id) is True

    def test_missing_document(self, stored_repo):
        """A never-saved id does not exist."""
        stored_repo.create_collection()

        assert stored_repo.exists("testing") is False

    def test_missing_collection(self, stored_repo):
        """exists() absorbs a missing collection into False."""
        assert stored_repo.exists("testing") is False

    def test_applies_options(self, stored_repo):
        """Per-call kind override is used for the check."""
        id = stored_repo.save({"a": 1})["_id"]

        assert stored_repo.exists(id, kind="other_kind") is False
        assert stored_repo.exists(id, collection="elsewhere") is False

    def test_options_are_not_persisted(self, stored_repo):
        """Overrides do not change the configuration."""
        id = stored_repo.save({"a": 1})["_id"]
        stored_repo.exists(id, kind="other_kind")

        assert stored_repo.document_kind() == "_doc"
        assert stored_repo.exists(id) is True


class TestFindSingle:
    """Tests for find() with one id."""

    def test_retrieves_document(self, stored_repo):
        """A saved document is returned as its source mapping."""
        id = stored_repo.save({"a": 1})["_id"]

        assert stored_repo.find(id) == {"a": 1}

    def test_missing_document_raises(self, stored_repo):
        """A missing id raises DocumentNotFound with the lookup details."""
        stored_repo.create_collection()

        with pytest.raises(DocumentNotFound) as exc_info:
            stored_repo.find(1)

        assert exc_info.value.id == 1
        assert exc_info.value.collection == "myrepository"
        assert exc_info.value.kind == "_doc"

    def test_applies_options(self, stored_repo):
        """A kind override that matches nothing raises DocumentNotFound."""
        id = stored_repo.save({"a": 1})["_id"]

        with pytest.raises(DocumentNotFound) as exc_info:
            stored_repo.find(id, kind="none")

        assert exc_info.value.kind == "none"

    def test_missing_collection_propagates_store_error(self, stored_repo):
        """A missing collection is a store error, not DocumentNotFound."""
        with pytest.raises(CollectionNotFoundError):
            stored_repo.find("1")

    def test_extra_options_reach_client(self, repo_class, recording_store):
        """Options other than collection/kind are passed to the client."""
        repo_class.client(recording_store)
        id = repo_class.save({"a": 1})["_id"]

        repo_class.find(id, routing="user-1")

        assert recording_store.last_call("get").kwargs == {"routing": "user-1"}

    def test_deserializes_into_object_class(self, stored_repo):
        """Configured object class is used for the result."""

        class Note:
            def __init__(self, source):
                self.source = source

        stored_repo.object_class(Note)
        id = stored_repo.save({"a": 1})["_id"]

        note = stored_repo.find(id)

        assert isinstance(note, Note)
        assert note.source == {"a": 1}


class TestFindMany:
    """Tests for find() with several ids."""

    def test_list_of_ids(self, stored_repo, saved_ids):
        """A list of ids returns documents in input order."""
        assert stored_repo.find(saved_ids) == [{"a": 0}, {"a": 1}, {"a": 2}]

    def test_variadic_ids(self, stored_repo, saved_ids):
        """Positional ids behave like a list."""
        assert stored_repo.find(*saved_ids) == stored_repo.find(saved_ids)

    def test_tuple_of_ids(self, stored_repo, saved_ids):
        """A tuple is treated like a list."""
        assert stored_repo.find(tuple(saved_ids)) == [{"a": 0}, {"a": 1}, {"a": 2}]

    def test_partial_miss_yields_none(self, stored_repo, saved_ids):
        """Missing documents become None in their slot."""
        saved_ids[1] = 22

        assert stored_repo.find(saved_ids) == [{"a": 0}, None, {"a": 2}]

    def test_missing_string_id(self, stored_repo, saved_ids):
        """A missing id in the middle does not raise."""
        ids = [saved_ids[0], "missing", saved_ids[2]]

        assert stored_repo.find(ids) == [{"a": 0}, None, {"a": 2}]

    def test_applies_options_to_whole_batch(self, stored_repo, saved_ids):
        """A kind override that matches nothing yields all None."""
        assert stored_repo.find(saved_ids, kind="none") == [None, None, None]

    def test_single_round_trip(self, repo_class, recording_store):
        """The batch form issues exactly one multi_get."""
        repo_class.client(recording_store)
        ids = [repo_class.save({"a": i})["_id"] for i in range(5)]

        repo_class.find(ids)

        assert recording_store.calls_to("multi_get") == 1
        assert recording_store.calls_to("get") == 0

    def test_order_follows_input_not_store(self, repo_class):
        """Result order mirrors the input even if the store reorders."""
        store = RecordingDocumentStore(reverse_multi_get=True)
        repo_class.client(store)
        ids = [repo_class.save({"a": i})["_id"] for i in range(3)]

        assert repo_class.find(ids) == [{"a": 0}, {"a": 1}, {"a": 2}]
        assert repo_class.find(list(reversed(ids))) == [{"a": 2}, {"a": 1}, {"a": 0}]

    def test_duplicate_ids(self, stored_repo, saved_ids):
        """A repeated id fills every slot it appears in."""
        ids = [saved_ids[0], saved_ids[0]]

        assert stored_repo.find(ids) == [{"a": 0}, {"a": 0}]

    def test_empty_list_skips_client(self, repo_class, recording_store):
        """An empty list returns [] without a store call."""
        repo_class.client(recording_store)

        assert repo_class.find([]) == []
        assert recording_store.calls == []

    def test_no_ids_raises(self, stored_repo):
        """find() requires at least one id."""
        with pytest.raises(ValueError):
            stored_repo.find()

    def test_missing_collection_propagates_store_error(self, stored_repo):
        """A missing collection fails the batch form too."""
        with pytest.raises(CollectionNotFoundError):
            stored_repo.find(["1", "2"])

    def test_declared_document_kind_is_used(self, store):
        """A kind declared on the class drives the lookup."""

        class KindRepository(Repository):
            client = store
            document_kind = "other_type"

        KindRepository.create_collection(force=True)
        ids = [KindRepository.save({"a": i})["_id"] for i in range(3)]

        assert KindRepository.find(ids) == [{"a": 0}, {"a": 1}, {"a": 2}]
        assert store.exists("kindrepository", "other_type", ids[0])
        assert not store.exists("kindrepository", "_doc", ids[0])


class TestBatchLookupScenario:
    """End-to-end save/find scenario."""

    def test_save_then_find_in_order(self, stored_repo):
        ids = [stored_repo.save(doc)["_id"] for doc in ({"a": 1}, {"a": 2}, {"a": 3})]

        assert stored_repo.find(ids) == [{"a": 1}, {"a": 2}, {"a": 3}]
        assert stored_repo.find([ids[0], "missing", ids[2]]) == [{"a": 1}, None, {"a": 3}]
