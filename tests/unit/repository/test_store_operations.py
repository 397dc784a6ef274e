"""Tests for save(), update() and delete()."""

from dataclasses import dataclass

import pytest

from docrepo.core.exceptions import DocumentNotFound
from docrepo.repository import document_id


@dataclass
class Note:
    id: str
    title: str

    def to_dict(self):
        return {"title": self.title}


class TestDocumentId:
    """Tests for id extraction."""

    def test_scalar_is_id(self):
        assert document_id("abc") == "abc"
        assert document_id(7) == 7

    def test_attribute(self):
        assert document_id(Note(id="n1", title="x"), {"title": "x"}) == "n1"

    def test_mapping_key(self):
        assert document_id({"id": "m1", "a": 1}) == "m1"

    def test_serialized_mapping_key(self):
        class Doc:
            def to_dict(self):
                return {"id": "s1"}

        assert document_id(Doc(), {"id": "s1"}) == "s1"

    def test_underscore_id_key(self):
        assert document_id({"_id": "u1", "a": 1}) == "u1"
        assert document_id(object(), {"_id": "u2"}) == "u2"

    def test_id_key_wins_over_underscore_id(self):
        assert document_id({"id": "m1", "_id": "u1"}) == "m1"

    def test_no_id(self):
        assert document_id({"a": 1}) is None


class TestSave:
    """Tests for save()."""

    def test_generates_id(self, stored_repo, store):
        """Documents without an id get one from the store."""
        response = stored_repo.save({"a": 1})

        assert response["result"] == "created"
        assert store.get("myrepository", "_doc", response["_id"])["_source"] == {"a": 1}

    def test_uses_document_id(self, stored_repo):
        """The document's own id is used."""
        response = stored_repo.save(Note(id="n1", title="hello"))

        assert response["_id"] == "n1"
        assert stored_repo.find("n1") == {"title": "hello"}

    def test_uses_underscore_id_key(self, stored_repo, store):
        """A mapping carrying _id is stored under that id, without _id in its source."""
        response = stored_repo.save({"_id": "abc", "a": 1})

        assert response["_id"] == "abc"
        assert stored_repo.find("abc") == {"a": 1}

        again = stored_repo.save({"_id": "abc", "a": 2})

        assert again["result"] == "updated"
        assert stored_repo.find("abc") == {"a": 2}
        assert store.get("myrepository", "_doc", "abc")["_source"] == {"a": 2}

    def test_save_twice_updates(self, stored_repo):
        """Saving the same id again replaces the document."""
        stored_repo.save({"id": "1", "a": 1})
        response = stored_repo.save({"id": "1", "a": 2})

        assert response["result"] == "updated"
        assert response["_version"] == 2
        assert stored_repo.find("1") == {"id": "1", "a": 2}

    def test_exists_after_save(self, stored_repo):
        """exists() is True after saving and False for other ids."""
        id = stored_repo.save({"a": 1})["_id"]

        assert stored_repo.exists(id)
        assert not stored_repo.exists("never-saved")

    def test_options_select_collection(self, stored_repo, store):
        """A collection override writes elsewhere."""
        id = stored_repo.save({"a": 1}, collection="archive")["_id"]

        assert store.exists("archive", "_doc", id)
        assert not stored_repo.exists(id)


class TestUpdate:
    """Tests for update()."""

    def test_update_by_id(self, stored_repo):
        """Fields given with doc= are merged."""
        id = stored_repo.save({"a": 1, "b": 1})["_id"]

        stored_repo.update(id, doc={"b": 2})

        assert stored_repo.find(id) == {"a": 1, "b": 2}

    def test_update_by_document(self, stored_repo):
        """A document's serialized fields are merged under its id."""
        stored_repo.save(Note(id="n1", title="old"))

        stored_repo.update(Note(id="n1", title="new"))

        assert stored_repo.find("n1") == {"title": "new"}

    def test_update_missing_raises(self, stored_repo):
        stored_repo.create_collection()

        with pytest.raises(DocumentNotFound):
            stored_repo.update("missing", doc={"a": 1})

    def test_update_by_id_requires_doc(self, stored_repo):
        with pytest.raises(ValueError):
            stored_repo.update("1")

    def test_update_document_without_id(self, stored_repo):
        with pytest.raises(ValueError):
            stored_repo.update({"a": 1})


class TestDelete:
    """Tests for delete()."""

    def test_delete_by_id(self, stored_repo):
        id = stored_repo.save({"a": 1})["_id"]

        response = stored_repo.delete(id)

        assert response["result"] == "deleted"
        assert not stored_repo.exists(id)

    def test_delete_by_document(self, stored_repo):
        note = Note(id="n1", title="x")
        stored_repo.save(note)

        stored_repo.delete(note)

        assert not stored_repo.exists("n1")

    def test_delete_missing_raises(self, stored_repo):
        stored_repo.create_collection()

        with pytest.raises(DocumentNotFound) as exc_info:
            stored_repo.delete("missing")

        assert exc_info.value.id == "missing"

    def test_delete_without_id(self, stored_repo):
        with pytest.raises(ValueError):
            stored_repo.delete({"a": 1})
