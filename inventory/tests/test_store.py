"""Tests for the document store boundary."""

from unittest.mock import patch

import pytest
from django.db import DatabaseError
from django.db.models import ProtectedError

from inventory.exceptions import DocumentNotFound, StoreError
from inventory.models import Category
from inventory.store import DocumentStore, store


pytestmark = pytest.mark.django_db


class TestCreateAndGet:
    """Tests for create/get."""

    def test_create_returns_record_with_id(self) -> None:
        record = store.create("categories", {"name": "Rum", "description": ""})
        assert record.pk is not None
        assert store.get("categories", record.pk).name == "Rum"

    def test_get_missing_raises_not_found(self) -> None:
        with pytest.raises(DocumentNotFound) as exc:
            store.get("categories", 9999)
        assert exc.value.collection == "categories"
        assert exc.value.doc_id == 9999

    def test_get_with_garbage_id_is_not_found(self) -> None:
        with pytest.raises(DocumentNotFound):
            store.get("products", "abc")

    def test_unknown_collection(self) -> None:
        with pytest.raises(StoreError):
            store.list("bottles")

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(StoreError):
            store.create("categories", {"name": "Gin", "colour": "clear"})

    def test_database_failure_is_wrapped(self) -> None:
        with patch.object(Category.objects, "create", side_effect=DatabaseError("down")):
            with pytest.raises(StoreError):
                store.create("categories", {"name": "Gin"})

    def test_not_found_is_a_store_error(self) -> None:
        assert issubclass(DocumentNotFound, StoreError)


class TestQueries:
    """Tests for list/query/count."""

    def test_query_exact_match(self, whiskey, jack_daniels) -> None:
        other = store.create("categories", {"name": "Vodka"})
        assert store.query("products", category_id=whiskey.pk) == [jack_daniels]
        assert store.query("products", category_id=other.pk) == []

    def test_list_and_count(self, whiskey) -> None:
        store.create("categories", {"name": "Vodka"})
        assert store.count("categories") == 2
        assert sorted(c.name for c in store.list("categories")) == ["Vodka", "Whiskey"]


class TestUpdateAndDelete:
    """Tests for update/delete."""

    def test_update_merges_fields(self, whiskey) -> None:
        store.update("categories", whiskey.pk, {"description": "Bourbon and rye"})
        refreshed = store.get("categories", whiskey.pk)
        assert refreshed.description == "Bourbon and rye"
        assert refreshed.name == "Whiskey"

    def test_update_missing_raises(self) -> None:
        with pytest.raises(DocumentNotFound):
            store.update("categories", 9999, {"name": "X"})

    def test_delete_removes(self, whiskey) -> None:
        store.delete("categories", whiskey.pk)
        with pytest.raises(DocumentNotFound):
            store.get("categories", whiskey.pk)

    def test_delete_protected_category_propagates(self, whiskey, jack_daniels) -> None:
        with pytest.raises(ProtectedError):
            store.delete("categories", whiskey.pk)

    def test_receipts_are_append_only(self) -> None:
        with pytest.raises(StoreError):
            store.update("receipts", 1, {"customer_name": "X"})
        with pytest.raises(StoreError):
            store.delete("receipts", 1)

    def test_custom_append_only_collections(self, whiskey) -> None:
        frozen = DocumentStore(append_only={"categories"})
        with pytest.raises(StoreError):
            frozen.delete("categories", whiskey.pk)
