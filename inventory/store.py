"""
Document-store boundary used by every screen.

Collections are addressed by name and documents by id. Each collection is
backed by a Django model, so a "document" is a model instance and the id is
its primary key. ``receipts`` is append-only.

Multi-document operations built on top of this module (the category delete
guard, category resolve-or-create) are plain sequences of calls. Nothing
here wraps them in a cross-document transaction.
"""
import logging

from django.apps import apps
from django.core.exceptions import ObjectDoesNotExist
from django.db import DatabaseError
from django.db.models import ProtectedError

from .exceptions import DocumentNotFound, StoreError

logger = logging.getLogger(__name__)


COLLECTIONS = {
    'categories': 'inventory.Category',
    'products': 'inventory.Product',
    'receipts': 'sales.Receipt',
}

APPEND_ONLY = frozenset({'receipts'})


class DocumentStore:
    """CRUD and exact-match queries over the named collections."""

    def __init__(self, collections=None, append_only=APPEND_ONLY):
        self.collections = dict(collections or COLLECTIONS)
        self.append_only = frozenset(append_only)

    def model_for(self, collection):
        try:
            label = self.collections[collection]
        except KeyError:
            raise StoreError(f"Unknown collection '{collection}'")
        return apps.get_model(label)

    def _field_names(self, model):
        names = set()
        for field in model._meta.concrete_fields:
            names.add(field.name)
            names.add(field.attname)
        return names

    def _check_fields(self, collection, fields):
        model = self.model_for(collection)
        unknown = set(fields) - self._field_names(model)
        if unknown:
            raise StoreError(
                f"Unknown field(s) for '{collection}': {', '.join(sorted(unknown))}"
            )
        return model

    def _check_writable(self, collection, operation):
        if collection in self.append_only:
            raise StoreError(f"'{collection}' is append-only; {operation} is not allowed")

    # ============================================
    # OPERATIONS
    # ============================================

    def create(self, collection, fields):
        """Persist a new document and return it. ``record.pk`` is its id."""
        model = self._check_fields(collection, fields)
        try:
            record = model.objects.create(**fields)
        except DatabaseError as e:
            logger.error(f"Create in '{collection}' failed: {e}")
            raise StoreError(f"Could not create document in '{collection}'") from e
        logger.info(f"Created {collection}/{record.pk}")
        return record

    def get(self, collection, doc_id):
        model = self.model_for(collection)
        try:
            return model.objects.get(pk=doc_id)
        except (ObjectDoesNotExist, ValueError, TypeError):
            raise DocumentNotFound(collection, doc_id)
        except DatabaseError as e:
            logger.error(f"Get {collection}/{doc_id} failed: {e}")
            raise StoreError(f"Could not read document from '{collection}'") from e

    def list(self, collection):
        """Full scan of a collection."""
        return self.query(collection)

    def query(self, collection, **matches):
        """Documents whose fields equal every value in ``matches``."""
        model = self._check_fields(collection, matches)
        try:
            return list(model.objects.filter(**matches))
        except DatabaseError as e:
            logger.error(f"Query on '{collection}' {matches} failed: {e}")
            raise StoreError(f"Could not read from '{collection}'") from e

    def between(self, collection, field_name, lower, upper):
        """Documents whose ``field_name`` lies in the inclusive range [lower, upper]."""
        model = self._check_fields(collection, {field_name: None})
        lookups = {f"{field_name}__gte": lower, f"{field_name}__lte": upper}
        try:
            return list(model.objects.filter(**lookups))
        except DatabaseError as e:
            logger.error(f"Range query on '{collection}'.{field_name} failed: {e}")
            raise StoreError(f"Could not read from '{collection}'") from e

    def count(self, collection):
        model = self.model_for(collection)
        try:
            return model.objects.count()
        except DatabaseError as e:
            logger.error(f"Count on '{collection}' failed: {e}")
            raise StoreError(f"Could not read from '{collection}'") from e

    def update(self, collection, doc_id, fields):
        """Merge ``fields`` into the document; other fields are left alone."""
        self._check_writable(collection, 'update')
        self._check_fields(collection, fields)
        record = self.get(collection, doc_id)
        for name, value in fields.items():
            setattr(record, name, value)
        try:
            record.save()
        except DatabaseError as e:
            logger.error(f"Update {collection}/{doc_id} failed: {e}")
            raise StoreError(f"Could not update document in '{collection}'") from e
        logger.info(f"Updated {collection}/{doc_id}: {sorted(fields)}")
        return record

    def delete(self, collection, doc_id):
        self._check_writable(collection, 'delete')
        record = self.get(collection, doc_id)
        try:
            record.delete()
        except ProtectedError:
            raise
        except DatabaseError as e:
            logger.error(f"Delete {collection}/{doc_id} failed: {e}")
            raise StoreError(f"Could not delete document from '{collection}'") from e
        logger.info(f"Deleted {collection}/{doc_id}")


store = DocumentStore()
