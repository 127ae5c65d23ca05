"""
Category and product stores.

Known limitations (single-operator deployment):

- ``CategoryStore.delete`` checks for referencing products and then deletes.
  A product created between the two steps is only caught by the PROTECT
  foreign key.
- ``resolve_or_create_category`` looks the name up and then creates it. Two
  concurrent calls with the same new name can both create a category.
"""
import logging
from decimal import Decimal

from django.db.models import ProtectedError

from .exceptions import ReferentialIntegrityError
from .store import store as default_store

logger = logging.getLogger(__name__)


class CategoryStore:

    collection = 'categories'

    def __init__(self, store=None):
        self.store = store or default_store

    def create(self, name, description=''):
        """No uniqueness check here; callers that care use resolve_or_create_category."""
        return self.store.create(self.collection, {
            'name': name.strip(),
            'description': (description or '').strip(),
        })

    def get(self, category_id):
        return self.store.get(self.collection, category_id)

    def list(self):
        return self.store.list(self.collection)

    def find_by_name(self, name):
        return self.store.query(self.collection, name=name.strip())

    def update(self, category_id, **fields):
        """
        Merge the given fields. Products keep the category_name they were
        written with.
        """
        if 'name' in fields:
            fields['name'] = fields['name'].strip()
        return self.store.update(self.collection, category_id, fields)

    def delete(self, category_id):
        category = self.get(category_id)

        # Referential integrity guard
        referencing = self.store.query('products', category_id=category.pk)
        if referencing:
            logger.warning(
                f"Refused to delete category {category.pk} ({category.name}): "
                f"{len(referencing)} product(s) reference it"
            )
            raise ReferentialIntegrityError(category.name, len(referencing))

        try:
            self.store.delete(self.collection, category.pk)
        except ProtectedError as e:
            # A product was added between the check and the delete
            raise ReferentialIntegrityError(
                category.name, len(e.protected_objects)
            ) from e


class ProductStore:

    collection = 'products'

    def __init__(self, store=None):
        self.store = store or default_store

    def create(self, name, price, quantity, category):
        """``category`` must already exist; its current name is snapshotted."""
        return self.store.create(self.collection, {
            'name': name.strip(),
            'price': Decimal(str(price)),
            'quantity': int(quantity),
            'category': category,
            'category_name': category.name,
        })

    def get(self, product_id):
        return self.store.get(self.collection, product_id)

    def list(self):
        return self.store.list(self.collection)

    def update(self, product_id, **fields):
        return self.store.update(self.collection, product_id, fields)

    def adjust_quantity(self, product_id, delta):
        """+1 / -1 buttons. Stock never goes below zero."""
        product = self.get(product_id)
        new_quantity = max(0, product.quantity + int(delta))
        return self.update(product.pk, quantity=new_quantity)

    def delete(self, product_id):
        """Receipts keep their own copies of product data, so no guard."""
        self.store.delete(self.collection, product_id)


def resolve_or_create_category(name, categories=None):
    """
    Return ``(category, created)`` for a free-text category name.

    An existing category with exactly this name is reused; otherwise a new
    one is created.
    """
    categories = categories or CategoryStore()
    name = name.strip()
    existing = categories.find_by_name(name)
    if existing:
        return existing[0], False

    category = categories.create(name)
    logger.info(f"Created category '{name}' ({category.pk}) while adding a product")
    return category, True


def search_products(products, term):
    """Case-insensitive substring match on product name or category name."""
    term = (term or '').strip().lower()
    if not term:
        return list(products)
    return [
        product for product in products
        if term in product.name.lower() or term in (product.category_name or '').lower()
    ]


def search_categories(categories, term):
    term = (term or '').strip().lower()
    if not term:
        return list(categories)
    return [category for category in categories if term in category.name.lower()]
