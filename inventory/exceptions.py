class StoreError(Exception):
    """A call to the document store failed. The user action can be retried."""


class DocumentNotFound(StoreError):
    """No document with the given id exists in the collection."""

    def __init__(self, collection, doc_id):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"No document {doc_id!r} in '{collection}'")


class ReferentialIntegrityError(Exception):
    """
    A category cannot be deleted while products still reference it.
    """

    def __init__(self, category_name, product_count):
        self.category_name = category_name
        self.product_count = product_count
        super().__init__(
            f'Cannot delete category "{category_name}": it has {product_count} '
            f'product(s). Please reassign or delete these products first.'
        )
