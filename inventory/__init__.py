"""
Inventory Management Application

Categories and products for a single liquor store, plus the document-store
boundary (``inventory.store``) every screen reads and writes through.

MODELS:
- Category: name and optional description
- Product: name, price, stock quantity, category and a snapshot of the
  category's name taken when the product is written

BUSINESS LOGIC:
  - A category cannot be deleted while products reference it
  - Adding a product with a typed category name reuses an existing category
    of that name, or creates one
  - Renaming a category does not rename existing products' category_name
  - +1 / -1 stock buttons never take quantity below zero

USAGE:
    from inventory.services import CategoryStore, ProductStore, resolve_or_create_category

    whiskey, _ = resolve_or_create_category("Whiskey")
    ProductStore().create(name="Jack Daniel's", price="29.99", quantity=10, category=whiskey)
"""

__version__ = '1.0.0'
