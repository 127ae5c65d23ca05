from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class Receipt(models.Model):
    """
    A completed sale.

    ``items`` holds the line items exactly as they were in the cart when the
    sale was finalized: ``product_id``, ``name``, ``price`` (string decimal),
    ``quantity`` and ``category_name``. They do not follow later changes to
    the products. Receipts are written once and never updated or deleted.
    """

    customer_name = models.CharField(max_length=200)
    date = models.DateField(default=timezone.localdate)
    items = models.JSONField(default=list)
    total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
    )
    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ['-timestamp']

    def __str__(self):
        return f"Receipt #{self.pk} - {self.customer_name}"

    @property
    def item_count(self):
        return sum(int(item.get('quantity', 0)) for item in self.items)

    def line_items(self):
        """Items with ``price`` as Decimal and a computed ``line_total``."""
        lines = []
        for item in self.items:
            price = Decimal(str(item.get('price', '0')))
            quantity = int(item.get('quantity', 0))
            lines.append({
                **item,
                'price': price,
                'quantity': quantity,
                'line_total': price * quantity,
            })
        return lines

    def to_document(self):
        return {
            'id': self.pk,
            'customer_name': self.customer_name,
            'date': str(self.date),
            'items': list(self.items),
            'total': str(self.total),
            'timestamp': self.timestamp.isoformat(),
        }
