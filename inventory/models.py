from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class Category(models.Model):
    """
    Product category (Whiskey, Vodka, Rum...).

    Names are unique by convention only: the add-product flow reuses an
    existing category with the same name, but nothing in the database stops
    two categories from sharing one.
    """

    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name_plural = 'categories'

    def __str__(self):
        return self.name

    def to_document(self):
        return {
            'id': self.pk,
            'name': self.name,
            'description': self.description,
        }


class Product(models.Model):
    """
    A stocked product.

    ``category_name`` is a snapshot of the category's name taken when the
    product is written. Renaming the category later does not update it.
    """

    name = models.CharField(max_length=200)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
    )
    quantity = models.PositiveIntegerField(default=0)
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name='products',
    )
    category_name = models.CharField(max_length=100, blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.category_name})"

    def to_document(self):
        return {
            'id': self.pk,
            'name': self.name,
            'price': str(self.price),
            'quantity': self.quantity,
            'category_id': self.category_id,
            'category_name': self.category_name,
        }
