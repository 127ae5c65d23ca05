"""Tests for the catalogue admin."""

import pytest
from django.urls import reverse

from inventory.models import Product


pytestmark = pytest.mark.django_db


def inline_product(category, **fields):
    data = {
        "name": category.name,
        "description": category.description,
        "products-TOTAL_FORMS": "1",
        "products-INITIAL_FORMS": "0",
        "products-MIN_NUM_FORMS": "0",
        "products-MAX_NUM_FORMS": "1000",
        "products-0-id": "",
        "products-0-category": str(category.pk),
        "_save": "Save",
    }
    data.update({f"products-0-{key}": value for key, value in fields.items()})
    return data


class TestCategoryAdmin:
    """Tests for CategoryAdmin."""

    def test_inline_product_gets_category_name(self, admin_client, whiskey) -> None:
        response = admin_client.post(
            reverse("admin:inventory_category_change", args=[whiskey.pk]),
            inline_product(whiskey, name="Maker's Mark", price="34.50", quantity="3"),
        )
        assert response.status_code == 302

        product = Product.objects.get(name="Maker's Mark")
        assert product.category_id == whiskey.pk
        assert product.category_name == "Whiskey"


class TestProductAdmin:
    """Tests for ProductAdmin."""

    def test_add_takes_snapshot(self, admin_client, whiskey) -> None:
        response = admin_client.post(reverse("admin:inventory_product_add"), {
            "name": "Jameson", "price": "25.00", "quantity": "4", "category": str(whiskey.pk),
        })
        assert response.status_code == 302
        assert Product.objects.get(name="Jameson").category_name == "Whiskey"
