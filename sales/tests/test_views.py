"""Tests for the Receipt and Reports screens."""

from decimal import Decimal

import pytest
from django.urls import reverse
from django.utils import timezone

from sales.cart import SESSION_KEY
from sales.models import Receipt


pytestmark = pytest.mark.django_db

AJAX = {"HTTP_X_REQUESTED_WITH": "XMLHttpRequest"}


def add(client, product, **extra):
    return client.post(reverse("sales:cart-add"), {"product_id": product.pk}, **extra)


class TestCart:
    """Tests for building the receipt draft."""

    def test_add_twice(self, auth_client, jack_daniels) -> None:
        add(auth_client, jack_daniels)
        response = add(auth_client, jack_daniels, **AJAX)

        cart = response.json()["cart"]
        assert cart["state"] == "building"
        assert cart["total"] == "59.98"
        assert cart["items"][0]["quantity"] == 2

    def test_add_unknown_product(self, auth_client) -> None:
        response = auth_client.post(reverse("sales:cart-add"), {"product_id": 999}, **AJAX)
        assert response.status_code == 404

    def test_update_and_remove(self, auth_client, jack_daniels) -> None:
        add(auth_client, jack_daniels)
        response = auth_client.post(
            reverse("sales:cart-update"), {"product_id": jack_daniels.pk, "quantity": 4}, **AJAX
        )
        assert response.json()["cart"]["total"] == "119.96"

        response = auth_client.post(
            reverse("sales:cart-remove"), {"product_id": jack_daniels.pk}, **AJAX
        )
        assert response.json()["cart"]["state"] == "empty"

    def test_draft_survives_page_reload(self, auth_client, jack_daniels) -> None:
        add(auth_client, jack_daniels)
        response = auth_client.get(reverse("sales:receipt"))
        assert response.status_code == 200
        assert response.context["draft"].item_count == 1
        assert response.context["receipt_number"] == 1

    def test_clear(self, auth_client, jack_daniels) -> None:
        add(auth_client, jack_daniels)
        auth_client.post(reverse("sales:cart-clear"))
        assert SESSION_KEY not in auth_client.session


class TestGenerateReceipt:
    """Tests for finalizing a sale from the Receipt screen."""

    def test_generate(self, auth_client, jack_daniels) -> None:
        add(auth_client, jack_daniels)
        add(auth_client, jack_daniels)
        response = auth_client.post(
            reverse("sales:receipt-generate"), {"customer_name": "John Doe"}, **AJAX
        )

        assert response.status_code == 200
        data = response.json()
        receipt = Receipt.objects.get(pk=data["receipt_id"])
        assert receipt.total == Decimal("59.98")
        assert data["total"] == "59.98"

        jack_daniels.refresh_from_db()
        assert jack_daniels.quantity == 10
        assert SESSION_KEY not in auth_client.session
        assert auth_client.session["last_receipt_id"] == receipt.pk

    def test_generate_without_customer(self, auth_client, jack_daniels) -> None:
        add(auth_client, jack_daniels)
        response = auth_client.post(
            reverse("sales:receipt-generate"), {"customer_name": ""}, **AJAX
        )
        assert response.status_code == 400
        assert "customer_name" in response.json()["errors"]
        assert not Receipt.objects.exists()
        assert SESSION_KEY in auth_client.session

    def test_generate_empty_cart(self, auth_client) -> None:
        response = auth_client.post(
            reverse("sales:receipt-generate"), {"customer_name": "John Doe"}, **AJAX
        )
        assert response.status_code == 400
        assert "items" in response.json()["errors"]

    def test_pdf_download(self, auth_client, jack_daniels) -> None:
        add(auth_client, jack_daniels)
        auth_client.post(reverse("sales:receipt-generate"), {"customer_name": "John Doe"})
        receipt = Receipt.objects.get()

        response = auth_client.get(reverse("sales:receipt-pdf", args=[receipt.pk]))
        assert response.status_code == 200
        assert response["Content-Type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")

    def test_pdf_missing_receipt(self, auth_client) -> None:
        response = auth_client.get(reverse("sales:receipt-pdf", args=[999]))
        assert response.status_code == 404


class TestReports:
    """Tests for the Reports screen."""

    def test_reports_page(self, auth_client, jack_daniels) -> None:
        add(auth_client, jack_daniels)
        auth_client.post(reverse("sales:receipt-generate"), {"customer_name": "John Doe"})

        response = auth_client.get(reverse("sales:reports"))
        assert response.status_code == 200
        summary = response.context["summary"]
        assert summary.total_sales == Decimal("29.99")
        assert summary.category_breakdown["Whiskey"]["quantity"] == 1

    def test_reports_far_future_end_date(self, auth_client) -> None:
        response = auth_client.get(
            reverse("sales:reports"), {"start": "2024-01-01", "end": "9999-12-31"}
        )
        assert response.status_code == 200
        assert response.context["date_range"].end == timezone.localdate()

    def test_reports_json(self, auth_client) -> None:
        response = auth_client.get(
            reverse("sales:reports"), {"start": "2024-05-01", "end": "2024-05-31"}, **AJAX
        )
        data = response.json()
        assert data["start"] == "2024-05-01"
        assert data["summary"]["total_sales"] == "0.00"

    def test_receipt_api_is_read_only(self, auth_client, jack_daniels) -> None:
        add(auth_client, jack_daniels)
        auth_client.post(reverse("sales:receipt-generate"), {"customer_name": "John Doe"})
        receipt = Receipt.objects.get()

        url = reverse("sales:receipt-api-detail", args=[receipt.pk])
        assert auth_client.get(url).json()["customer_name"] == "John Doe"
        assert auth_client.delete(url).status_code == 405
