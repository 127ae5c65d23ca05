"""Shared pytest fixtures for the store apps."""

from decimal import Decimal

import pytest

from inventory.services import CategoryStore, ProductStore


@pytest.fixture
def operator(django_user_model):
    return django_user_model.objects.create_user(username="operator", password="pass12345")


@pytest.fixture
def auth_client(client, operator):
    """Test client logged in as the store operator."""
    client.force_login(operator)
    return client


@pytest.fixture
def whiskey(db):
    return CategoryStore().create("Whiskey", "Aged spirits")


@pytest.fixture
def jack_daniels(whiskey):
    return ProductStore().create(
        name="Jack Daniel's", price=Decimal("29.99"), quantity=10, category=whiskey
    )
