"""Tests for the seed_store management command."""

from io import StringIO

import pytest
from django.core.management import call_command

from inventory.models import Category, Product


pytestmark = pytest.mark.django_db


class TestSeedStore:
    """Tests for seed_store."""

    def test_seeds_sample_catalogue(self) -> None:
        call_command("seed_store", stdout=StringIO())
        assert Category.objects.count() == 5
        assert Product.objects.count() == 5
        jack = Product.objects.get(name="Jack Daniel's")
        assert jack.category_name == "Whiskey"
        assert jack.quantity == 10

    def test_reseed_replaces_catalogue(self) -> None:
        call_command("seed_store", stdout=StringIO())
        call_command("seed_store", stdout=StringIO())
        assert Product.objects.count() == 5

    def test_no_clear_keeps_existing(self, jack_daniels) -> None:
        call_command("seed_store", "--no-clear", stdout=StringIO())
        assert Category.objects.filter(name="Whiskey").count() == 1
        assert Product.objects.filter(name="Jack Daniel's").get().pk == jack_daniels.pk
        assert Product.objects.count() == 5

    def test_no_clear_twice_adds_no_duplicates(self) -> None:
        call_command("seed_store", stdout=StringIO())
        call_command("seed_store", "--no-clear", stdout=StringIO())
        assert Category.objects.count() == 5
        assert Product.objects.count() == 5
