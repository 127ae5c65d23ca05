"""Tests for report aggregation."""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest
from django.utils import timezone

from sales.aggregation import DateRange, aggregate


def at(year, month, day, hour=12, minute=0, second=0):
    return timezone.make_aware(datetime(year, month, day, hour, minute, second))


def receipt(timestamp, *items):
    total = sum(Decimal(i["price"]) * i["quantity"] for i in items)
    return SimpleNamespace(timestamp=timestamp, items=list(items), total=total)


def item(name, price, quantity, category_name="Whiskey"):
    return {"name": name, "price": price, "quantity": quantity, "category_name": category_name}


MAY = DateRange(date(2024, 5, 1), date(2024, 5, 31))


class TestDateRange:
    """Tests for DateRange."""

    def test_last_days(self) -> None:
        rng = DateRange.last_days(30, today=date(2024, 5, 31))
        assert rng == DateRange(date(2024, 5, 1), date(2024, 5, 31))

    def test_bounds_cover_whole_days(self) -> None:
        assert MAY.contains(at(2024, 5, 1, 0, 0, 0))
        assert MAY.contains(at(2024, 5, 31, 23, 59, 59))
        assert not MAY.contains(at(2024, 6, 1, 0, 0, 0))
        assert not MAY.contains(at(2024, 4, 30, 23, 59, 59))

    def test_parse(self) -> None:
        assert DateRange.parse("2024-05-01", "2024-05-31") == MAY

    def test_parse_invalid_falls_back(self) -> None:
        rng = DateRange.parse("not-a-date", "", default_days=7)
        assert rng.end == timezone.localdate()
        assert (rng.end - rng.start).days == 7

    def test_parse_edge_of_calendar_falls_back(self) -> None:
        rng = DateRange.parse("2024-01-01", "9999-12-31", default_days=7)
        assert rng.start == date(2024, 1, 1)
        assert rng.end == timezone.localdate()
        lower, upper = rng.bounds()
        assert lower <= upper


class TestAggregate:
    """Tests for aggregate."""

    def test_empty(self) -> None:
        summary = aggregate([], MAY)
        assert summary.total_sales == Decimal("0.00")
        assert summary.total_items == 0
        assert summary.category_breakdown == {}
        assert summary.top_products == []

    def test_totals_and_breakdown(self) -> None:
        receipts = [
            receipt(at(2024, 5, 2), item("Jack Daniel's", "29.99", 2)),
            receipt(
                at(2024, 5, 3),
                item("Absolut", "24.99", 1, "Vodka"),
                item("Jack Daniel's", "29.99", 1),
            ),
        ]
        summary = aggregate(receipts, MAY)

        assert summary.receipt_count == 2
        assert summary.total_sales == Decimal("114.96")
        assert summary.total_items == 4
        assert summary.category_breakdown == {
            "Whiskey": {"quantity": 3, "revenue": Decimal("89.97")},
            "Vodka": {"quantity": 1, "revenue": Decimal("24.99")},
        }
        assert summary.top_products[0] == {
            "name": "Jack Daniel's", "quantity": 3, "revenue": Decimal("89.97"),
        }

    def test_receipts_outside_range_are_ignored(self) -> None:
        receipts = [
            receipt(at(2024, 4, 30, 23, 59, 59), item("Jack Daniel's", "29.99", 1)),
            receipt(at(2024, 6, 1, 0, 0, 0), item("Jack Daniel's", "29.99", 1)),
        ]
        summary = aggregate(receipts, MAY)
        assert summary.receipt_count == 0
        assert summary.total_sales == Decimal("0.00")

    def test_missing_category_goes_to_uncategorized(self) -> None:
        summary = aggregate([receipt(at(2024, 5, 2), item("House wine", "10.00", 1, ""))], MAY)
        assert list(summary.category_breakdown) == ["Uncategorized"]

    def test_top_products_limited_and_ranked_by_revenue(self) -> None:
        items = [item(f"Bottle {n}", f"{n}.00", 1) for n in range(1, 8)]
        summary = aggregate([receipt(at(2024, 5, 5), *items)], MAY)
        assert [p["name"] for p in summary.top_products] == [
            "Bottle 7", "Bottle 6", "Bottle 5", "Bottle 4", "Bottle 3",
        ]

    def test_ties_keep_first_seen_order(self) -> None:
        summary = aggregate([
            receipt(at(2024, 5, 5), item("Gin A", "20.00", 1), item("Gin B", "20.00", 1)),
        ], MAY, top_n=2)
        assert [p["name"] for p in summary.top_products] == ["Gin A", "Gin B"]

    @pytest.mark.parametrize("order", [slice(None), slice(None, None, -1)])
    def test_totals_do_not_depend_on_order(self, order) -> None:
        receipts = [
            receipt(at(2024, 5, 2), item("Jack Daniel's", "29.99", 2)),
            receipt(at(2024, 5, 9), item("Bacardi", "19.99", 3, "Rum")),
        ]
        summary = aggregate(receipts[order], MAY)
        assert summary.total_sales == Decimal("119.95")
        assert summary.total_items == 5

    def test_to_dict_uses_string_money(self) -> None:
        summary = aggregate([receipt(at(2024, 5, 2), item("Jack Daniel's", "29.99", 1))], MAY)
        data = summary.to_dict()
        assert data["total_sales"] == "29.99"
        assert data["category_breakdown"]["Whiskey"]["revenue"] == "29.99"
