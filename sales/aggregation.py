"""
Sales aggregation for the Reports screen.

``aggregate`` is a pure function over receipts: it does no I/O and returns
the same totals for any ordering of its input. Only the order of products
tied on revenue follows the input order.
"""
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from datetime import timezone as dt_timezone
from decimal import Decimal

from django.conf import settings
from django.utils import timezone

END_OF_DAY = time(23, 59, 59)


def _config(key):
    return settings.LICORERA[key]


def _parse_day(value, default):
    """
    ISO date string to a date, or ``default`` when missing or invalid.

    Days whose local start or end cannot be expressed in UTC (the edges of
    the calendar) also fall back to ``default``.
    """
    if not value:
        return default
    try:
        day = date.fromisoformat(value)
        tz = timezone.get_current_timezone()
        for moment in (time.min, END_OF_DAY):
            timezone.make_aware(datetime.combine(day, moment), tz).astimezone(dt_timezone.utc)
    except (ValueError, OverflowError):
        return default
    return day


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    @classmethod
    def last_days(cls, days, today=None):
        today = today or timezone.localdate()
        return cls(start=today - timedelta(days=days), end=today)

    @classmethod
    def parse(cls, start, end, default_days=None):
        """Build a range from ISO date strings; missing or invalid values use the default range."""
        fallback = cls.last_days(default_days or _config('REPORT_DEFAULT_DAYS'))
        return cls(
            start=_parse_day(start, fallback.start),
            end=_parse_day(end, fallback.end),
        )

    def bounds(self):
        """Inclusive [start 00:00:00, end 23:59:59] in the current local time zone."""
        tz = timezone.get_current_timezone()
        return (
            timezone.make_aware(datetime.combine(self.start, time.min), tz),
            timezone.make_aware(datetime.combine(self.end, END_OF_DAY), tz),
        )

    def contains(self, moment):
        lower, upper = self.bounds()
        return lower <= moment <= upper


@dataclass
class SalesSummary:
    total_sales: Decimal = Decimal('0.00')
    total_items: int = 0
    category_breakdown: dict = field(default_factory=dict)
    top_products: list = field(default_factory=list)
    receipt_count: int = 0

    def to_dict(self):
        return {
            'total_sales': str(self.total_sales),
            'total_items': self.total_items,
            'receipt_count': self.receipt_count,
            'category_breakdown': {
                name: {'quantity': data['quantity'], 'revenue': str(data['revenue'])}
                for name, data in self.category_breakdown.items()
            },
            'top_products': [
                {'name': p['name'], 'quantity': p['quantity'], 'revenue': str(p['revenue'])}
                for p in self.top_products
            ],
        }


def aggregate(receipts, date_range, top_n=None, uncategorized=None):
    top_n = top_n if top_n is not None else _config('TOP_PRODUCTS_LIMIT')
    uncategorized = uncategorized or _config('UNCATEGORIZED_LABEL')

    summary = SalesSummary()
    product_sales = {}

    for receipt in receipts:
        if not date_range.contains(receipt.timestamp):
            continue

        summary.receipt_count += 1
        summary.total_sales += Decimal(str(receipt.total))

        for item in receipt.items:
            quantity = int(item.get('quantity', 0))
            revenue = Decimal(str(item.get('price', '0'))) * quantity
            summary.total_items += quantity

            category = item.get('category_name') or uncategorized
            bucket = summary.category_breakdown.setdefault(
                category, {'quantity': 0, 'revenue': Decimal('0.00')}
            )
            bucket['quantity'] += quantity
            bucket['revenue'] += revenue

            # Grouped by name: two products with the same name are merged
            product = product_sales.setdefault(
                item.get('name', ''), {'quantity': 0, 'revenue': Decimal('0.00')}
            )
            product['quantity'] += quantity
            product['revenue'] += revenue

    ranked = sorted(
        ({'name': name, **data} for name, data in product_sales.items()),
        key=lambda p: p['revenue'],
        reverse=True,
    )
    summary.top_products = ranked[:top_n]
    return summary
