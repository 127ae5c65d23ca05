"""
Receipt draft (the cart) kept in the operator's session.

The draft is a plain value object. Views load it from the session, call one
of the operations below and store it back with ``save``. Nothing is written
to the database until the receipt is finalized.
"""
from dataclasses import dataclass, field
from datetime import date as date_cls
from decimal import Decimal

from django.utils import timezone

SESSION_KEY = 'receipt_draft'

EMPTY = 'empty'
BUILDING = 'building'


@dataclass
class LineItem:
    product_id: int
    name: str
    price: Decimal
    quantity: int = 1
    category_name: str = ''

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity

    def to_dict(self) -> dict:
        return {
            'product_id': self.product_id,
            'name': self.name,
            'price': str(self.price),
            'quantity': self.quantity,
            'category_name': self.category_name,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'LineItem':
        return cls(
            product_id=int(data['product_id']),
            name=data['name'],
            price=Decimal(str(data['price'])),
            quantity=int(data.get('quantity', 1)),
            category_name=data.get('category_name') or '',
        )


@dataclass
class ReceiptDraft:
    customer_name: str = ''
    date: date_cls = field(default_factory=timezone.localdate)
    lines: list = field(default_factory=list)

    @property
    def state(self) -> str:
        return BUILDING if self.lines else EMPTY

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total(self) -> Decimal:
        return sum((line.line_total for line in self.lines), Decimal('0.00'))

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    def find(self, product_id):
        product_id = int(product_id)
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def add(self, product) -> LineItem:
        """Add one unit. Name, price and category are copied from the product now."""
        line = self.find(product.pk)
        if line is not None:
            line.quantity += 1
            return line

        line = LineItem(
            product_id=product.pk,
            name=product.name,
            price=Decimal(str(product.price)),
            quantity=1,
            category_name=product.category_name or '',
        )
        self.lines.append(line)
        return line

    def remove(self, product_id) -> None:
        product_id = int(product_id)
        self.lines = [line for line in self.lines if line.product_id != product_id]

    def set_quantity(self, product_id, quantity) -> None:
        quantity = int(quantity)
        if quantity < 1:
            self.remove(product_id)
            return
        line = self.find(product_id)
        if line is not None:
            line.quantity = quantity

    def clear(self) -> None:
        self.customer_name = ''
        self.date = timezone.localdate()
        self.lines = []

    def items(self) -> list:
        return [line.to_dict() for line in self.lines]

    # ============================================
    # SESSION SERIALIZATION
    # ============================================

    def to_dict(self) -> dict:
        return {
            'customer_name': self.customer_name,
            'date': self.date.isoformat(),
            'lines': self.items(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ReceiptDraft':
        raw_date = data.get('date')
        return cls(
            customer_name=data.get('customer_name', ''),
            date=date_cls.fromisoformat(raw_date) if raw_date else timezone.localdate(),
            lines=[LineItem.from_dict(item) for item in data.get('lines', [])],
        )

    @classmethod
    def load(cls, session) -> 'ReceiptDraft':
        data = session.get(SESSION_KEY)
        return cls.from_dict(data) if data else cls()

    def save(self, session) -> None:
        session[SESSION_KEY] = self.to_dict()

    @staticmethod
    def discard(session) -> None:
        session.pop(SESSION_KEY, None)
