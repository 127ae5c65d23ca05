import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from inventory.store import store as default_store

logger = logging.getLogger(__name__)


class ReceiptStore:
    """Append-only access to completed sales."""

    collection = 'receipts'

    def __init__(self, store=None):
        self.store = store or default_store

    def create(self, customer_name, date, items, total):
        return self.store.create(self.collection, {
            'customer_name': customer_name,
            'date': date,
            'items': items,
            'total': total,
            'timestamp': timezone.now(),
        })

    def get(self, receipt_id):
        return self.store.get(self.collection, receipt_id)

    def list(self):
        return self.store.list(self.collection)

    def count(self):
        return self.store.count(self.collection)

    def in_range(self, date_range):
        """Receipts whose timestamp falls inside ``date_range``, newest first."""
        lower, upper = date_range.bounds()
        return self.store.between(self.collection, 'timestamp', lower, upper)


def next_receipt_number(receipts=None):
    """
    Display-only receipt number: existing receipts + 1.

    Not stored, not unique when two sales happen at once, and never used to
    look a receipt up.
    """
    receipts = receipts or ReceiptStore()
    return receipts.count() + 1


def validate_draft(draft):
    errors = {}
    if not draft.customer_name.strip():
        errors['customer_name'] = 'Please enter the customer name.'
    if draft.is_empty:
        errors['items'] = 'Please add at least one product.'
    if errors:
        raise ValidationError(errors)


def finalize_receipt(draft, receipts=None):
    """
    Persist the draft as a Receipt in a single write and return it.

    The total uses the prices captured when each line was added. Product
    stock is not changed by a sale. The caller is responsible for clearing
    the draft afterwards.
    """
    validate_draft(draft)
    receipts = receipts or ReceiptStore()

    with transaction.atomic():
        receipt = receipts.create(
            customer_name=draft.customer_name.strip(),
            date=draft.date,
            items=draft.items(),
            total=draft.total,
        )

    logger.info(
        f"[SALE] Receipt #{receipt.pk} | Customer: {receipt.customer_name} | "
        f"Lines: {len(receipt.items)} | Total: {receipt.total}"
    )
    return receipt
