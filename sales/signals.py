# sales/signals.py - RECEIPT MONITORING

from django.db.models.signals import post_save
from django.dispatch import receiver
import logging

from sales.models import Receipt

logger = logging.getLogger(__name__)


# ============================================
# RECEIPT CREATION SIGNAL
# ============================================

@receiver(post_save, sender=Receipt)
def log_receipt_lines(sender, instance, created, **kwargs):
    """
    Log every line of a new receipt for auditing.

    Stock is not touched: selling does not decrement product quantity.
    """
    if not created:
        logger.warning(f"[SALE MONITOR] Receipt #{instance.pk} was re-saved; receipts are append-only")
        return

    for item in instance.items:
        logger.info(
            f"[SALE MONITOR] Receipt #{instance.pk} | "
            f"Product: {item.get('product_id')} ({item.get('name')}) | "
            f"Quantity Sold: {item.get('quantity')} | "
            f"Customer: {instance.customer_name} | "
            f"Unit Price: {item.get('price')}"
        )
