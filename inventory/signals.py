from django.db.models.signals import post_save, post_delete, pre_save
from django.dispatch import receiver
from .models import Category, Product
import logging

logger = logging.getLogger(__name__)


# ============================================
# CATEGORY SIGNALS
# ============================================

@receiver(pre_save, sender=Category)
def category_pre_save(sender, instance, **kwargs):
    """
    Warn when a rename leaves products with the old category_name.

    The snapshot is left alone on purpose; this only records it.
    """
    if not instance.pk:
        return

    previous = sender.objects.filter(pk=instance.pk).values_list('name', flat=True).first()
    if previous is not None and previous != instance.name:
        stale = instance.products.filter(category_name=previous).count()
        if stale:
            logger.info(
                f"Category {instance.pk} renamed '{previous}' -> '{instance.name}'; "
                f"{stale} product(s) keep the old category name"
            )


@receiver(post_save, sender=Category)
def category_post_save(sender, instance, created, **kwargs):
    if created:
        logger.info(f"Category created: {instance.pk} - {instance.name}")
    else:
        logger.debug(f"Category updated: {instance.pk} - {instance.name}")


@receiver(post_delete, sender=Category)
def category_post_delete(sender, instance, **kwargs):
    logger.info(f"Category deleted: {instance.pk} - {instance.name}")


# ============================================
# PRODUCT SIGNALS
# ============================================

@receiver(post_save, sender=Product)
def product_post_save(sender, instance, created, **kwargs):
    """
    Log product creation/updates and flag products that ran out of stock.
    """
    if created:
        logger.info(
            f"Product created: {instance.pk} - {instance.name} "
            f"(Category: {instance.category_name}, Quantity: {instance.quantity})"
        )
    else:
        logger.debug(
            f"Product updated: {instance.pk} - {instance.name} "
            f"(Price: {instance.price}, Quantity: {instance.quantity})"
        )

    if instance.quantity == 0:
        logger.warning(f"OUT OF STOCK: {instance.name} ({instance.pk})")


@receiver(post_delete, sender=Product)
def product_post_delete(sender, instance, **kwargs):
    logger.info(f"Product deleted: {instance.pk} - {instance.name}")
