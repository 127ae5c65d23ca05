from django.apps import AppConfig


class InventoryConfig(AppConfig):
    """
    Configuration for the Inventory application.

    This app manages the store's catalogue:
    - Categories (Whiskey, Vodka, Rum...)
    - Products (price, stock quantity, category snapshot)
    - The document-store boundary shared with the sales app
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'inventory'
    verbose_name = 'Inventory Management'

    def ready(self):
        """
        Import signal handlers when the app is ready.

        Signals log catalogue changes.
        """
        import inventory.signals  # noqa: F401
