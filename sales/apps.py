from django.apps import AppConfig


class SalesConfig(AppConfig):
    """
    Configuration for the Sales application.

    - Receipt screen: session cart, receipt finalization, PDF output
    - Reports screen: sales aggregated by date range, category and product
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'sales'
    verbose_name = 'Sales'

    def ready(self):
        import sales.signals  # noqa: F401
