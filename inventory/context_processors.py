from django.conf import settings


def store_settings(request):
    """Make the store name and currency available to all templates"""
    return {
        'store_name': settings.LICORERA['STORE_NAME'],
        'currency': settings.LICORERA['CURRENCY_SYMBOL'],
    }
