from django.conf import settings


def build_receipt_payload(receipt):
    """
    Build the printable payload for a finalized receipt.

    Arguments:
    - receipt: persisted Receipt instance

    Everything comes from the stored receipt, never from live products.
    """
    config = settings.LICORERA
    items = [
        {
            "name": line["name"],
            "qty": line["quantity"],
            "price": line["price"],
            "total": line["line_total"],
        }
        for line in receipt.line_items()
    ]

    return {
        "title": config["RECEIPT_TITLE"],
        "store": config["STORE_NAME"],
        "currency": config["CURRENCY_SYMBOL"],
        "receiptNumber": receipt.pk,
        "date": str(receipt.date),
        "customer": receipt.customer_name,
        "items": items,
        "total": receipt.total,
        "footer": [config["RECEIPT_FOOTER"]],
    }
