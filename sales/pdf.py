from io import BytesIO

from reportlab.lib.pagesizes import letter
from reportlab.lib.units import inch
from reportlab.pdfgen import canvas

# Column x positions, inches
COL_ITEM = 1
COL_QTY = 4.2
COL_PRICE = 5.1
COL_TOTAL = 6.3


def _money(currency, value):
    return f"{currency}{value:.2f}"


def render_receipt_pdf(payload):
    """Render a receipt payload (see build_receipt_payload) to PDF bytes."""
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    width, height = letter
    currency = payload["currency"]

    y = height - 1 * inch
    c.setFont("Helvetica-Bold", 20)
    c.drawCentredString(width / 2, y, payload["title"])
    y -= 0.3 * inch
    c.setFont("Helvetica", 10)
    c.drawCentredString(width / 2, y, payload["store"])

    y -= 0.5 * inch
    c.setFont("Helvetica", 12)
    c.drawString(COL_ITEM * inch, y, f"Receipt #: {payload['receiptNumber']}")
    y -= 0.25 * inch
    c.drawString(COL_ITEM * inch, y, f"Date: {payload['date']}")
    y -= 0.25 * inch
    c.drawString(COL_ITEM * inch, y, f"Customer: {payload['customer']}")

    y -= 0.45 * inch
    c.setFont("Helvetica-Bold", 10)
    c.drawString(COL_ITEM * inch, y, "Item")
    c.drawString(COL_QTY * inch, y, "Qty")
    c.drawString(COL_PRICE * inch, y, "Price")
    c.drawString(COL_TOTAL * inch, y, "Total")
    c.line(COL_ITEM * inch, y - 5, 7.5 * inch, y - 5)
    y -= 20

    c.setFont("Helvetica", 10)
    for item in payload["items"]:
        if y < 1.5 * inch:
            c.showPage()
            c.setFont("Helvetica", 10)
            y = height - 1 * inch
        c.drawString(COL_ITEM * inch, y, str(item["name"])[:45])
        c.drawString(COL_QTY * inch, y, str(item["qty"]))
        c.drawString(COL_PRICE * inch, y, _money(currency, item["price"]))
        c.drawString(COL_TOTAL * inch, y, _money(currency, item["total"]))
        y -= 0.2 * inch

    y -= 0.3 * inch
    c.setFont("Helvetica-Bold", 12)
    c.drawString(COL_ITEM * inch, y, f"Total: {_money(currency, payload['total'])}")

    y -= 0.5 * inch
    c.setFont("Helvetica", 10)
    for line in payload["footer"]:
        c.drawCentredString(width / 2, y, line)
        y -= 0.2 * inch

    c.showPage()
    c.save()
    return buffer.getvalue()
