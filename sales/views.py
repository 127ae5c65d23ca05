from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.exceptions import ValidationError
from django.http import Http404, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.views import View
from rest_framework import viewsets
import logging
import traceback

from inventory.exceptions import DocumentNotFound, StoreError
from inventory.services import ProductStore, search_products
from inventory.utils import STORE_ERROR_MESSAGE, is_ajax, respond

from .aggregation import DateRange, aggregate
from .cart import ReceiptDraft
from .forms import CartLineForm, CustomerForm
from .models import Receipt
from .pdf import render_receipt_pdf
from .serializers import ReceiptSerializer
from .services import ReceiptStore, finalize_receipt, next_receipt_number
from .utils.receipt_builder import build_receipt_payload

logger = logging.getLogger(__name__)

RECEIPT_SCREEN = 'sales:receipt'
LAST_RECEIPT_KEY = 'last_receipt_id'


# ====================================
# REST API VIEWSETS
# ====================================

class ReceiptViewSet(viewsets.ReadOnlyModelViewSet):
    """Receipts are append-only; the API never changes them"""
    queryset = Receipt.objects.all()
    serializer_class = ReceiptSerializer


# ====================================
# RECEIPT SCREEN
# ====================================

def draft_json(draft):
    return {
        'state': draft.state,
        'customer_name': draft.customer_name,
        'date': draft.date.isoformat(),
        'items': draft.items(),
        'total': str(draft.total),
    }


class ReceiptView(LoginRequiredMixin, View):
    template_name = "sales/receipt.html"

    def get(self, request):
        draft = ReceiptDraft.load(request.session)
        search = request.GET.get('search', '').strip()
        context = {
            'active_tab': 'receipt',
            'draft': draft,
            'search': search,
            'products': [],
            'receipt_number': None,
            'last_receipt_id': request.session.get(LAST_RECEIPT_KEY),
        }
        try:
            context['products'] = search_products(ProductStore().list(), search)
            context['receipt_number'] = next_receipt_number()
        except StoreError:
            logger.error(f"Loading receipt screen failed:\n{traceback.format_exc()}")
            context['load_error'] = STORE_ERROR_MESSAGE
        return render(request, self.template_name, context)


class CartAddView(LoginRequiredMixin, View):

    def post(self, request):
        form = CartLineForm(request.POST)
        if not form.is_valid():
            return respond(request, False, 'Invalid product', RECEIPT_SCREEN)

        try:
            product = ProductStore().get(form.cleaned_data['product_id'])
        except DocumentNotFound:
            return respond(request, False, 'Product not found', RECEIPT_SCREEN, status=404)
        except StoreError:
            logger.error(f"Adding to cart failed:\n{traceback.format_exc()}")
            return respond(request, False, STORE_ERROR_MESSAGE, RECEIPT_SCREEN, status=500)

        draft = ReceiptDraft.load(request.session)
        draft.add(product)
        draft.save(request.session)

        if is_ajax(request):
            return JsonResponse({'success': True, 'cart': draft_json(draft)})
        return redirect(RECEIPT_SCREEN)


class CartUpdateView(LoginRequiredMixin, View):
    """Set a line's quantity; anything below 1 removes the line"""

    def post(self, request):
        form = CartLineForm(request.POST)
        if not form.is_valid() or form.cleaned_data.get('quantity') is None:
            return respond(request, False, 'Invalid quantity', RECEIPT_SCREEN)

        draft = ReceiptDraft.load(request.session)
        draft.set_quantity(form.cleaned_data['product_id'], form.cleaned_data['quantity'])
        draft.save(request.session)

        if is_ajax(request):
            return JsonResponse({'success': True, 'cart': draft_json(draft)})
        return redirect(RECEIPT_SCREEN)


class CartRemoveView(LoginRequiredMixin, View):

    def post(self, request):
        form = CartLineForm(request.POST)
        if not form.is_valid():
            return respond(request, False, 'Invalid product', RECEIPT_SCREEN)

        draft = ReceiptDraft.load(request.session)
        draft.remove(form.cleaned_data['product_id'])
        draft.save(request.session)

        if is_ajax(request):
            return JsonResponse({'success': True, 'cart': draft_json(draft)})
        return redirect(RECEIPT_SCREEN)


class CartClearView(LoginRequiredMixin, View):

    def post(self, request):
        ReceiptDraft.discard(request.session)
        return respond(request, True, 'Receipt cleared', RECEIPT_SCREEN)


class GenerateReceiptView(LoginRequiredMixin, View):
    """Finalize the draft: save the receipt, then offer its PDF"""

    def post(self, request):
        draft = ReceiptDraft.load(request.session)
        form = CustomerForm(request.POST)
        if form.is_valid():
            draft.customer_name = form.cleaned_data['customer_name']
            draft.save(request.session)

        try:
            receipt = finalize_receipt(draft)
        except ValidationError as ve:
            message = ' '.join(ve.messages)
            logger.info(f"Receipt refused: {message}")
            return respond(request, False, message, RECEIPT_SCREEN,
                           errors=ve.message_dict, cart=draft_json(draft))
        except StoreError:
            logger.error(f"Generating receipt failed:\n{traceback.format_exc()}")
            return respond(request, False, 'Error generating receipt. Please try again.',
                           RECEIPT_SCREEN, status=500)

        ReceiptDraft.discard(request.session)
        request.session[LAST_RECEIPT_KEY] = receipt.pk

        return respond(
            request, True, f'Receipt #{receipt.pk} generated successfully!', RECEIPT_SCREEN,
            receipt_id=receipt.pk, total=str(receipt.total),
        )


class ReceiptPdfView(LoginRequiredMixin, View):

    def get(self, request, pk):
        try:
            receipt = ReceiptStore().get(pk)
        except DocumentNotFound:
            raise Http404('Receipt not found')
        except StoreError:
            logger.error(f"Loading receipt {pk} failed:\n{traceback.format_exc()}")
            messages.error(request, STORE_ERROR_MESSAGE)
            return redirect(RECEIPT_SCREEN)

        pdf = render_receipt_pdf(build_receipt_payload(receipt))
        response = HttpResponse(pdf, content_type='application/pdf')
        response['Content-Disposition'] = f'attachment; filename="receipt-{receipt.pk}.pdf"'
        return response


# ====================================
# REPORTS SCREEN
# ====================================

class ReportsView(LoginRequiredMixin, View):
    template_name = "sales/reports.html"

    def get(self, request):
        date_range = DateRange.parse(request.GET.get('start'), request.GET.get('end'))
        context = {
            'active_tab': 'reports',
            'date_range': date_range,
            'summary': None,
        }
        try:
            receipts = ReceiptStore().in_range(date_range)
            context['summary'] = aggregate(receipts, date_range)
        except StoreError:
            logger.error(f"Loading sales data failed:\n{traceback.format_exc()}")
            context['load_error'] = STORE_ERROR_MESSAGE

        if is_ajax(request):
            if context['summary'] is None:
                return JsonResponse({'success': False, 'message': STORE_ERROR_MESSAGE}, status=500)
            return JsonResponse({
                'success': True,
                'start': date_range.start.isoformat(),
                'end': date_range.end.isoformat(),
                'summary': context['summary'].to_dict(),
            })
        return render(request, self.template_name, context)
