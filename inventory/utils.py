from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import redirect

STORE_ERROR_MESSAGE = 'Could not reach the database. Please try again.'


def is_ajax(request):
    return request.headers.get('X-Requested-With') == 'XMLHttpRequest'


def respond(request, success, message, redirect_to, status=None, **extra):
    """
    JSON for AJAX callers, otherwise a flash message and a redirect.
    """
    if is_ajax(request):
        if status is None:
            status = 200 if success else 400
        return JsonResponse({'success': success, 'message': message, **extra}, status=status)

    if success:
        messages.success(request, message)
    else:
        messages.error(request, message)
    return redirect(redirect_to)


def first_form_error(form):
    for field, errors in form.errors.items():
        if errors:
            return f"{field}: {errors[0]}" if field != '__all__' else errors[0]
    return 'Validation error'
