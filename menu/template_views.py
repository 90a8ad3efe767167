"""
Dish category pages
"""

from django.http import Http404
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from accounts.decorators import protected_route
from core.conf import items_per_page
from core.notifications import MessagesNotifier
from core.query import (CATEGORY_SEARCH_FIELDS, STATUS_FILTER_CHOICES,
                        load_query_state, resolve_list_page, save_query_state)
from core.store import get_store
from core.workflow import MutationWorkflow, NOT_FOUND
from .forms import form_data_from_post
from .serializers import category_to_wire

LIST_NAME = 'categories'

# Categories are never blocked
CATEGORY_STATUS_CHOICES = [
    choice for choice in STATUS_FILTER_CHOICES if choice[0] != 'blocked']


def _workflow(request):
    return MutationWorkflow(
        notifier=MessagesNotifier(request),
        token=request.admin_session.token)


def _get_category_or_404(category_id):
    category = get_store().get_category(category_id)
    if category is None:
        raise Http404("Category not found")
    return category


@protected_route
def category_list(request):
    page, query = resolve_list_page(
        request, LIST_NAME, get_store().categories,
        CATEGORY_SEARCH_FIELDS, items_per_page())

    return render(request, 'menu/category_list.html', {
        'page': page,
        'query': query,
        'status_choices': CATEGORY_STATUS_CHOICES,
    })


@protected_route
@require_http_methods(['GET', 'POST'])
def category_create(request):
    """Add category form"""
    form_data = {'isActive': True}
    errors = {}

    if request.method == 'POST':
        form_data = form_data_from_post(request.POST)
        query = load_query_state(
            request.session, LIST_NAME, items_per_page=items_per_page())
        result = _workflow(request).create_category(form_data, query)

        if result.success:
            save_query_state(request.session, LIST_NAME, result.query_state)
            return redirect('category-list')
        errors = result.errors

    return render(request, 'menu/category_form.html', {
        'form_data': form_data,
        'errors': errors,
        'is_edit': False,
    })


@protected_route
@require_http_methods(['GET', 'POST'])
def category_edit(request, category_id):
    """Edit category form"""
    category = _get_category_or_404(category_id)
    form_data = category_to_wire(category)
    errors = {}

    if request.method == 'POST':
        form_data = form_data_from_post(request.POST)
        result = _workflow(request).update_category(category_id, form_data)

        if result.success or result.outcome == NOT_FOUND:
            return redirect('category-list')
        errors = result.errors

    return render(request, 'menu/category_form.html', {
        'category': category,
        'form_data': form_data,
        'errors': errors,
        'is_edit': True,
    })


@protected_route
@require_POST
def category_toggle(request, category_id):
    _workflow(request).toggle_category(category_id)
    return redirect('category-list')


@protected_route
@require_http_methods(['GET', 'POST'])
def category_delete(request, category_id):
    """Delete confirmation"""
    if request.method == 'POST':
        query = load_query_state(
            request.session, LIST_NAME, items_per_page=items_per_page())
        result = _workflow(request).delete_category(category_id, query)
        if result.success:
            save_query_state(request.session, LIST_NAME, result.query_state)
        return redirect('category-list')

    category = _get_category_or_404(category_id)
    return render(request, 'menu/category_confirm_delete.html', {
        'category': category,
    })
