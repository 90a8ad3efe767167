"""
Restaurant management pages
"""

from django.http import Http404
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from accounts.decorators import protected_route
from core.conf import items_per_page
from core.notifications import MessagesNotifier
from core.query import (RESTAURANT_SEARCH_FIELDS, STATUS_FILTER_CHOICES,
                        load_query_state, resolve_list_page, save_query_state)
from core.store import get_store
from core.workflow import MutationWorkflow, NOT_FOUND
from .forms import form_data_from_post
from .models import STATUS_CHOICES
from .serializers import restaurant_to_wire

LIST_NAME = 'restaurants'

CONFIRMATIONS = {
    'delete': {
        'title': 'Delete Restaurant',
        'message': 'Are you sure you want to delete "{name}"? This action cannot be undone and will remove all associated data.',
        'button_class': 'bg-red-600 hover:bg-red-700',
    },
    'block': {
        'title': 'Block Restaurant',
        'message': 'Are you sure you want to block "{name}"? They will not be able to process orders.',
        'button_class': 'bg-yellow-600 hover:bg-yellow-700',
    },
    'unblock': {
        'title': 'Unblock Restaurant',
        'message': 'Are you sure you want to unblock "{name}"? They will be able to process orders again.',
        'button_class': 'bg-green-600 hover:bg-green-700',
    },
}


def _workflow(request):
    return MutationWorkflow(
        notifier=MessagesNotifier(request),
        token=request.admin_session.token)


def _get_restaurant_or_404(restaurant_id):
    restaurant = get_store().get_restaurant(restaurant_id)
    if restaurant is None:
        raise Http404("Restaurant not found")
    return restaurant


@protected_route
def restaurant_list(request):
    """Searchable, filterable, paginated restaurant table"""
    page, query = resolve_list_page(
        request, LIST_NAME, get_store().restaurants,
        RESTAURANT_SEARCH_FIELDS, items_per_page())

    return render(request, 'restaurants/restaurant_list.html', {
        'page': page,
        'query': query,
        'status_choices': STATUS_FILTER_CHOICES,
    })


@protected_route
def restaurant_detail(request, restaurant_id):
    restaurant = _get_restaurant_or_404(restaurant_id)
    return render(request, 'restaurants/restaurant_detail.html', {
        'restaurant': restaurant,
    })


@protected_route
@require_http_methods(['GET', 'POST'])
def restaurant_create(request):
    """Add restaurant form"""
    form_data = {}
    errors = {}

    if request.method == 'POST':
        form_data = form_data_from_post(request.POST)
        query = load_query_state(
            request.session, LIST_NAME, items_per_page=items_per_page())
        result = _workflow(request).create_restaurant(form_data, query)

        if result.success:
            save_query_state(request.session, LIST_NAME, result.query_state)
            return redirect('restaurant-list')
        errors = result.errors

    return render(request, 'restaurants/restaurant_form.html', {
        'form_data': form_data,
        'errors': errors,
        'status_choices': STATUS_CHOICES,
        'is_edit': False,
    })


@protected_route
@require_http_methods(['GET', 'POST'])
def restaurant_edit(request, restaurant_id):
    """Edit restaurant form"""
    restaurant = _get_restaurant_or_404(restaurant_id)
    form_data = restaurant_to_wire(restaurant)
    errors = {}

    if request.method == 'POST':
        form_data = form_data_from_post(request.POST)
        result = _workflow(request).update_restaurant(restaurant_id, form_data)

        if result.success or result.outcome == NOT_FOUND:
            return redirect('restaurant-list')
        errors = result.errors

    return render(request, 'restaurants/restaurant_form.html', {
        'restaurant': restaurant,
        'form_data': form_data,
        'errors': errors,
        'status_choices': STATUS_CHOICES,
        'is_edit': True,
    })


@protected_route
@require_http_methods(['GET', 'POST'])
def restaurant_confirm(request, restaurant_id, action):
    """Confirmation page for delete / block / unblock"""
    if action not in CONFIRMATIONS:
        raise Http404("Unknown action")

    if request.method == 'POST':
        workflow = _workflow(request)
        query = load_query_state(
            request.session, LIST_NAME, items_per_page=items_per_page())

        if action == 'delete':
            result = workflow.delete_restaurant(restaurant_id, query)
        elif action == 'block':
            result = workflow.block_restaurant(restaurant_id, query)
        else:
            result = workflow.unblock_restaurant(restaurant_id, query)

        if result.success:
            save_query_state(request.session, LIST_NAME, result.query_state)
        return redirect('restaurant-list')

    restaurant = _get_restaurant_or_404(restaurant_id)
    confirmation = CONFIRMATIONS[action]
    return render(request, 'restaurants/confirm.html', {
        'restaurant': restaurant,
        'action': action,
        'title': confirmation['title'],
        'message': confirmation['message'].format(name=restaurant.name),
        'button_class': confirmation['button_class'],
    })
