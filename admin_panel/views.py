"""
Admin Panel Views for the platform dashboard and analytics
"""

from decimal import Decimal

from rest_framework.decorators import api_view
from rest_framework.response import Response
from django.shortcuts import render

from accounts.decorators import protected_route
from core import mock_data
from core.conf import items_per_page
from core.query import (RESTAURANT_SEARCH_FIELDS, STATUS_FILTER_CHOICES,
                        resolve_list_page)
from core.store import get_store
from restaurants.models import STATUS_ACTIVE, STATUS_BLOCKED


def restaurant_stats(restaurants):
    """Headline numbers for the dashboard cards"""
    total_revenue = sum((r.revenue for r in restaurants), Decimal('0.00'))
    return [
        {
            'title': 'Total Restaurants',
            'value': len(restaurants),
            'icon': 'fa-store',
            'color': 'text-blue-600',
            'bg_color': 'bg-blue-100',
            'growth': mock_data.STAT_GROWTH['total_restaurants'],
        },
        {
            'title': 'Active Restaurants',
            'value': sum(1 for r in restaurants if r.status == STATUS_ACTIVE),
            'icon': 'fa-check-circle',
            'color': 'text-green-600',
            'bg_color': 'bg-green-100',
            'growth': mock_data.STAT_GROWTH['active_restaurants'],
        },
        {
            'title': 'Total Revenue',
            'value': f'${total_revenue:,.2f}',
            'icon': 'fa-dollar-sign',
            'color': 'text-yellow-600',
            'bg_color': 'bg-yellow-100',
            'growth': mock_data.STAT_GROWTH['total_revenue'],
        },
        {
            'title': 'Blocked Restaurants',
            'value': sum(1 for r in restaurants if r.status == STATUS_BLOCKED),
            'icon': 'fa-ban',
            'color': 'text-red-600',
            'bg_color': 'bg-red-100',
            'growth': mock_data.STAT_GROWTH['blocked_restaurants'],
        },
    ]


@protected_route
def admin_dashboard(request):
    """Dashboard overview: stat cards and the restaurant table"""
    restaurants = get_store().restaurants

    # Same list state as the restaurants page
    page, query = resolve_list_page(
        request, 'restaurants', restaurants,
        RESTAURANT_SEARCH_FIELDS, items_per_page())

    context = {
        'stats': restaurant_stats(restaurants),
        'page': page,
        'query': query,
        'status_choices': STATUS_FILTER_CHOICES,
    }

    return render(request, 'admin_panel/dashboard.html', context)


@protected_route
def admin_analytics(request):
    """Analytics page (figures are static until the platform exposes them)"""
    context = {
        'analytics_stats': mock_data.ANALYTICS_STATS,
        'top_performers': mock_data.TOP_PERFORMERS,
        'category_performance': mock_data.CATEGORY_PERFORMANCE,
    }

    return render(request, 'admin_panel/analytics.html', context)


# ============ Chart data ============


@api_view(['GET'])
def api_revenue_data(request):
    """API endpoint for the revenue chart"""
    period = request.query_params.get('period', mock_data.DEFAULT_REVENUE_PERIOD)
    if period not in mock_data.REVENUE_PERIODS:
        period = mock_data.DEFAULT_REVENUE_PERIOD

    return Response({
        'success': True,
        'period': period,
        'data': mock_data.revenue_series(period),
    })


@api_view(['GET'])
def api_distribution_data(request):
    """API endpoint for the restaurant distribution chart"""
    return Response({
        'success': True,
        'data': mock_data.DISTRIBUTION_DATA,
    })
