import pytest
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured

from core import mock_data


@pytest.mark.parametrize('per_page', [0, -5, '10'])
def test_bad_items_per_page_fails_at_startup(settings, per_page):
    settings.ADMIN_DASHBOARD = {'ITEMS_PER_PAGE': per_page, 'SEED_MOCK_DATA': False}

    with pytest.raises(ImproperlyConfigured):
        apps.get_app_config('core').ready()


def test_startup_seeds_store(settings, store):
    settings.ADMIN_DASHBOARD = {'SEED_MOCK_DATA': True}

    apps.get_app_config('core').ready()

    assert len(store.restaurants) == len(mock_data.RESTAURANT_ROWS)
    assert len(store.categories) == len(mock_data.CATEGORY_ROWS)
    assert store.restaurants[0].name == "Mario's Italian Bistro"


def test_seed_restaurants_are_valid_on_the_wire():
    from restaurants.serializers import RestaurantSerializer

    for restaurant in mock_data.build_restaurants():
        data = RestaurantSerializer(restaurant).data
        assert RestaurantSerializer(data=data).is_valid(), data


def test_revenue_series_periods():
    assert len(mock_data.revenue_series('7d')) == 7
    assert len(mock_data.revenue_series('90d')) == 90
    # Unknown periods fall back to a week
    assert len(mock_data.revenue_series('1y')) == 7
