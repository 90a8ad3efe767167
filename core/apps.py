# core/apps.py
import logging

from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'

    def ready(self):
        from core.conf import dashboard_setting

        per_page = dashboard_setting('ITEMS_PER_PAGE')
        if not isinstance(per_page, int) or per_page <= 0:
            raise ImproperlyConfigured(
                f"ADMIN_DASHBOARD['ITEMS_PER_PAGE'] must be a positive integer, got {per_page!r}")

        if dashboard_setting('SEED_MOCK_DATA'):
            from core import mock_data
            from core.store import get_store

            restaurants = mock_data.build_restaurants()
            categories = mock_data.build_categories()
            get_store().load(restaurants, categories)
            logger.info(
                f"Seeded store with {len(restaurants)} restaurants and {len(categories)} categories")
