# core/conf.py
from django.conf import settings


DEFAULTS = {
    'PLATFORM_API_URL': 'http://localhost:8000',
    'GATEWAY': 'mock',
    'MOCK_DELAY_SECONDS': 0.5,
    'MOCK_ADMIN_EMAIL': 'admin@platform.com',
    'MOCK_ADMIN_PASSWORD': 'admin123',
    'REQUEST_TIMEOUT': 30,
    'ITEMS_PER_PAGE': 10,
    'SEED_MOCK_DATA': True,
    'ENDPOINTS': {},
}


def dashboard_setting(name):
    """Read one ADMIN_DASHBOARD setting, falling back to the defaults above"""
    overrides = getattr(settings, 'ADMIN_DASHBOARD', {})
    return overrides.get(name, DEFAULTS[name])


def items_per_page():
    return dashboard_setting('ITEMS_PER_PAGE')
