# core/context_processors.py
from accounts.utils import get_token_claims

NAV_ITEMS = [
    # label, url name, icon
    ('Dashboard', 'admin-dashboard', 'fa-chart-pie'),
    ('Restaurants', 'restaurant-list', 'fa-store'),
    ('Dish Categories', 'category-list', 'fa-tags'),
    ('Analytics', 'admin-analytics', 'fa-chart-line'),
]


def dashboard(request):
    """Sidebar navigation and the signed-in admin for every template"""
    session = getattr(request, 'admin_session', None)
    if session is None or not session.is_authenticated:
        return {'nav_items': NAV_ITEMS, 'admin_user': None}

    claims = get_token_claims(session.token)
    email = claims.get('email') or 'admin'
    return {
        'nav_items': NAV_ITEMS,
        'admin_user': {
            'email': email,
            'role': claims.get('role', 'admin'),
            'initials': email[:2].upper(),
        },
    }
