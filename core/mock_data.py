# core/mock_data.py
"""
Seed data for local development and the static analytics panels.

The analytics figures are fixed; the platform service has no analytics
endpoint yet.
"""

from datetime import timedelta
from decimal import Decimal

from django.utils import timezone

from menu.models import Category
from restaurants.models import Restaurant


RESTAURANT_ROWS = [
    # name, cuisine, owner, city, state, status, commission, revenue
    ("Mario's Italian Bistro", 'Italian', 'Mario Rossi', 'New York', 'NY', 'active', '5.00', '45230.00'),
    ('Tokyo Sushi Bar', 'Japanese', 'Kenji Tanaka', 'Los Angeles', 'CA', 'active', '6.50', '52180.00'),
    ('Casa Mexico', 'Mexican', 'Ana Garcia', 'Austin', 'TX', 'active', '5.00', '28450.00'),
    ('Le Petit Café', 'French', 'Claire Dubois', 'Boston', 'MA', 'inactive', '4.50', '15670.00'),
    ('Burger Barn', 'American', 'Jake Miller', 'Chicago', 'IL', 'active', '5.00', '33890.00'),
    ('Golden Dragon', 'Chinese', 'Wei Chen', 'San Francisco', 'CA', 'active', '5.50', '39120.00'),
    ('Spice Route', 'Indian', 'Priya Sharma', 'Seattle', 'WA', 'blocked', '5.00', '12340.00'),
    ('Olive Grove', 'Mediterranean', 'Nikos Papadopoulos', 'Miami', 'FL', 'active', '5.00', '21760.00'),
    ('Seoul Kitchen', 'Korean', 'Min-jun Park', 'Denver', 'CO', 'active', '6.00', '18950.00'),
    ('Bangkok Street', 'Thai', 'Somchai Wongsa', 'Portland', 'OR', 'inactive', '5.00', '9870.00'),
    ('Smokehouse BBQ', 'American', 'Earl Johnson', 'Nashville', 'TN', 'active', '5.00', '41200.00'),
    ('Trattoria Roma', 'Italian', 'Giulia Bianchi', 'Philadelphia', 'PA', 'active', '5.00', '27640.00'),
]

CATEGORY_ROWS = [
    # name, description, is_active, restaurant_count
    ('Italian', 'Pasta, pizza and classic Italian dishes', True, 25),
    ('American', 'Burgers, barbecue and comfort food', True, 30),
    ('Mexican', 'Tacos, burritos and Mexican street food', True, 22),
    ('Japanese', 'Sushi, ramen and Japanese cuisine', True, 18),
    ('French', 'Fine dining and French pastries', True, 12),
    ('Vegan', 'Plant-based dishes', False, 0),
]

STAT_GROWTH = {
    'total_restaurants': '+12%',
    'active_restaurants': '+8%',
    'total_revenue': '+15%',
    'blocked_restaurants': '-2%',
}

ANALYTICS_STATS = [
    {'title': 'Average Order Value', 'value': '$42.50', 'change': '+8.2%', 'icon': 'fa-dollar-sign'},
    {'title': 'Peak Hours', 'value': '6-8 PM', 'change': 'Most orders', 'icon': 'fa-clock'},
    {'title': 'Total Orders', 'value': '12,486', 'change': '+15.3%', 'icon': 'fa-shopping-cart'},
    {'title': 'Customer Satisfaction', 'value': '4.8/5', 'change': '+0.2', 'icon': 'fa-star'},
]

TOP_PERFORMERS = [
    {'name': 'Tokyo Sushi Bar', 'revenue': 52180, 'growth': '+18%'},
    {'name': "Mario's Italian Bistro", 'revenue': 45230, 'growth': '+12%'},
    {'name': 'Casa Mexico', 'revenue': 28450, 'growth': '-5%'},
    {'name': 'Le Petit Café', 'revenue': 15670, 'growth': '+8%'},
]

CATEGORY_PERFORMANCE = [
    {'category': 'Italian', 'restaurants': 25, 'revenue': 580000, 'growth': '+12%'},
    {'category': 'American', 'restaurants': 30, 'revenue': 720000, 'growth': '+8%'},
    {'category': 'Mexican', 'restaurants': 22, 'revenue': 450000, 'growth': '+15%'},
    {'category': 'Japanese', 'restaurants': 18, 'revenue': 390000, 'growth': '+20%'},
    {'category': 'French', 'restaurants': 12, 'revenue': 280000, 'growth': '+5%'},
]

DISTRIBUTION_DATA = [
    {'name': 'Italian', 'value': 25, 'color': '#ef4444'},
    {'name': 'American', 'value': 30, 'color': '#3b82f6'},
    {'name': 'Mexican', 'value': 22, 'color': '#f59e0b'},
    {'name': 'Japanese', 'value': 18, 'color': '#10b981'},
    {'name': 'French', 'value': 12, 'color': '#8b5cf6'},
]

REVENUE_PERIODS = {'7d': 7, '30d': 30, '90d': 90}
DEFAULT_REVENUE_PERIOD = '7d'


def _slug(name):
    return ''.join(c for c in name.lower() if c.isascii() and c.isalnum())


def build_restaurants(now=None):
    """Seed restaurants, newest first"""
    now = now or timezone.now()
    restaurants = []
    for index, row in enumerate(RESTAURANT_ROWS):
        name, cuisine, owner, city, state, status, commission, revenue = row
        restaurants.append(Restaurant(
            id=str(index + 1),
            name=name,
            cuisine=cuisine,
            owner_name=owner,
            phone=f'(555) {100 + index:03d}-{4000 + index * 17:04d}',
            email=f'contact@{_slug(name)}.com',
            address=f'{100 + index * 12} Main Street',
            city=city,
            state=state,
            status=status,
            commission_rate=Decimal(commission),
            revenue=Decimal(revenue),
            joined_date=now - timedelta(days=30 * (index + 1)),
        ))
    return restaurants


def build_categories(now=None):
    now = now or timezone.now()
    return [
        Category(
            id=str(index + 1),
            name=name,
            description=description,
            is_active=is_active,
            restaurant_count=count,
            created_at=now - timedelta(days=60 * (index + 1)),
        )
        for index, (name, description, is_active, count) in enumerate(CATEGORY_ROWS)
    ]


def revenue_series(period=DEFAULT_REVENUE_PERIOD, today=None):
    """Daily revenue points for the chart, oldest first"""
    days = REVENUE_PERIODS.get(period, REVENUE_PERIODS[DEFAULT_REVENUE_PERIOD])
    today = today or timezone.now().date()
    start = today - timedelta(days=days - 1)

    points = []
    for offset in range(days):
        date = start + timedelta(days=offset)
        # Weekly shape with a slow upward trend
        revenue = 42000 + offset * 350 + (date.weekday() * 1800) % 7000
        points.append({'date': date.strftime('%Y-%m-%d'), 'revenue': revenue})
    return points
