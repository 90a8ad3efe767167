# RPA/settings.py
"""
Django settings for the Restaurant Platform Admin dashboard.

Values come from the environment (a local .env file is loaded first).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')


def env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.getenv(
    'DJANGO_SECRET_KEY', 'django-insecure-rpa-dev-key-change-me')

DEBUG = env_bool('DJANGO_DEBUG', True)

ALLOWED_HOSTS = [
    host.strip() for host in
    os.getenv('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')
    if host.strip()
]

INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.messages',
    'django.contrib.humanize',
    'django.contrib.staticfiles',

    # Third party
    'rest_framework',

    # Local apps
    'core',
    'accounts',
    'restaurants',
    'menu',
    'admin_panel',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'accounts.middleware.AdminSessionMiddleware',
]

ROOT_URLCONF = 'RPA.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.messages.context_processors.messages',
                'core.context_processors.dashboard',
            ],
        },
    },
]

WSGI_APPLICATION = 'RPA.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

# The admin token lives in a signed cookie so it survives reloads
# without needing a session table.
SESSION_ENGINE = 'django.contrib.sessions.backends.signed_cookies'
SESSION_COOKIE_AGE = 60 * 60 * 24 * 7
SESSION_EXPIRE_AT_BROWSER_CLOSE = False
SESSION_COOKIE_HTTPONLY = True

MESSAGE_STORAGE = 'django.contrib.messages.storage.session.SessionStorage'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'accounts.authentication.AdminSessionAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'accounts.permissions.HasAdminToken',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'UNAUTHENTICATED_USER': None,
}

# ============ ADMIN DASHBOARD ============
ADMIN_DASHBOARD = {
    # Base URL of the platform service that owns logins and persistence
    'PLATFORM_API_URL': os.getenv('PLATFORM_API_URL', 'http://localhost:8000'),
    # 'mock' simulates the platform locally, 'http' talks to PLATFORM_API_URL
    'GATEWAY': os.getenv('PLATFORM_GATEWAY', 'mock'),
    'MOCK_DELAY_SECONDS': float(os.getenv('PLATFORM_MOCK_DELAY', '0.5')),
    # Credentials the mock gateway accepts
    'MOCK_ADMIN_EMAIL': os.getenv('DASHBOARD_ADMIN_EMAIL', 'admin@platform.com'),
    'MOCK_ADMIN_PASSWORD': os.getenv('DASHBOARD_ADMIN_PASSWORD', 'admin123'),
    'REQUEST_TIMEOUT': float(os.getenv('PLATFORM_REQUEST_TIMEOUT', '30')),
    'ITEMS_PER_PAGE': int(os.getenv('DASHBOARD_ITEMS_PER_PAGE', '10')),
    'SEED_MOCK_DATA': env_bool('DASHBOARD_SEED_MOCK_DATA', True),
    'ENDPOINTS': {
        'login': '/api/admin/login',
        'restaurant_create': '/api/restaurant/create',
        'restaurant_update': '/api/restaurant/update/{id}',
        'restaurant_delete': '/api/restaurant/delete/{id}',
        'restaurant_block': '/api/restaurant/block/{id}',
        'restaurant_unblock': '/api/restaurant/unblock/{id}',
        'category_create': '/api/category/create',
        'category_update': '/api/category/update/{id}',
        'category_delete': '/api/category/delete/{id}',
        'category_toggle': '/api/category/toggle/{id}',
    },
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '[{asctime}] {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': os.getenv('DJANGO_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
