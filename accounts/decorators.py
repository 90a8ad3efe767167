# accounts/decorators.py
from functools import wraps

from django.shortcuts import redirect

from .session import (PROTECTED, PUBLIC, REDIRECT_TO_DASHBOARD,
                      REDIRECT_TO_LOGIN, decide)

LOGIN_URL_NAME = 'login'
LANDING_URL_NAME = 'admin-dashboard'


def route(route_kind):
    """Decorator applying the session guard for one kind of route"""
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            decision = decide(route_kind, request.admin_session)
            if decision == REDIRECT_TO_LOGIN:
                return redirect(LOGIN_URL_NAME)
            if decision == REDIRECT_TO_DASHBOARD:
                return redirect(LANDING_URL_NAME)
            return view_func(request, *args, **kwargs)
        return wrapper
    return decorator


def protected_route(view_func):
    return route(PROTECTED)(view_func)


def public_route(view_func):
    return route(PUBLIC)(view_func)
