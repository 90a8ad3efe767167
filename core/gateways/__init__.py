# core/gateways/__init__.py
import threading

from core.conf import dashboard_setting
from .base import BasePlatformGateway
from .live import LivePlatformGateway
from .mock import MockPlatformGateway

__all__ = ['BasePlatformGateway', 'LivePlatformGateway',
           'MockPlatformGateway', 'build_gateway', 'get_gateway',
           'set_gateway']

_gateway = None
_gateway_lock = threading.Lock()


def build_gateway():
    """Create the gateway named by ADMIN_DASHBOARD['GATEWAY']"""
    kind = dashboard_setting('GATEWAY')
    timeout = dashboard_setting('REQUEST_TIMEOUT')

    if kind == 'http':
        return LivePlatformGateway({
            'base_url': dashboard_setting('PLATFORM_API_URL'),
            'endpoints': dashboard_setting('ENDPOINTS'),
            'timeout': timeout,
        })

    if kind == 'mock':
        return MockPlatformGateway({
            'delay': dashboard_setting('MOCK_DELAY_SECONDS'),
            'timeout': timeout,
            'admin_email': dashboard_setting('MOCK_ADMIN_EMAIL'),
            'admin_password': dashboard_setting('MOCK_ADMIN_PASSWORD'),
        })

    raise ValueError(f"Unknown platform gateway: {kind}")


def get_gateway():
    global _gateway
    with _gateway_lock:
        if _gateway is None:
            _gateway = build_gateway()
        return _gateway


def set_gateway(gateway):
    """Swap the shared gateway; None rebuilds it from settings on next use"""
    global _gateway
    with _gateway_lock:
        _gateway = gateway
    return gateway
