# core/gateways/mock.py
import time

from accounts.utils import create_jwt_token
from .base import BasePlatformGateway


class MockPlatformGateway(BasePlatformGateway):
    """Stand-in for the platform service (no external API needed).

    Every call waits a fixed delay, then succeeds. Logins succeed only for
    the configured admin credentials. Sent mutations are kept in ``calls``.
    """

    def __init__(self, config=None):
        super().__init__(config)
        self.delay = self.config.get('delay', 0.5)
        self.admin_email = self.config.get('admin_email', 'admin@platform.com')
        self.admin_password = self.config.get('admin_password', 'admin123')
        self.calls = []

    def login(self, email, password):
        time.sleep(self.delay)

        if email.lower() == self.admin_email.lower() and password == self.admin_password:
            return {
                'success': True,
                'token': create_jwt_token(email),
                'message': 'Login successful',
            }

        return {
            'success': False,
            'message': 'Invalid credentials',
        }

    def send(self, action, payload=None, entity_id=None, token=None):
        time.sleep(self.delay)
        self.calls.append((action, entity_id, payload))
        return {
            'success': True,
            'message': '',
        }
