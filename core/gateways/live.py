# core/gateways/live.py
import logging

import requests

from .base import BasePlatformGateway

logger = logging.getLogger(__name__)


DEFAULT_ENDPOINTS = {
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
}


class LivePlatformGateway(BasePlatformGateway):
    """Platform service over HTTP + JSON"""

    def __init__(self, config=None):
        super().__init__(config)
        self.base_url = self.config.get(
            'base_url', 'http://localhost:8000').rstrip('/')
        self.endpoints = {
            **DEFAULT_ENDPOINTS, **self.config.get('endpoints', {})}

    def _url(self, key, entity_id=None):
        path = self.endpoints[key]
        if entity_id is not None:
            path = path.format(id=entity_id)
        return f"{self.base_url}{path}"

    def _post(self, url, payload, token=None, failure_message='Platform service error'):
        headers = {'Content-Type': 'application/json'}
        if token:
            headers['Authorization'] = f'Bearer {token}'

        try:
            response = requests.post(
                url,
                json=payload,
                headers=headers,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.warning(f"Platform call to {url} failed: {e}")
            return {
                'success': False,
                'error': str(e),
                'message': 'Could not reach the platform service'
            }

        try:
            result = response.json()
        except ValueError:
            result = None

        if not isinstance(result, dict):
            logger.warning(
                f"Platform call to {url} returned HTTP {response.status_code} without JSON")
            return {
                'success': False,
                'error': f"HTTP {response.status_code}: {response.text[:200]}",
                'message': failure_message
            }

        success = bool(result.get('success')) and response.ok
        return {
            'success': success,
            'token': result.get('token'),
            'message': result.get('message') or ('' if success else failure_message),
            'gateway_response': result
        }

    def login(self, email, password):
        """POST the admin credentials, the reply carries the bearer token"""
        return self._post(
            self._url('login'),
            {'email': email, 'password': password},
            failure_message='Login failed'
        )

    def send(self, action, payload=None, entity_id=None, token=None):
        return self._post(
            self._url(action, entity_id),
            payload or {},
            token=token
        )
