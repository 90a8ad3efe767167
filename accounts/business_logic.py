# accounts/business_logic.py
import logging
from concurrent.futures import TimeoutError as FutureTimeoutError

from core.conf import dashboard_setting
from core.gateways import get_gateway
from .serializers import LoginSerializer

logger = logging.getLogger(__name__)


class AdminAuthLogic:
    @staticmethod
    def login(session, data, notifier, gateway=None, timeout=None):
        """Validate credentials, ask the platform for a token and start the session.

        Returns (success, field_errors). Field errors come back without a
        notification; a rejected login is reported through the notifier.
        """
        serializer = LoginSerializer(data=data)
        if not serializer.is_valid():
            return False, dict(serializer.errors)

        gateway = gateway or get_gateway()
        if timeout is None:
            timeout = dashboard_setting('REQUEST_TIMEOUT')
        email = serializer.validated_data['email']

        future = gateway.submit_login(
            email, serializer.validated_data['password'])
        try:
            response = future.result(timeout=timeout)
        except FutureTimeoutError:
            logger.warning(f"Login for {email} timed out after {timeout}s")
            response = {
                'success': False,
                'message': 'The platform service did not respond in time'
            }
        except Exception:
            logger.exception(f"Login for {email} raised in {gateway.get_gateway_name()}")
            response = {'success': False, 'message': 'Login failed'}

        token = response.get('token')
        if not response.get('success') or not token:
            logger.warning(f"Login rejected for {email}")
            notifier.error(response.get('message') or 'Login failed')
            return False, {}

        session.login(token)
        logger.info(f"Admin {email} logged in")
        notifier.success('Login successful')
        return True, {}

    @staticmethod
    def logout(session, notifier):
        session.logout()
        notifier.info('Logged out successfully')
