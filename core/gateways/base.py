# core/gateways/base.py
import abc
from concurrent.futures import ThreadPoolExecutor


# Actions understood by every gateway; they double as endpoint keys
RESTAURANT_CREATE = 'restaurant_create'
RESTAURANT_UPDATE = 'restaurant_update'
RESTAURANT_DELETE = 'restaurant_delete'
RESTAURANT_BLOCK = 'restaurant_block'
RESTAURANT_UNBLOCK = 'restaurant_unblock'
CATEGORY_CREATE = 'category_create'
CATEGORY_UPDATE = 'category_update'
CATEGORY_DELETE = 'category_delete'
CATEGORY_TOGGLE = 'category_toggle'

ACTIONS = (
    RESTAURANT_CREATE, RESTAURANT_UPDATE, RESTAURANT_DELETE,
    RESTAURANT_BLOCK, RESTAURANT_UNBLOCK,
    CATEGORY_CREATE, CATEGORY_UPDATE, CATEGORY_DELETE, CATEGORY_TOGGLE,
)

_executor = ThreadPoolExecutor(
    max_workers=4, thread_name_prefix='platform-gateway')


class BasePlatformGateway(abc.ABC):
    """Base class for gateways to the platform service.

    Gateways answer with plain dicts carrying at least 'success' and
    'message'. They never raise for remote failures.
    """

    def __init__(self, config=None):
        self.config = config or {}
        self.timeout = self.config.get('timeout', 30)

    @abc.abstractmethod
    def login(self, email, password):
        """Exchange admin credentials for a bearer token"""
        pass

    @abc.abstractmethod
    def send(self, action, payload=None, entity_id=None, token=None):
        """Persist one mutation on the platform"""
        pass

    def submit(self, action, payload=None, entity_id=None, token=None):
        """Start send() in the background and return its Future.

        There is no cancellation: once submitted the call runs to completion.
        """
        if action not in ACTIONS:
            raise ValueError(f"Unknown gateway action: {action}")
        return _executor.submit(self.send, action, payload, entity_id, token)

    def submit_login(self, email, password):
        return _executor.submit(self.login, email, password)

    def get_gateway_name(self):
        """Get gateway name"""
        return self.__class__.__name__
