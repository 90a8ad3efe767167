import pytest

from core.gateways import MockPlatformGateway, set_gateway
from core.store import EntityStore, set_store
from restaurants.models import Restaurant

ADMIN_EMAIL = 'admin@platform.com'
ADMIN_PASSWORD = 'admin123'


class FailingGateway(MockPlatformGateway):
    """Platform that rejects every mutation"""

    def __init__(self, message='Platform rejected the request'):
        super().__init__({'delay': 0})
        self.message = message

    def send(self, action, payload=None, entity_id=None, token=None):
        self.calls.append((action, entity_id, payload))
        return {'success': False, 'message': self.message}


class RaisingGateway(MockPlatformGateway):
    def send(self, action, payload=None, entity_id=None, token=None):
        raise RuntimeError('connection reset')


@pytest.fixture(autouse=True)
def store():
    """Fresh, empty entity store for every test"""
    fresh = EntityStore()
    set_store(fresh)
    yield fresh
    set_store(None)


@pytest.fixture(autouse=True)
def gateway():
    """Mock platform with no delay"""
    mock = MockPlatformGateway({
        'delay': 0,
        'admin_email': ADMIN_EMAIL,
        'admin_password': ADMIN_PASSWORD,
    })
    set_gateway(mock)
    yield mock
    set_gateway(None)


def make_restaurant(index=1, **overrides):
    values = {
        'id': str(index),
        'name': f'Restaurant {index}',
        'cuisine': 'Italian',
        'owner_name': f'Owner {index}',
        'phone': '(555) 123-4567',
        'email': f'owner{index}@example.com',
        'address': f'{index} Main Street',
        'city': 'Springfield',
        'state': 'IL',
    }
    values.update(overrides)
    return Restaurant(**values)


@pytest.fixture
def restaurant_data():
    """Valid restaurant form payload (wire field names)"""
    return {
        'name': 'Pasta House',
        'cuisine': 'Italian',
        'ownerName': 'Luca Verdi',
        'phone': '(555) 222-3333',
        'email': 'luca@pastahouse.com',
        'address': '12 Elm Street',
        'city': 'Chicago',
        'state': 'IL',
        'commissionRate': '7.50',
        'revenue': '1200.00',
    }


@pytest.fixture
def admin_client(client):
    """Test client that went through the login form"""
    response = client.post('/login/', {
        'email': ADMIN_EMAIL,
        'password': ADMIN_PASSWORD,
    })
    assert response.status_code == 302
    return client


@pytest.fixture(name='make_restaurant')
def make_restaurant_fixture():
    return make_restaurant


@pytest.fixture
def failing_gateway():
    failing = FailingGateway()
    set_gateway(failing)
    return failing


@pytest.fixture
def raising_gateway():
    raising = RaisingGateway({'delay': 0})
    set_gateway(raising)
    return raising
