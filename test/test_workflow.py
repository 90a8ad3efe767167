from concurrent.futures import Future
from decimal import Decimal

import pytest
from django.contrib import messages

from core.gateways import MockPlatformGateway
from core.notifications import MemoryNotifier
from core.query import QueryState
from core.workflow import (COMMITTED, FAILED, INVALID, NOT_FOUND,
                           MutationWorkflow)
from menu.models import Category


@pytest.fixture
def notifier():
    return MemoryNotifier()


@pytest.fixture
def workflow(store, gateway, notifier):
    return MutationWorkflow(
        store=store, gateway=gateway, notifier=notifier, token='t1', timeout=5)


@pytest.fixture
def seeded(store, make_restaurant):
    store.load(
        [make_restaurant(i) for i in range(1, 4)],
        [Category(id='c1', name='Italian', restaurant_count=25)])
    return store


# ============ Restaurants ============


def test_create_restaurant_commits_and_notifies(workflow, store, gateway,
                                                notifier, restaurant_data):
    result = workflow.create_restaurant(
        restaurant_data, QueryState(current_page=3))

    assert result.outcome == COMMITTED
    assert result.success
    assert store.restaurants[0] is result.entity
    assert result.entity.name == 'Pasta House'
    assert result.entity.owner_name == 'Luca Verdi'
    assert result.entity.commission_rate == Decimal('7.50')
    assert result.query_state.current_page == 1
    assert notifier.notifications == [
        (messages.SUCCESS, 'Restaurant added successfully')]

    action, entity_id, payload = gateway.calls[0]
    assert action == 'restaurant_create'
    assert entity_id is None
    assert payload['ownerName'] == 'Luca Verdi'
    assert payload['commissionRate'] == '7.50'
    assert 'id' not in payload
    assert 'joinedDate' not in payload


def test_create_restaurant_defaults(workflow, restaurant_data):
    del restaurant_data['commissionRate']
    del restaurant_data['revenue']

    result = workflow.create_restaurant(restaurant_data)

    assert result.entity.commission_rate == Decimal('5.00')
    assert result.entity.revenue == Decimal('0.00')
    assert result.entity.status == 'active'


def test_invalid_input_never_reaches_platform(workflow, store, gateway,
                                              notifier, restaurant_data):
    restaurant_data['email'] = 'not-an-email'
    restaurant_data['commissionRate'] = '150'
    del restaurant_data['name']

    result = workflow.create_restaurant(restaurant_data)

    assert result.outcome == INVALID
    assert not result.success
    assert set(result.errors) == {'email', 'commissionRate', 'name'}
    assert gateway.calls == []
    assert store.restaurants == ()
    assert notifier.notifications == []


def test_negative_revenue_is_invalid(workflow, restaurant_data):
    restaurant_data['revenue'] = '-1'

    result = workflow.create_restaurant(restaurant_data)

    assert 'revenue' in result.errors


def test_platform_failure_leaves_store_untouched(store, failing_gateway,
                                                 notifier, restaurant_data):
    workflow = MutationWorkflow(
        store=store, gateway=failing_gateway, notifier=notifier, timeout=5)
    state = QueryState(current_page=2)

    result = workflow.create_restaurant(restaurant_data, state)

    assert result.outcome == FAILED
    assert result.message == 'Platform rejected the request'
    assert result.query_state == state
    assert store.restaurants == ()
    assert notifier.notifications == [
        (messages.ERROR, 'Platform rejected the request')]


def test_failure_without_message_uses_default(store, notifier, restaurant_data):
    class SilentFailure(MockPlatformGateway):
        def send(self, action, payload=None, entity_id=None, token=None):
            return {'success': False}

    workflow = MutationWorkflow(
        store=store, gateway=SilentFailure({'delay': 0}), notifier=notifier)

    result = workflow.create_restaurant(restaurant_data)

    assert result.message == 'Failed to add restaurant. Please try again.'


def test_gateway_exception_is_reported(store, raising_gateway, notifier,
                                       restaurant_data):
    workflow = MutationWorkflow(
        store=store, gateway=raising_gateway, notifier=notifier, timeout=5)

    result = workflow.create_restaurant(restaurant_data)

    assert result.outcome == FAILED
    assert store.restaurants == ()
    assert notifier.levels == [messages.ERROR]


def test_timeout_is_reported(store, notifier, restaurant_data):
    class NeverAnswers(MockPlatformGateway):
        def submit(self, action, payload=None, entity_id=None, token=None):
            return Future()

    workflow = MutationWorkflow(
        store=store, gateway=NeverAnswers({'delay': 0}), notifier=notifier,
        timeout=0.01)

    result = workflow.create_restaurant(restaurant_data)

    assert result.outcome == FAILED
    assert result.message == 'The platform service did not respond in time'
    assert store.restaurants == ()


def test_update_restaurant(workflow, seeded, gateway, notifier):
    result = workflow.update_restaurant('2', {'name': 'Renamed', 'city': 'Boston'})

    assert result.outcome == COMMITTED
    assert seeded.get_restaurant('2').name == 'Renamed'
    assert seeded.get_restaurant('2').city == 'Boston'
    assert notifier.texts == ['Restaurant updated successfully']

    action, entity_id, payload = gateway.calls[0]
    assert (action, entity_id) == ('restaurant_update', '2')
    assert payload['name'] == 'Renamed'
    assert payload['cuisine'] == 'Italian'


def test_update_keeps_page(workflow, seeded):
    state = QueryState(current_page=2)

    result = workflow.update_restaurant('2', {'name': 'Renamed'}, state)

    assert result.query_state == state


def test_update_missing_restaurant_warns(workflow, seeded, gateway, notifier):
    result = workflow.update_restaurant('404', {'name': 'Ghost'})

    assert result.outcome == NOT_FOUND
    assert gateway.calls == []
    assert notifier.levels == [messages.WARNING]


def test_delete_restaurant_resets_page(workflow, seeded, notifier):
    result = workflow.delete_restaurant('1', QueryState(current_page=2))

    assert result.outcome == COMMITTED
    assert seeded.get_restaurant('1') is None
    assert len(seeded.restaurants) == 2
    assert result.query_state.current_page == 1
    assert notifier.texts == ['Restaurant deleted successfully']


def test_delete_failure_keeps_restaurant(store, failing_gateway, notifier,
                                         make_restaurant):
    store.load([make_restaurant(1)], [])
    workflow = MutationWorkflow(
        store=store, gateway=failing_gateway, notifier=notifier)

    result = workflow.delete_restaurant('1')

    assert result.outcome == FAILED
    assert store.get_restaurant('1') is not None


def test_block_and_unblock(workflow, seeded, gateway, notifier):
    workflow.block_restaurant('3')
    assert seeded.get_restaurant('3').status == 'blocked'

    workflow.unblock_restaurant('3')
    assert seeded.get_restaurant('3').status == 'active'

    assert [call[0] for call in gateway.calls] == [
        'restaurant_block', 'restaurant_unblock']
    assert notifier.texts == [
        'Restaurant blocked successfully', 'Restaurant unblocked successfully']


def test_block_missing_restaurant(workflow, seeded, gateway, notifier):
    result = workflow.block_restaurant('404')

    assert result.outcome == NOT_FOUND
    assert gateway.calls == []


def test_restaurant_removed_during_platform_call(workflow, seeded, gateway,
                                                 notifier):
    send = gateway.send

    def send_then_remove(action, payload=None, entity_id=None, token=None):
        seeded.delete_restaurant(entity_id)
        return send(action, payload, entity_id, token)

    gateway.send = send_then_remove

    result = workflow.block_restaurant('2')

    assert result.outcome == NOT_FOUND
    assert result.message.startswith('Restaurant no longer exists')
    assert notifier.levels == [messages.WARNING]


# ============ Categories ============


def test_create_category(workflow, store, notifier):
    result = workflow.create_category(
        {'name': 'Vegan', 'description': '', 'isActive': True},
        QueryState(current_page=2))

    assert result.outcome == COMMITTED
    assert store.categories[0].name == 'Vegan'
    assert store.categories[0].description is None
    assert store.categories[0].restaurant_count == 0
    assert result.query_state.current_page == 1
    assert notifier.texts == ['Category added successfully!']


def test_create_category_requires_name(workflow, gateway):
    result = workflow.create_category({'name': ''})

    assert result.outcome == INVALID
    assert 'name' in result.errors
    assert gateway.calls == []


def test_create_category_failure_message(store, notifier):
    class SilentFailure(MockPlatformGateway):
        def send(self, action, payload=None, entity_id=None, token=None):
            return {'success': False, 'message': ''}

    workflow = MutationWorkflow(
        store=store, gateway=SilentFailure({'delay': 0}), notifier=notifier)

    result = workflow.create_category({'name': 'Vegan'})

    assert result.message == 'Failed to add category. Please try again.'
    assert store.categories == ()


def test_update_category_keeps_restaurant_count(workflow, seeded, notifier):
    result = workflow.update_category('c1', {'name': 'Italian Cuisine'})

    assert result.outcome == COMMITTED
    assert seeded.get_category('c1').name == 'Italian Cuisine'
    assert seeded.get_category('c1').restaurant_count == 25
    assert notifier.texts == ['Category updated successfully!']


def test_toggle_category(workflow, seeded, gateway, notifier):
    workflow.toggle_category('c1')
    assert seeded.get_category('c1').is_active is False

    workflow.toggle_category('c1')
    assert seeded.get_category('c1').is_active is True

    assert gateway.calls[0] == ('category_toggle', 'c1', {'isActive': False})
    assert notifier.texts == [
        'Category deactivated successfully', 'Category activated successfully']


def test_delete_category(workflow, seeded, notifier):
    result = workflow.delete_category('c1', QueryState(current_page=2))

    assert result.outcome == COMMITTED
    assert seeded.categories == ()
    assert result.query_state.current_page == 1


def test_delete_missing_category(workflow, seeded, gateway, notifier):
    result = workflow.delete_category('missing')

    assert result.outcome == NOT_FOUND
    assert gateway.calls == []
    assert notifier.levels == [messages.WARNING]


def test_category_removed_during_toggle(workflow, seeded, gateway, notifier):
    send = gateway.send

    def send_then_remove(action, payload=None, entity_id=None, token=None):
        seeded.delete_category(entity_id)
        return send(action, payload, entity_id, token)

    gateway.send = send_then_remove

    result = workflow.toggle_category('c1')

    assert result.outcome == NOT_FOUND
    assert result.message.startswith('Category no longer exists')


def test_token_is_forwarded(store, restaurant_data):
    seen = []

    class Recording(MockPlatformGateway):
        def send(self, action, payload=None, entity_id=None, token=None):
            seen.append(token)
            return {'success': True}

    workflow = MutationWorkflow(
        store=store, gateway=Recording({'delay': 0}), token='bearer-1')
    workflow.create_restaurant(restaurant_data)

    assert seen == ['bearer-1']
