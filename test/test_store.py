from decimal import Decimal

import pytest

from core.store import EntityStore
from menu.models import Category


def new_restaurant_data(name='New Place'):
    return {
        'name': name,
        'cuisine': 'Thai',
        'owner_name': 'Somchai',
        'phone': '(555) 000-1111',
        'email': 'hello@newplace.com',
        'address': '1 Side Street',
        'city': 'Portland',
        'state': 'OR',
    }


def test_add_restaurant_prepends_with_fresh_id(make_restaurant):
    """New restaurants go to the front and get a unique id"""
    store = EntityStore(restaurants=[make_restaurant(1), make_restaurant(2)])

    first = store.add_restaurant(new_restaurant_data('First'))
    second = store.add_restaurant(new_restaurant_data('Second'))

    assert [r.name for r in store.restaurants][:2] == ['Second', 'First']
    assert first.id != second.id
    assert first.id not in ('1', '2')
    assert first.joined_date is not None
    assert first.status == 'active'
    assert first.commission_rate == Decimal('5.00')


def test_add_restaurant_ignores_client_supplied_id():
    store = EntityStore()
    data = new_restaurant_data()
    data['id'] = 'chosen-by-client'

    restaurant = store.add_restaurant(data)

    assert restaurant.id != 'chosen-by-client'


def test_update_restaurant_merges_fields(make_restaurant):
    store = EntityStore(restaurants=[make_restaurant(1), make_restaurant(2)])

    assert store.update_restaurant('1', {'name': 'Renamed', 'city': 'Austin'}) is True

    updated = store.get_restaurant('1')
    assert updated.name == 'Renamed'
    assert updated.city == 'Austin'
    assert updated.cuisine == 'Italian'
    assert store.get_restaurant('2').name == 'Restaurant 2'


def test_update_never_touches_id_or_joined_date(make_restaurant):
    original = make_restaurant(1)
    store = EntityStore(restaurants=[original])

    store.update_restaurant('1', {'id': '99', 'joined_date': None, 'name': 'X'})

    updated = store.get_restaurant('1')
    assert updated.id == '1'
    assert updated.joined_date == original.joined_date
    assert updated.name == 'X'


def test_update_unknown_id_is_noop(make_restaurant):
    store = EntityStore(restaurants=[make_restaurant(1)])
    before = store.restaurants

    assert store.update_restaurant('missing', {'name': 'Ghost'}) is False
    assert store.restaurants == before


def test_update_rejects_unknown_field(make_restaurant):
    store = EntityStore(restaurants=[make_restaurant(1)])

    with pytest.raises(ValueError):
        store.update_restaurant('1', {'rating': 5})


def test_invalid_status_raises(make_restaurant):
    store = EntityStore(restaurants=[make_restaurant(1)])

    with pytest.raises(ValueError):
        store.update_restaurant('1', {'status': 'closed'})
    assert store.get_restaurant('1').status == 'active'


def test_delete_restaurant(make_restaurant):
    store = EntityStore(restaurants=[make_restaurant(1), make_restaurant(2)])

    assert store.delete_restaurant('1') is True
    assert [r.id for r in store.restaurants] == ['2']
    assert store.delete_restaurant('1') is False
    assert len(store.restaurants) == 1


def test_block_and_unblock(make_restaurant):
    store = EntityStore(restaurants=[make_restaurant(1, status='inactive')])

    store.block_restaurant('1')
    assert store.get_restaurant('1').status == 'blocked'

    store.unblock_restaurant('1')
    assert store.get_restaurant('1').status == 'active'


def test_add_category_defaults():
    store = EntityStore(categories=[Category(id='1', name='Italian')])

    category = store.add_category({'name': 'Vegan', 'restaurant_count': 40})

    assert store.categories[0] is category
    assert category.restaurant_count == 0
    assert category.is_active is True
    assert category.created_at is not None


def test_update_category_keeps_platform_fields():
    original = Category(id='1', name='Italian', restaurant_count=25)
    store = EntityStore(categories=[original])

    store.update_category('1', {
        'name': 'Italian Food', 'restaurant_count': 0, 'created_at': None})

    updated = store.get_category('1')
    assert updated.name == 'Italian Food'
    assert updated.restaurant_count == 25
    assert updated.created_at == original.created_at


def test_delete_category_unknown_id_is_noop():
    store = EntityStore(categories=[Category(id='1', name='Italian')])

    assert store.delete_category('2') is False
    assert len(store.categories) == 1


def test_snapshots_are_immutable_tuples(make_restaurant):
    store = EntityStore(restaurants=[make_restaurant(1)])

    snapshot = store.restaurants
    store.add_restaurant(new_restaurant_data())

    assert isinstance(snapshot, tuple)
    assert len(snapshot) == 1
    assert len(store.restaurants) == 2


def test_load_replaces_collections(make_restaurant):
    store = EntityStore(restaurants=[make_restaurant(1)])

    store.load([make_restaurant(5), make_restaurant(6)], [])

    assert [r.id for r in store.restaurants] == ['5', '6']
    assert store.categories == ()
