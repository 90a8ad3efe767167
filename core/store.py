# core/store.py
"""
In-memory entity store for the admin dashboard.

The store is the only owner of the restaurant and category collections.
Collections are kept newest-first: new entities are prepended, so the list
views never need a separate sort step before paginating.
"""

import logging
import threading
import uuid
from dataclasses import fields, replace

from django.utils import timezone

from menu.models import Category
from menu.models import READ_ONLY_FIELDS as CATEGORY_READ_ONLY_FIELDS
from restaurants.models import Restaurant, STATUS_ACTIVE, STATUS_BLOCKED
from restaurants.models import READ_ONLY_FIELDS as RESTAURANT_READ_ONLY_FIELDS

logger = logging.getLogger(__name__)


def generate_id():
    """Opaque, unique id for a new entity"""
    return str(uuid.uuid4())


def _clean_changes(model, changes, read_only_fields):
    """Drop platform-owned fields and reject names the entity doesn't have."""
    known = {f.name for f in fields(model)}
    unknown = set(changes) - known
    if unknown:
        raise ValueError(
            f"Unknown {model.__name__.lower()} field(s): {', '.join(sorted(unknown))}")
    return {k: v for k, v in changes.items() if k not in read_only_fields}


class EntityStore:
    """Restaurant and category collections with their mutation primitives.

    Every mutation runs to completion under the store lock and is visible
    to the next read. Updates and deletes on an unknown id leave the
    collection untouched and return False.
    """

    def __init__(self, restaurants=None, categories=None):
        self._lock = threading.RLock()
        self._restaurants = list(restaurants or [])
        self._categories = list(categories or [])

    # ============ Snapshots ============

    @property
    def restaurants(self):
        with self._lock:
            return tuple(self._restaurants)

    @property
    def categories(self):
        with self._lock:
            return tuple(self._categories)

    def get_restaurant(self, restaurant_id):
        with self._lock:
            return self._find(self._restaurants, restaurant_id)

    def get_category(self, category_id):
        with self._lock:
            return self._find(self._categories, category_id)

    def load(self, restaurants=(), categories=()):
        """Replace both collections, keeping the given order"""
        with self._lock:
            self._restaurants = list(restaurants)
            self._categories = list(categories)

    # ============ Restaurants ============

    def add_restaurant(self, data):
        """Create a restaurant from validated data and prepend it"""
        data = _clean_changes(Restaurant, data, RESTAURANT_READ_ONLY_FIELDS)
        restaurant = Restaurant(
            id=generate_id(), joined_date=timezone.now(), **data)

        with self._lock:
            self._restaurants.insert(0, restaurant)

        logger.info(f"Restaurant {restaurant.id} added: {restaurant.name}")
        return restaurant

    def update_restaurant(self, restaurant_id, changes):
        changes = _clean_changes(
            Restaurant, changes, RESTAURANT_READ_ONLY_FIELDS)
        return self._update('_restaurants', restaurant_id, changes)

    def delete_restaurant(self, restaurant_id):
        return self._delete('_restaurants', restaurant_id)

    def block_restaurant(self, restaurant_id):
        return self.update_restaurant(restaurant_id, {'status': STATUS_BLOCKED})

    def unblock_restaurant(self, restaurant_id):
        return self.update_restaurant(restaurant_id, {'status': STATUS_ACTIVE})

    # ============ Categories ============

    def add_category(self, data):
        """Create a category from validated data and prepend it"""
        data = _clean_changes(Category, data, CATEGORY_READ_ONLY_FIELDS)
        category = Category(
            id=generate_id(), created_at=timezone.now(),
            restaurant_count=0, **data)

        with self._lock:
            self._categories.insert(0, category)

        logger.info(f"Category {category.id} added: {category.name}")
        return category

    def update_category(self, category_id, changes):
        changes = _clean_changes(Category, changes, CATEGORY_READ_ONLY_FIELDS)
        return self._update('_categories', category_id, changes)

    def delete_category(self, category_id):
        return self._delete('_categories', category_id)

    # ============ Helpers ============

    @staticmethod
    def _find(collection, entity_id):
        for entity in collection:
            if entity.id == entity_id:
                return entity
        return None

    def _update(self, attr, entity_id, changes):
        with self._lock:
            collection = getattr(self, attr)
            for index, entity in enumerate(collection):
                if entity.id == entity_id:
                    # replace() re-runs validation, e.g. the status check
                    collection[index] = replace(entity, **changes)
                    return True

        logger.debug(f"Update skipped, no entity with id {entity_id}")
        return False

    def _delete(self, attr, entity_id):
        with self._lock:
            collection = getattr(self, attr)
            for index, entity in enumerate(collection):
                if entity.id == entity_id:
                    del collection[index]
                    return True

        logger.debug(f"Delete skipped, no entity with id {entity_id}")
        return False


_default_store = None
_default_store_lock = threading.Lock()


def get_store():
    """Process-wide store shared by every view"""
    global _default_store
    with _default_store_lock:
        if _default_store is None:
            _default_store = EntityStore()
        return _default_store


def set_store(store):
    """Swap the process-wide store (app startup and tests)"""
    global _default_store
    with _default_store_lock:
        _default_store = store
    return store
