# core/workflow.py
"""
Mutation workflow for the dashboard.

Every create/update/delete/status change goes through the same steps:
validate the input, make the platform call, then either commit the change to
the entity store or report the failure. The store is only touched after the
platform reports success, so a failed call never leaves partial state.
"""

import logging
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from core.conf import dashboard_setting
from core.gateways import base as actions
from core.gateways import get_gateway
from core.notifications import MemoryNotifier
from core.query import QueryState
from core.store import get_store
from menu.serializers import CategorySerializer, category_to_wire
from restaurants.serializers import RestaurantSerializer, restaurant_to_wire

logger = logging.getLogger(__name__)


COMMITTED = 'committed'
INVALID = 'invalid'
FAILED = 'failed'
NOT_FOUND = 'not_found'


@dataclass
class MutationResult:
    outcome: str
    message: str = ''
    errors: dict = field(default_factory=dict)
    entity: Any = None
    query_state: Optional[QueryState] = None

    @property
    def success(self):
        return self.outcome == COMMITTED


class MutationWorkflow:
    """Validate, call the platform, then commit or report.

    The workflow does not stop duplicate submissions; the calling view
    disables its trigger while a request is in flight.
    """

    def __init__(self, store=None, gateway=None, notifier=None, token=None,
                 timeout=None):
        self.store = store if store is not None else get_store()
        self.gateway = gateway if gateway is not None else get_gateway()
        self.notifier = notifier if notifier is not None else MemoryNotifier()
        self.token = token
        if timeout is None:
            timeout = dashboard_setting('REQUEST_TIMEOUT')
        self.timeout = timeout

    # ============ Restaurants ============

    def create_restaurant(self, data, query_state=None):
        serializer = RestaurantSerializer(data=data)
        if not serializer.is_valid():
            return self._invalid(serializer.errors, query_state)

        validated = serializer.validated_data
        return self._run(
            actions.RESTAURANT_CREATE, 'Restaurant',
            payload=restaurant_to_wire(validated),
            commit=lambda: self.store.add_restaurant(dict(validated)),
            success_message='Restaurant added successfully',
            failure_message='Failed to add restaurant. Please try again.',
            query_state=query_state,
            resets_page=True,
        )

    def update_restaurant(self, restaurant_id, data, query_state=None):
        restaurant = self.store.get_restaurant(restaurant_id)
        if restaurant is None:
            return self._not_found('Restaurant', restaurant_id, query_state)

        serializer = RestaurantSerializer(data=data, partial=True)
        if not serializer.is_valid():
            return self._invalid(serializer.errors, query_state)

        changes = dict(serializer.validated_data)
        return self._run(
            actions.RESTAURANT_UPDATE, 'Restaurant',
            entity_id=restaurant_id,
            payload=restaurant_to_wire(replace(restaurant, **changes)),
            commit=lambda: self._commit_update(
                self.store.update_restaurant, self.store.get_restaurant,
                restaurant_id, changes),
            success_message='Restaurant updated successfully',
            failure_message='Failed to update restaurant. Please try again.',
            query_state=query_state,
        )

    def delete_restaurant(self, restaurant_id, query_state=None):
        restaurant = self.store.get_restaurant(restaurant_id)
        if restaurant is None:
            return self._not_found('Restaurant', restaurant_id, query_state)

        return self._run(
            actions.RESTAURANT_DELETE, 'Restaurant',
            entity_id=restaurant_id,
            commit=lambda: self._commit_delete(
                self.store.delete_restaurant, restaurant_id, restaurant),
            success_message='Restaurant deleted successfully',
            failure_message='Failed to delete restaurant. Please try again.',
            query_state=query_state,
            resets_page=True,
        )

    def block_restaurant(self, restaurant_id, query_state=None):
        return self._set_restaurant_status(
            actions.RESTAURANT_BLOCK, self.store.block_restaurant,
            restaurant_id, 'blocked', query_state)

    def unblock_restaurant(self, restaurant_id, query_state=None):
        return self._set_restaurant_status(
            actions.RESTAURANT_UNBLOCK, self.store.unblock_restaurant,
            restaurant_id, 'unblocked', query_state)

    def _set_restaurant_status(self, action, store_method, restaurant_id,
                               verb, query_state):
        if self.store.get_restaurant(restaurant_id) is None:
            return self._not_found('Restaurant', restaurant_id, query_state)

        return self._run(
            action, 'Restaurant',
            entity_id=restaurant_id,
            commit=lambda: self._commit_update(
                lambda entity_id, _: store_method(entity_id),
                self.store.get_restaurant, restaurant_id, None),
            success_message=f'Restaurant {verb} successfully',
            failure_message=f'Restaurant could not be {verb}. Please try again.',
            query_state=query_state,
        )

    # ============ Categories ============

    def create_category(self, data, query_state=None):
        serializer = CategorySerializer(data=data)
        if not serializer.is_valid():
            return self._invalid(serializer.errors, query_state)

        validated = serializer.validated_data
        return self._run(
            actions.CATEGORY_CREATE, 'Category',
            payload=category_to_wire(validated),
            commit=lambda: self.store.add_category(dict(validated)),
            success_message='Category added successfully!',
            failure_message='Failed to add category. Please try again.',
            query_state=query_state,
            resets_page=True,
        )

    def update_category(self, category_id, data, query_state=None):
        category = self.store.get_category(category_id)
        if category is None:
            return self._not_found('Category', category_id, query_state)

        serializer = CategorySerializer(data=data, partial=True)
        if not serializer.is_valid():
            return self._invalid(serializer.errors, query_state)

        changes = dict(serializer.validated_data)
        return self._run(
            actions.CATEGORY_UPDATE, 'Category',
            entity_id=category_id,
            payload=category_to_wire(replace(category, **changes)),
            commit=lambda: self._commit_update(
                self.store.update_category, self.store.get_category,
                category_id, changes),
            success_message='Category updated successfully!',
            failure_message='Failed to update category. Please try again.',
            query_state=query_state,
        )

    def delete_category(self, category_id, query_state=None):
        category = self.store.get_category(category_id)
        if category is None:
            return self._not_found('Category', category_id, query_state)

        return self._run(
            actions.CATEGORY_DELETE, 'Category',
            entity_id=category_id,
            commit=lambda: self._commit_delete(
                self.store.delete_category, category_id, category),
            success_message='Category deleted successfully',
            failure_message='Failed to delete category. Please try again.',
            query_state=query_state,
            resets_page=True,
        )

    def toggle_category(self, category_id, query_state=None):
        category = self.store.get_category(category_id)
        if category is None:
            return self._not_found('Category', category_id, query_state)

        is_active = not category.is_active
        status_text = 'activated' if is_active else 'deactivated'
        return self._run(
            actions.CATEGORY_TOGGLE, 'Category',
            entity_id=category_id,
            payload={'isActive': is_active},
            commit=lambda: self._commit_update(
                self.store.update_category, self.store.get_category,
                category_id, {'is_active': is_active}),
            success_message=f'Category {status_text} successfully',
            failure_message='Failed to update category. Please try again.',
            query_state=query_state,
        )

    # ============ Steps ============

    def _invalid(self, errors, query_state):
        # Field errors are shown next to the form fields, not as a notification
        return MutationResult(
            outcome=INVALID, errors=dict(errors), query_state=query_state)

    def _not_found(self, label, entity_id, query_state):
        message = f'{label} no longer exists. It may have been removed elsewhere.'
        logger.warning(f"{label} {entity_id} not found, mutation skipped")
        self.notifier.warning(message)
        return MutationResult(
            outcome=NOT_FOUND, message=message, query_state=query_state)

    def _call_platform(self, action, payload, entity_id):
        future = self.gateway.submit(
            action, payload=payload, entity_id=entity_id, token=self.token)
        try:
            return future.result(timeout=self.timeout)
        except FutureTimeoutError:
            logger.warning(f"{action} timed out after {self.timeout}s")
            return {
                'success': False,
                'message': 'The platform service did not respond in time'
            }
        except Exception as e:
            logger.exception(f"{action} raised in {self.gateway.get_gateway_name()}")
            return {
                'success': False,
                'error': str(e),
                'message': 'Platform gateway error'
            }

    def _run(self, action, label, commit, success_message, failure_message,
             entity_id=None, payload=None, query_state=None,
             resets_page=False):
        response = self._call_platform(action, payload, entity_id)

        if not response.get('success'):
            message = response.get('message') or failure_message
            logger.warning(f"{action} rejected for {entity_id or 'new entity'}: {message}")
            self.notifier.error(message)
            return MutationResult(
                outcome=FAILED, message=message, query_state=query_state)

        entity = commit()
        if entity is None:
            # Removed between the platform call and the commit
            return self._not_found(label, entity_id, query_state)

        if resets_page and query_state is not None:
            query_state = query_state.reset_page()

        message = response.get('message') or success_message
        logger.info(f"{action} committed for {getattr(entity, 'id', entity_id)}")
        self.notifier.success(message)
        return MutationResult(
            outcome=COMMITTED, message=message, entity=entity,
            query_state=query_state)

    @staticmethod
    def _commit_update(update, lookup, entity_id, changes):
        if not update(entity_id, changes):
            return None
        return lookup(entity_id)

    @staticmethod
    def _commit_delete(delete, entity_id, entity):
        if not delete(entity_id):
            return None
        return entity
