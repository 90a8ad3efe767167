# accounts/session.py
"""
Admin session: one bearer token, present or absent.

A non-empty token means "authenticated". Nothing here checks the token's
signature or expiry; the platform service rejects bad tokens on its side.
"""

import logging
import threading

logger = logging.getLogger(__name__)

TOKEN_KEY = 'token'

PROTECTED = 'protected'
PUBLIC = 'public'

RENDER = 'render'
REDIRECT_TO_LOGIN = 'redirect_to_login'
REDIRECT_TO_DASHBOARD = 'redirect_to_dashboard'


class DjangoSessionTokenStorage:
    """Token kept in request.session under "token"."""

    def __init__(self, django_session):
        self.django_session = django_session

    def get(self):
        return self.django_session.get(TOKEN_KEY)

    def set(self, token):
        self.django_session[TOKEN_KEY] = token

    def clear(self):
        self.django_session.pop(TOKEN_KEY, None)


class LocalTokenStorage:
    """In-process token storage for tests and non-web callers.

    ``external_change`` mimics another tab writing the shared storage:
    the value changes and the attached session hears about it.
    """

    def __init__(self, token=None):
        self._token = token
        self._watchers = []
        self._lock = threading.Lock()

    def get(self):
        with self._lock:
            return self._token

    def set(self, token):
        with self._lock:
            self._token = token

    def clear(self):
        self.set(None)

    def watch(self, callback):
        self._watchers.append(callback)

    def external_change(self, token):
        self.set(token)
        for callback in list(self._watchers):
            callback(token)


class Session:
    """Observable wrapper around a token storage.

    The storage is re-read on every access, so a token written elsewhere
    is picked up by the next evaluation.
    """

    def __init__(self, storage):
        self.storage = storage
        self._listeners = []
        if hasattr(storage, 'watch'):
            storage.watch(self._notify)

    @property
    def token(self):
        return self.storage.get() or None

    @property
    def is_authenticated(self):
        return bool(self.token)

    def login(self, token):
        if not token:
            raise ValueError("Cannot start a session without a token")
        self.storage.set(token)
        self._notify(token)

    def logout(self):
        had_token = self.is_authenticated
        self.storage.clear()
        if had_token:
            self._notify(None)

    def subscribe(self, listener):
        """Call listener(token) on every change; returns the unsubscribe function"""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, token):
        for listener in list(self._listeners):
            listener(token)


def decide(route_kind, session):
    """What the guard does with a request for a route of the given kind"""
    authenticated = session.is_authenticated

    if route_kind == PROTECTED:
        return RENDER if authenticated else REDIRECT_TO_LOGIN
    if route_kind == PUBLIC:
        return REDIRECT_TO_DASHBOARD if authenticated else RENDER

    raise ValueError(f"Unknown route kind: {route_kind}")
