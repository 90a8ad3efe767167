# accounts/authentication.py
from rest_framework import authentication


class AdminSessionAuthentication(authentication.SessionAuthentication):
    """Authenticate JSON requests with the admin token held in the session cookie.

    The cookie is sent by the browser on its own, so unsafe methods must
    carry a CSRF token exactly like the HTML forms do.
    """

    def authenticate(self, request):
        session = getattr(request._request, 'admin_session', None)

        if session is None or not session.is_authenticated:
            return None  # HasAdminToken turns this into a 403

        self.enforce_csrf(request)

        return (None, session.token)
