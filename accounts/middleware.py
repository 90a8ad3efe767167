# accounts/middleware.py
import logging

from core.query import clear_query_states
from .session import DjangoSessionTokenStorage, Session

logger = logging.getLogger(__name__)


class AdminSessionMiddleware:
    """Attach request.admin_session, built from the token in request.session.

    Must sit after SessionMiddleware. The token is read again on every
    request, so a login or logout from another tab applies on the next one.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        session = Session(DjangoSessionTokenStorage(request.session))

        def on_change(token):
            if token:
                logger.info("Admin session started")
            else:
                # A new login must not land on the previous admin's filters
                clear_query_states(request.session)
                logger.info("Admin session ended")

        session.subscribe(on_change)
        request.admin_session = session
        return self.get_response(request)
