from rest_framework import permissions


class HasAdminToken(permissions.BasePermission):
    """Allow access only while the browser session holds an admin token"""
    message = 'Authentication credentials were not provided.'

    def has_permission(self, request, view):
        session = getattr(request, 'admin_session', None)
        return session is not None and session.is_authenticated
