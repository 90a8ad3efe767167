import jwt
from datetime import datetime, timedelta, timezone
from django.conf import settings


def create_jwt_token(email, role='admin'):
    """Create a JWT the way the platform service issues them (mock gateway)"""
    now = datetime.now(timezone.utc)
    payload = {
        'email': email,
        'role': role,
        'exp': now + timedelta(days=7),
        'iat': now
    }

    token = jwt.encode(payload, settings.SECRET_KEY, algorithm='HS256')
    return token


def get_token_claims(token):
    """Read the claims of a bearer token for display only.

    The signature is not checked; the platform service decides validity.
    Opaque (non-JWT) tokens give an empty dict.
    """
    if not token:
        return {}
    try:
        return jwt.decode(token, options={'verify_signature': False})
    except jwt.InvalidTokenError:
        return {}
