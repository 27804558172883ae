"""
Token codec

Signs and verifies the HS256 identity tokens handed to end users and admins.
Both helpers are pure: secret and lifetime are always passed in.
"""

from datetime import datetime, timezone

import jwt
from flask import current_app

from app.utils.errors import InvalidTokenError

ALGORITHM = 'HS256'


def issue_token(claims, secret, ttl=None):
    """Sign ``claims``; adds ``exp`` only when a ``ttl`` timedelta is given"""
    now = datetime.now(timezone.utc)
    payload = dict(claims)
    payload['iat'] = now
    if ttl is not None:
        payload['exp'] = now + ttl
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def verify_token(token, secret):
    """Return the claims of a valid token or raise InvalidTokenError"""
    try:
        return jwt.decode(token, secret, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise InvalidTokenError('Token has expired')
    except jwt.InvalidTokenError:
        raise InvalidTokenError('Invalid token')


def issue_user_token(user):
    return issue_token(
        {'sub': str(user.id), 'email': user.email},
        current_app.config['JWT_SECRET_KEY'],
        current_app.config.get('USER_TOKEN_EXPIRES'),
    )


def issue_admin_token(admin):
    return issue_token(
        {'sub': str(admin.id), 'username': admin.username, 'role': admin.role.value},
        current_app.config['ADMIN_JWT_SECRET_KEY'],
        current_app.config['ADMIN_TOKEN_EXPIRES'],
    )
