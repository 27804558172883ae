"""
Authorization gates for admin routes

Both gates expect admin_required() to have run first.
"""

from functools import wraps

from flask import g

from app.models.admin import AdminRole
from app.utils.errors import AuthenticationError, AuthorizationError


def _current_admin():
    admin = g.get('current_admin')
    if admin is None:
        raise AuthenticationError('Admin not authenticated.')
    return admin


def check_permission(permission):
    """Allow super-admins, otherwise require the named permission flag"""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            admin = _current_admin()
            if admin.role != AdminRole.SUPER_ADMIN and not admin.has_permission(permission):
                raise AuthorizationError('Insufficient permissions.')
            return fn(*args, **kwargs)
        return wrapper
    return decorator


def require_super_admin():
    """Allow super-admins only, regardless of permission flags"""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if _current_admin().role != AdminRole.SUPER_ADMIN:
                raise AuthorizationError('Super admin access required.')
            return fn(*args, **kwargs)
        return wrapper
    return decorator
