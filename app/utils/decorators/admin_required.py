from functools import wraps

from extensions import db
from app.models.admin import Admin
from app.utils.session import SessionResolver, subject_id


def _load_admin(claims):
    return db.session.get(Admin, subject_id(claims))


admin_session = SessionResolver(
    name='admin',
    cookie_config_key='ADMIN_TOKEN_COOKIE',
    secret_config_key='ADMIN_JWT_SECRET_KEY',
    loader=_load_admin,
    context_key='current_admin',
)


def admin_required():
    """Require a live admin session; sets ``g.current_admin``"""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            admin_session.resolve()
            return fn(*args, **kwargs)
        return wrapper
    return decorator
