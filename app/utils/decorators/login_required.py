from functools import wraps

from extensions import db
from app.models.user import User
from app.utils.session import SessionResolver, subject_id


def _load_user(claims):
    return db.session.get(User, subject_id(claims))


user_session = SessionResolver(
    name='user',
    cookie_config_key='USER_TOKEN_COOKIE',
    secret_config_key='JWT_SECRET_KEY',
    loader=_load_user,
    context_key='current_user',
)


def login_required():
    """Require a live end-user session; sets ``g.current_user``"""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            user_session.resolve()
            return fn(*args, **kwargs)
        return wrapper
    return decorator
