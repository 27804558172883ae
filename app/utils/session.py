"""
Session resolution

Turns an inbound token into a live account. Tokens are looked up in a fixed
order of sources (cookie, then bearer header); whether a cookie is ever set
is a configuration matter handled by the login routes.
"""

from flask import current_app, g, request

from app.utils.errors import (
    AccountBlockedError,
    AuthenticationError,
    InvalidTokenError,
    NotFoundError,
)
from app.utils.tokens import verify_token


class CookieTokenSource:
    """Reads the token from a named cookie"""

    def __init__(self, config_key):
        self.config_key = config_key

    @property
    def cookie_name(self):
        return current_app.config[self.config_key]

    def extract(self, req):
        return req.cookies.get(self.cookie_name) or None


class BearerTokenSource:
    """Reads the token from an ``Authorization: Bearer`` header"""

    prefix = 'Bearer '

    def extract(self, req):
        header = req.headers.get('Authorization', '')
        if header.startswith(self.prefix):
            return header[len(self.prefix):].strip() or None
        return None


def extract_token(sources, req=None):
    """Return the first token found among ``sources``"""
    req = req if req is not None else request
    for source in sources:
        token = source.extract(req)
        if token:
            return token
    return None


class SessionResolver:
    """Resolve a token to an account and attach it to ``flask.g``

    ``loader`` receives the verified claims and returns the account or None.
    """

    def __init__(self, name, cookie_config_key, secret_config_key, loader, context_key):
        self.name = name
        self.cookie_source = CookieTokenSource(cookie_config_key)
        self.sources = [self.cookie_source, BearerTokenSource()]
        self.secret_config_key = secret_config_key
        self.loader = loader
        self.context_key = context_key

    def resolve(self):
        token = extract_token(self.sources)
        if not token:
            raise AuthenticationError(f'Access denied. No {self.name} token provided.')

        claims = verify_token(token, current_app.config[self.secret_config_key])
        account = self.loader(claims)

        if account is None:
            raise NotFoundError(f'{self.name.capitalize()} account not found')

        if not account.is_active:
            current_app.logger.warning('Rejected token for blocked %s %s', self.name, account.id)
            raise AccountBlockedError(clear_cookie=self.cookie_source.cookie_name)

        setattr(g, self.context_key, account)
        return account


def subject_id(claims):
    """Integer subject of a verified token"""
    try:
        return int(claims['sub'])
    except (KeyError, TypeError, ValueError):
        raise InvalidTokenError('Invalid token subject')


def set_token_cookie(response, cookie_name, token):
    """Attach ``token`` as an httponly cookie using the configured policy"""
    response.set_cookie(
        cookie_name,
        token,
        max_age=current_app.config['COOKIE_MAX_AGE'],
        httponly=True,
        secure=current_app.config['COOKIE_SECURE'],
        samesite=current_app.config['COOKIE_SAMESITE'],
    )
    return response


def clear_token_cookie(response, cookie_name):
    response.delete_cookie(
        cookie_name,
        httponly=True,
        secure=current_app.config['COOKIE_SECURE'],
        samesite=current_app.config['COOKIE_SAMESITE'],
    )
    return response
