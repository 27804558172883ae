from datetime import timedelta

import jwt
import pytest

from app.utils.errors import InvalidTokenError
from app.utils.tokens import issue_admin_token, issue_token, issue_user_token, verify_token

SECRET = 'unit-test-secret-0123456789abcdef0123456789'


def test_issue_and_verify_round_trip():
    token = issue_token({'sub': '7', 'email': 'a@x.com'}, SECRET)
    claims = verify_token(token, SECRET)
    assert claims['sub'] == '7'
    assert claims['email'] == 'a@x.com'
    assert 'iat' in claims


def test_token_without_ttl_has_no_expiry():
    token = issue_token({'sub': '1'}, SECRET)
    assert 'exp' not in verify_token(token, SECRET)


def test_token_with_ttl_carries_expiry():
    token = issue_token({'sub': '1'}, SECRET, ttl=timedelta(hours=24))
    claims = verify_token(token, SECRET)
    assert claims['exp'] - claims['iat'] == 24 * 60 * 60


def test_expired_token_is_rejected():
    token = issue_token({'sub': '1'}, SECRET, ttl=timedelta(seconds=-5))
    with pytest.raises(InvalidTokenError, match='expired'):
        verify_token(token, SECRET)


def test_wrong_secret_is_rejected():
    token = issue_token({'sub': '1'}, SECRET)
    with pytest.raises(InvalidTokenError):
        verify_token(token, 'another-secret-0123456789abcdef0123456789')


@pytest.mark.parametrize('token', ['', 'not-a-token', 'a.b.c'])
def test_malformed_token_is_rejected(token):
    with pytest.raises(InvalidTokenError):
        verify_token(token, SECRET)


def test_user_and_admin_tokens_use_separate_secrets(app, make_user, super_admin):
    user = make_user()
    user_token = issue_user_token(user)
    admin_token = issue_admin_token(super_admin)

    assert verify_token(user_token, app.config['JWT_SECRET_KEY'])['sub'] == str(user.id)
    with pytest.raises(InvalidTokenError):
        verify_token(user_token, app.config['ADMIN_JWT_SECRET_KEY'])

    claims = verify_token(admin_token, app.config['ADMIN_JWT_SECRET_KEY'])
    assert claims['username'] == 'root'
    assert claims['role'] == 'super-admin'
    assert claims['exp'] - claims['iat'] == 24 * 60 * 60


def test_user_token_follows_configured_expiry(app, make_user):
    app.config['USER_TOKEN_EXPIRES'] = timedelta(hours=1)
    token = issue_user_token(make_user())
    claims = jwt.decode(token, app.config['JWT_SECRET_KEY'], algorithms=['HS256'])
    assert claims['exp'] - claims['iat'] == 60 * 60
