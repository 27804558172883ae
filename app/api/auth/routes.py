"""
Student Authentication Routes
"""

from flask import Blueprint, current_app, g, jsonify, make_response

from extensions import limiter
from app.models.user import User
from app.services.account_service import AccountService
from app.utils.decorators import login_required
from app.utils.errors import AuthenticationError, AccountBlockedError
from app.utils.session import clear_token_cookie, set_token_cookie
from app.utils.tokens import issue_user_token
from app.utils.validation import json_body, require_str

auth_bp = Blueprint('auth', __name__)


def _token_response(payload, token, status=200):
    """JSON response carrying the token; also set as a cookie when enabled"""
    payload['token'] = token
    response = make_response(jsonify(payload), status)
    if current_app.config['USER_TOKEN_COOKIE_ENABLED']:
        set_token_cookie(response, current_app.config['USER_TOKEN_COOKIE'], token)
    return response


@auth_bp.route('/register', methods=['POST'])
@limiter.limit("10 per hour")
def register():
    """Register a new student account"""
    data = json_body()

    user = AccountService.register(
        name=require_str(data, 'name'),
        email=require_str(data, 'email'),
        password=require_str(data, 'password', strip=False),
        type=require_str(data, 'type'),
    )

    return _token_response({
        'success': True,
        'message': 'User registered successfully',
        'user': user.to_dict(),
    }, issue_user_token(user), 201)


@auth_bp.route('/login', methods=['POST'])
@limiter.limit("50 per hour")
def login():
    """Login a student"""
    data = json_body()

    message = 'Email and password are required'
    email = require_str(data, 'email', message=message)
    password = require_str(data, 'password', strip=False, message=message)

    user = User.query.filter_by(email=email.lower()).first()

    if not user or not user.check_password(password):
        raise AuthenticationError('Invalid email or password')

    if not user.is_active:
        current_app.logger.info('Blocked user %s attempted login', user.id)
        raise AccountBlockedError()

    return _token_response({
        'success': True,
        'message': 'Login successful',
        'user': user.to_dict(),
    }, issue_user_token(user))


@auth_bp.route('/logout', methods=['GET'])
def logout():
    """Logout (clears the session cookie; bearer clients drop their token)"""
    response = make_response(jsonify({'success': True, 'message': 'Logged out'}), 200)
    return clear_token_cookie(response, current_app.config['USER_TOKEN_COOKIE'])


@auth_bp.route('/user', methods=['GET'])
@login_required()
def get_current_user():
    """Get the signed-in user with their requests"""
    return jsonify({
        'success': True,
        'user': g.current_user.to_dict(include_requests=True),
    }), 200


@auth_bp.route('/userexist', methods=['GET'])
@login_required()
def user_exists():
    """Cheap probe the front end uses to check the session is still valid"""
    return jsonify({'success': True, 'status': 'ok'}), 200
