"""
Admin Authentication Routes
Login, logout, session check and first-run setup
"""

from flask import Blueprint, current_app, g, jsonify, make_response
from sqlalchemy import or_

from extensions import limiter
from app.models.admin import Admin
from app.services.admin_service import AdminService
from app.utils.decorators import admin_required
from app.utils.errors import AuthenticationError
from app.utils.session import clear_token_cookie, set_token_cookie
from app.utils.tokens import issue_admin_token
from app.utils.validation import json_body, optional_str, require_str

admin_auth_bp = Blueprint('admin_auth', __name__)


@admin_auth_bp.route('/auth/login', methods=['POST'])
@limiter.limit("10 per hour")
def admin_login():
    """Admin login by username or email"""
    data = json_body()

    message = 'Username and password are required'
    username = require_str(data, 'username', message=message)
    password = require_str(data, 'password', strip=False, message=message)

    admin = Admin.query.filter(
        or_(Admin.username == username, Admin.email == username.lower())
    ).first()

    if not admin:
        raise AuthenticationError('Invalid credentials')

    if not admin.is_active:
        raise AuthenticationError('Admin account is disabled')

    if not admin.check_password(password):
        current_app.logger.warning('Failed admin login for %s', admin.username)
        raise AuthenticationError('Invalid credentials')

    admin.update_last_login()
    token = issue_admin_token(admin)

    current_app.logger.info('Admin %s logged in', admin.username)

    response = make_response(jsonify({
        'success': True,
        'message': 'Login successful',
        'admin': admin.to_dict(),
        'token': token,
    }), 200)
    return set_token_cookie(response, current_app.config['ADMIN_TOKEN_COOKIE'], token)


@admin_auth_bp.route('/auth/logout', methods=['POST'])
@admin_required()
def admin_logout():
    response = make_response(jsonify({'success': True, 'message': 'Logout successful'}), 200)
    return clear_token_cookie(response, current_app.config['ADMIN_TOKEN_COOKIE'])


@admin_auth_bp.route('/auth/verify', methods=['GET'])
@admin_required()
def verify_admin():
    """Return the admin behind the current token"""
    return jsonify({
        'success': True,
        'admin': g.current_admin.to_dict(),
    }), 200


@admin_auth_bp.route('/setup', methods=['POST'])
@limiter.limit("5 per hour")
def setup_admin():
    """Create the first super admin; disabled once any admin exists"""
    data = json_body()

    admin = AdminService.bootstrap_super_admin(
        username=optional_str(data, 'username'),
        email=optional_str(data, 'email'),
        password=optional_str(data, 'password', strip=False),
    )

    return jsonify({
        'success': True,
        'message': 'Super admin created successfully',
        'admin': admin.to_dict(),
    }), 201
