"""
Flask Application Factory
"""

import logging
import os

from flask import Flask, jsonify
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.exceptions import HTTPException

from config import config
from extensions import db, migrate, bcrypt, cors, limiter
from app.utils.errors import APIError, ConflictError, StoreError
from app.utils.session import clear_token_cookie


def create_app(config_name=None):
    """Application factory pattern"""

    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])
    app.logger.setLevel(getattr(logging, str(app.config['LOG_LEVEL']).upper(), logging.INFO))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    bcrypt.init_app(app)
    cors.init_app(app, resources={
        r"/api/*": {"origins": app.config['CORS_ORIGINS']},
        r"/admin/*": {"origins": app.config['CORS_ORIGINS']},
    }, supports_credentials=True,
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"])
    limiter.init_app(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    if app.config.get('USER_TOKEN_EXPIRES') is None:
        app.logger.warning('USER_TOKEN_EXPIRES is unset: end-user tokens never expire')

    # Create database tables; an unreachable store aborts startup
    with app.app_context():
        try:
            db.create_all()
        except SQLAlchemyError:
            app.logger.critical('Database connection failed during startup')
            raise

    return app


def register_blueprints(app):
    """Register Flask blueprints"""
    from app.api import auth_bp, requests_bp, complaints_bp, admin_auth_bp, admin_bp

    app.register_blueprint(auth_bp, url_prefix='/api')
    app.register_blueprint(requests_bp, url_prefix='/api')
    app.register_blueprint(complaints_bp, url_prefix='/api/complaints')
    app.register_blueprint(admin_auth_bp, url_prefix='/admin')
    app.register_blueprint(admin_bp, url_prefix='/admin')

    # Health check endpoint
    @app.route('/api/health')
    def health_check():
        return jsonify({'success': True, 'status': 'ok', 'message': 'Server is running'}), 200

    @app.route('/')
    def index():
        return jsonify({
            'success': True,
            'message': 'Welcome to CampusKart API',
            'version': '1.0.0',
            'endpoints': {
                'auth': '/api',
                'requests': '/api/requests',
                'complaints': '/api/complaints',
                'admin': '/admin'
            }
        }), 200


def register_error_handlers(app):
    """Render every failure as {success: false, kind, message}"""

    @app.errorhandler(APIError)
    def handle_api_error(error):
        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        cookie_name = getattr(error, 'clear_cookie', None)
        if cookie_name:
            clear_token_cookie(response, cookie_name)
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        response = jsonify({
            'success': False,
            'kind': error.name.replace(' ', ''),
            'message': error.description,
        })
        response.status_code = error.code
        return response

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        db.session.rollback()
        app.logger.warning(f'Integrity error: {error.orig}')
        return handle_api_error(ConflictError('Resource conflicts with an existing record'))

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error):
        db.session.rollback()
        app.logger.exception('Database error')
        return handle_api_error(StoreError())

    @app.errorhandler(Exception)
    def handle_exception(error):
        app.logger.exception(f'Unhandled exception: {str(error)}')
        return handle_api_error(APIError())
