import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()


def _hours(name):
    value = os.getenv(name)
    return timedelta(hours=float(value)) if value else None


class Config:
    """Base configuration"""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///campuskart.db')

    # Token signing: end-user and admin tokens use separate secrets
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'jwt-secret-key-change-in-production')
    ADMIN_JWT_SECRET_KEY = os.getenv('ADMIN_JWT_SECRET_KEY', 'admin-jwt-secret-key-change-in-production')
    JWT_ALGORITHM = 'HS256'

    # None means end-user tokens carry no exp claim
    USER_TOKEN_EXPIRES = _hours('USER_TOKEN_EXPIRES_HOURS')
    ADMIN_TOKEN_EXPIRES = timedelta(hours=24)

    # Token transport
    USER_TOKEN_COOKIE = 'token'
    ADMIN_TOKEN_COOKIE = 'adminToken'
    USER_TOKEN_COOKIE_ENABLED = True
    COOKIE_SECURE = False
    COOKIE_SAMESITE = 'Lax'
    COOKIE_MAX_AGE = 24 * 60 * 60

    # Pagination
    DEFAULT_PAGE_SIZE = 10
    MAX_PAGE_SIZE = 100

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    BCRYPT_LOG_ROUNDS = 12

    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = 'memory://'

    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 280,
    }

    CORS_ORIGINS = [
        os.getenv('FRONTEND_URL', 'http://localhost:5173'),
        'https://campuskart1.netlify.app',
    ]


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    SQLALCHEMY_ECHO = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SQLALCHEMY_DATABASE_URI = os.getenv('SQLALCHEMY_DATABASE_URI', os.getenv('DATABASE_URL'))
    SQLALCHEMY_ECHO = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 280,
        'pool_timeout': 30,
    }

    # Cross-site deployments receive the user token in the response body only
    USER_TOKEN_COOKIE_ENABLED = False
    COOKIE_SECURE = True

    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ECHO = False
    SQLALCHEMY_ENGINE_OPTIONS = {}

    JWT_SECRET_KEY = 'testing-user-secret-0123456789abcdef0123456789'
    ADMIN_JWT_SECRET_KEY = 'testing-admin-secret-0123456789abcdef01234567'
    USER_TOKEN_EXPIRES = None

    BCRYPT_LOG_ROUNDS = 4
    RATELIMIT_ENABLED = False


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
