"""
API Package
"""

# Import all blueprints for easy access
from app.api.auth import auth_bp
from app.api.requests import requests_bp
from app.api.complaints import complaints_bp
from app.api.admin_auth import admin_auth_bp
from app.api.admin import admin_bp

__all__ = [
    'auth_bp',
    'requests_bp',
    'complaints_bp',
    'admin_auth_bp',
    'admin_bp',
]
