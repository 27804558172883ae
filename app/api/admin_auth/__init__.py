"""
Admin Authentication Blueprint
"""

from flask import Blueprint
from app.api.admin_auth.routes import admin_auth_bp

__all__ = ['admin_auth_bp']
