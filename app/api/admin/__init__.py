"""
Admin Blueprint
"""

from flask import Blueprint
from app.api.admin.routes import admin_bp

__all__ = ['admin_bp']
