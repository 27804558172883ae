"""
Delivery Requests Blueprint
"""

from flask import Blueprint
from app.api.requests.routes import requests_bp

__all__ = ['requests_bp']
