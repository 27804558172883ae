"""
Services Package
Business logic shared by routes and scripts
"""

from app.services.account_service import AccountService
from app.services.admin_service import AdminService

__all__ = [
    'AccountService',
    'AdminService',
]
