"""
Route decorators for session resolution and permission checks
"""

from app.utils.decorators.login_required import login_required
from app.utils.decorators.admin_required import admin_required
from app.utils.decorators.permissions import check_permission, require_super_admin

__all__ = [
    'login_required',
    'admin_required',
    'check_permission',
    'require_super_admin',
]
