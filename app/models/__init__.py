"""
Models package initialization
Import all models here for easy access
"""

from app.models.user import User
from app.models.admin import Admin, AdminRole, PERMISSIONS
from app.models.delivery_request import DeliveryRequest, RequestStatus
from app.models.complaint import Complaint, ComplaintType, ComplaintStatus, ComplaintPriority

__all__ = [
    'User',
    'Admin',
    'AdminRole',
    'PERMISSIONS',
    'DeliveryRequest',
    'RequestStatus',
    'Complaint',
    'ComplaintType',
    'ComplaintStatus',
    'ComplaintPriority',
]
