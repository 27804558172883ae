from extensions import db
from datetime import datetime
from enum import Enum


def _values(enum_cls):
    return [member.value for member in enum_cls]


class ComplaintType(str, Enum):
    USER_BEHAVIOR = 'user-behavior'
    INAPPROPRIATE_REQUEST = 'inappropriate-request'
    SPAM = 'spam'
    FRAUD = 'fraud'
    OTHER = 'other'


class ComplaintStatus(str, Enum):
    PENDING = 'pending'
    INVESTIGATING = 'investigating'
    RESOLVED = 'resolved'
    DISMISSED = 'dismissed'


class ComplaintPriority(str, Enum):
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'
    URGENT = 'urgent'


class Complaint(db.Model):
    __tablename__ = 'complaints'

    TITLE_MAX_LENGTH = 200
    DESCRIPTION_MAX_LENGTH = 1000

    id = db.Column(db.Integer, primary_key=True)
    reported_by_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    reported_user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True, index=True)
    request_id = db.Column(db.Integer, db.ForeignKey('requests.id'), nullable=True)

    type = db.Column(db.Enum(ComplaintType, values_callable=_values), nullable=False, index=True)
    title = db.Column(db.String(TITLE_MAX_LENGTH), nullable=False)
    description = db.Column(db.String(DESCRIPTION_MAX_LENGTH), nullable=False)
    status = db.Column(db.Enum(ComplaintStatus, values_callable=_values),
                       default=ComplaintStatus.PENDING, nullable=False, index=True)
    priority = db.Column(db.Enum(ComplaintPriority, values_callable=_values),
                         default=ComplaintPriority.MEDIUM, nullable=False, index=True)

    admin_response = db.Column(db.Text, nullable=True)
    handled_by_id = db.Column(db.Integer, db.ForeignKey('admins.id'), nullable=True)
    resolved_at = db.Column(db.DateTime, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    reported_by = db.relationship('User', foreign_keys=[reported_by_id])
    reported_user = db.relationship('User', foreign_keys=[reported_user_id])
    request = db.relationship('DeliveryRequest', foreign_keys=[request_id])
    handled_by = db.relationship('Admin', foreign_keys=[handled_by_id])

    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def set_status(self, status):
        """Change status, stamping resolved_at on the move into RESOLVED"""
        if status == ComplaintStatus.RESOLVED and self.status != ComplaintStatus.RESOLVED:
            self.resolved_at = datetime.utcnow()
        self.status = status

    def to_dict(self, include_parties=False):
        data = {
            'id': self.id,
            'reported_by_id': self.reported_by_id,
            'reported_user_id': self.reported_user_id,
            'request_id': self.request_id,
            'type': self.type.value,
            'title': self.title,
            'description': self.description,
            'status': self.status.value,
            'priority': self.priority.value,
            'admin_response': self.admin_response,
            'handled_by_id': self.handled_by_id,
            'resolved_at': self.resolved_at.isoformat() if self.resolved_at else None,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

        if include_parties:
            data['reported_by'] = self.reported_by.to_dict() if self.reported_by else None
            data['reported_user'] = self.reported_user.to_dict() if self.reported_user else None
            data['handled_by'] = {'id': self.handled_by.id, 'username': self.handled_by.username} \
                if self.handled_by else None

        return data
