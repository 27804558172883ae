"""
Delivery Request Model
"""

from extensions import db
from datetime import datetime
from enum import Enum


class RequestStatus(str, Enum):
    """Delivery request status enum"""
    ACTIVE = 'active'
    ACCEPTED = 'accepted'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'


class DeliveryRequest(db.Model):
    """Item a student wants picked up and delivered"""

    __tablename__ = 'requests'

    id = db.Column(db.Integer, primary_key=True)
    owner_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'),
                         nullable=False, index=True)

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    status = db.Column(db.Enum(RequestStatus, values_callable=lambda e: [m.value for m in e]),
                       default=RequestStatus.ACTIVE, nullable=False, index=True)
    category = db.Column(db.String(50), default='general', nullable=False)
    location = db.Column(db.String(255), default='', nullable=False)

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = db.relationship('User', back_populates='requests')

    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def accept(self):
        self.status = RequestStatus.ACCEPTED

    def complete(self):
        self.status = RequestStatus.COMPLETED

    def to_dict(self, include_owner=False):
        """Convert request to dictionary"""
        data = {
            'id': self.id,
            'owner_id': self.owner_id,
            'title': self.title,
            'description': self.description,
            'price': float(self.price) if self.price is not None else None,
            'status': self.status.value if self.status else None,
            'category': self.category,
            'location': self.location,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

        if include_owner:
            data['owner'] = self.owner.to_dict() if self.owner else None

        return data

    def __repr__(self):
        return f'<DeliveryRequest {self.id} - {self.title}>'
