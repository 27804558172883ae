"""
User Model
"""

from extensions import db, bcrypt
from datetime import datetime


class User(db.Model):
    """Student account that posts and accepts delivery requests"""

    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    # Residential status or similar category tag
    type = db.Column(db.String(50), nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    requests = db.relationship('DeliveryRequest', back_populates='owner', lazy='dynamic',
                               order_by='[DeliveryRequest.created_at, DeliveryRequest.id]',
                               passive_deletes=True)

    def __init__(self, name, email, password, type, **kwargs):
        """Initialize user with hashed password"""
        self.name = name
        self.email = email.strip().lower()
        self.set_password(password)
        self.type = type

        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def set_password(self, password):
        """Hash and set password"""
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        """Verify password against hash"""
        return bcrypt.check_password_hash(self.password_hash, password)

    def toggle_active(self):
        self.is_active = not self.is_active
        return self.is_active

    def to_dict(self, include_email=True, include_requests=False):
        """Convert user to dictionary"""
        data = {
            'id': self.id,
            'name': self.name,
            'type': self.type,
            'is_active': self.is_active,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

        if include_email:
            data['email'] = self.email

        if include_requests:
            data['requests'] = [req.to_dict() for req in self.requests]

        return data

    def __repr__(self):
        return f'<User {self.email}>'
