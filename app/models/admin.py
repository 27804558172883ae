"""
Admin Model
"""

from extensions import db, bcrypt
from datetime import datetime
from enum import Enum


class AdminRole(str, Enum):
    """Admin roles enum"""
    ADMIN = 'admin'
    SUPER_ADMIN = 'super-admin'


PERMISSIONS = (
    'manage_users',
    'manage_requests',
    'handle_complaints',
    'view_analytics',
    'system_settings',
)


class Admin(db.Model):
    """Staff account for the moderation panel"""

    __tablename__ = 'admins'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    role = db.Column(db.Enum(AdminRole, values_callable=lambda e: [m.value for m in e]),
                     default=AdminRole.ADMIN, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    last_login = db.Column(db.DateTime)

    # Permission flags
    manage_users = db.Column(db.Boolean, default=True, nullable=False)
    manage_requests = db.Column(db.Boolean, default=True, nullable=False)
    handle_complaints = db.Column(db.Boolean, default=True, nullable=False)
    view_analytics = db.Column(db.Boolean, default=True, nullable=False)
    system_settings = db.Column(db.Boolean, default=False, nullable=False)

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __init__(self, username, email, password, **kwargs):
        """Initialize admin with hashed password"""
        self.username = username.strip()
        self.email = email.strip().lower()
        self.set_password(password)

        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def set_password(self, password):
        """Hash and set password"""
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        """Verify password against hash"""
        return bcrypt.check_password_hash(self.password_hash, password)

    def has_permission(self, name):
        """True if the named flag is set; unknown names are never granted"""
        if name not in PERMISSIONS:
            return False
        return bool(getattr(self, name))

    @property
    def permissions(self):
        return {name: bool(getattr(self, name)) for name in PERMISSIONS}

    @property
    def is_super_admin(self):
        return self.role == AdminRole.SUPER_ADMIN

    def update_last_login(self):
        """Update last login timestamp"""
        self.last_login = datetime.utcnow()
        db.session.commit()

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'role': self.role.value,
            'is_active': self.is_active,
            'permissions': self.permissions,
            'last_login': self.last_login.isoformat() if self.last_login else None,
        }

    def __repr__(self):
        return f'<Admin {self.username}>'
