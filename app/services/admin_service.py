"""
Admin Service
One-time bootstrap of the first super-admin
"""

from flask import current_app

from extensions import db
from app.models.admin import Admin, AdminRole, PERMISSIONS
from app.utils.errors import ConflictError, ValidationError


class AdminService:

    @staticmethod
    def admin_exists():
        return db.session.query(Admin.id).first() is not None

    @staticmethod
    def bootstrap_super_admin(username, email, password):
        """
        Create the first admin with every permission

        Refuses with ConflictError once any admin exists, so the HTTP setup
        route and the CLI script disable themselves after first use.
        """
        if AdminService.admin_exists():
            raise ConflictError('Admin already exists')

        if not username or not email or not password:
            raise ValidationError('All fields are required')

        admin = Admin(
            username=username,
            email=email,
            password=password,
            role=AdminRole.SUPER_ADMIN,
            **{name: True for name in PERMISSIONS}
        )
        db.session.add(admin)
        db.session.commit()

        current_app.logger.info('Bootstrapped super admin %s', admin.username)
        return admin
