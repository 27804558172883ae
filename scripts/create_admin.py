"""
Script to create the first super admin
Usage: python scripts/create_admin.py --username admin --email admin@campuskart.com --password <password>
"""

import argparse
import sys
import os

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import create_app
from app.models.admin import Admin
from app.services.admin_service import AdminService
from app.utils.errors import APIError


def create_admin(username, email, password):
    """Create the first super admin; refuses if any admin exists"""
    app = create_app()

    with app.app_context():
        if AdminService.admin_exists():
            existing = Admin.query.first()
            print("❌ Admin already exists!")
            print(f"   Username: {existing.username}")
            print(f"   Email: {existing.email}")
            return False

        try:
            admin = AdminService.bootstrap_super_admin(username, email, password)
        except APIError as e:
            print(f"❌ {e.message}")
            return False

        print("✅ Super admin created successfully!")
        print(f"   Username: {admin.username}")
        print(f"   Email: {admin.email}")
        print(f"   Role: {admin.role.value}")
        print("⚠️  Change the password if it was shared or defaulted.")
        return True


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Create the first CampusKart super admin')
    parser.add_argument('--username', default='admin')
    parser.add_argument('--email', default='admin@campuskart.com')
    parser.add_argument('--password', required=True)
    args = parser.parse_args()

    sys.exit(0 if create_admin(args.username, args.email, args.password) else 1)
