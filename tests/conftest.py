# Test configuration and fixtures
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app import create_app
from extensions import db
from app.models import Admin, AdminRole, DeliveryRequest, User
from app.utils.tokens import issue_admin_token, issue_user_token


@pytest.fixture
def app():
    """Fresh application with an empty in-memory database"""
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    def _make_user(name='Student', email='student@campus.edu', password='secret123',
                   type='hosteller', is_active=True):
        user = User(name=name, email=email, password=password, type=type, is_active=is_active)
        db.session.add(user)
        db.session.commit()
        return user
    return _make_user


@pytest.fixture
def make_admin(app):
    def _make_admin(username='moderator', email='moderator@campuskart.com', password='admin123',
                    role=AdminRole.ADMIN, **permissions):
        admin = Admin(username=username, email=email, password=password, role=role, **permissions)
        db.session.add(admin)
        db.session.commit()
        return admin
    return _make_admin


@pytest.fixture
def make_request(app):
    def _make_request(owner, title='Milk', description='One litre, toned', price=20, **kwargs):
        delivery_request = DeliveryRequest(owner_id=owner.id, title=title,
                                           description=description, price=price, **kwargs)
        db.session.add(delivery_request)
        db.session.commit()
        return delivery_request
    return _make_request


@pytest.fixture
def user_headers(app):
    def _headers(user):
        return {'Authorization': f'Bearer {issue_user_token(user)}'}
    return _headers


@pytest.fixture
def admin_headers(app):
    def _headers(admin):
        return {'Authorization': f'Bearer {issue_admin_token(admin)}'}
    return _headers


@pytest.fixture
def super_admin(make_admin):
    return make_admin(username='root', email='root@campuskart.com', role=AdminRole.SUPER_ADMIN)
