import pytest
from flask import g

from app.models import AdminRole, PERMISSIONS
from app.utils.decorators import check_permission, require_super_admin
from app.utils.errors import AuthenticationError, AuthorizationError


@check_permission('manage_users')
def guarded():
    return 'ok'


@require_super_admin()
def super_only():
    return 'ok'


class TestGates:

    def test_permission_gate_without_session(self, app):
        with app.test_request_context():
            with pytest.raises(AuthenticationError):
                guarded()

    def test_super_admin_gate_without_session(self, app):
        with app.test_request_context():
            with pytest.raises(AuthenticationError):
                super_only()

    def test_unknown_permission_is_denied(self, app, make_admin):
        admin = make_admin()
        with app.test_request_context():
            g.current_admin = admin
            with pytest.raises(AuthorizationError):
                check_permission('launch_rockets')(lambda: 'ok')()

    def test_super_admin_passes_unknown_permission(self, app, super_admin):
        with app.test_request_context():
            g.current_admin = super_admin
            assert check_permission('launch_rockets')(lambda: 'ok')() == 'ok'


class TestAdminUsersPermission:

    def test_admin_without_flag_is_forbidden(self, client, make_admin, admin_headers):
        admin = make_admin(manage_users=False)

        response = client.get('/admin/users', headers=admin_headers(admin))

        assert response.status_code == 403
        assert response.get_json()['kind'] == 'AuthorizationError'

    def test_admin_with_flag_is_allowed(self, client, make_admin, admin_headers):
        admin = make_admin(manage_users=True)

        response = client.get('/admin/users', headers=admin_headers(admin))

        assert response.status_code == 200

    def test_super_admin_ignores_flags(self, client, make_admin, admin_headers):
        admin = make_admin(role=AdminRole.SUPER_ADMIN, **{name: False for name in PERMISSIONS})

        for path in ('/admin/users', '/admin/requests', '/admin/complaints', '/admin/dashboard/stats'):
            assert client.get(path, headers=admin_headers(admin)).status_code == 200

    @pytest.mark.parametrize('flag,path', [
        ('manage_requests', '/admin/requests'),
        ('handle_complaints', '/admin/complaints'),
        ('view_analytics', '/admin/dashboard/stats'),
    ])
    def test_each_route_checks_its_flag(self, client, make_admin, admin_headers, flag, path):
        admin = make_admin(**{flag: False})
        assert client.get(path, headers=admin_headers(admin)).status_code == 403

    def test_delete_user_requires_super_admin(self, client, make_admin, make_user, admin_headers):
        admin = make_admin(**{name: True for name in PERMISSIONS})
        user = make_user()

        response = client.delete(f'/admin/users/{user.id}', headers=admin_headers(admin))

        assert response.status_code == 403
        assert response.get_json()['message'] == 'Super admin access required.'

    def test_user_token_is_not_an_admin_token(self, client, make_user, user_headers):
        response = client.get('/admin/users', headers=user_headers(make_user()))
        assert response.status_code == 401

    def test_no_token(self, client):
        response = client.get('/admin/users')
        assert response.status_code == 401
