from app.models import DeliveryRequest, RequestStatus


class TestUserRequests:

    def test_create_request(self, client, make_user, user_headers):
        user = make_user()

        response = client.post('/api/requests', headers=user_headers(user), json={
            'title': 'Milk', 'description': 'One litre', 'price': 20, 'location': 'Hostel B',
        })

        assert response.status_code == 201
        body = response.get_json()['request']
        assert body['status'] == 'active'
        assert body['price'] == 20.0
        assert body['category'] == 'general'
        assert body['location'] == 'Hostel B'
        assert body['owner_id'] == user.id

    def test_create_request_validates_price(self, client, make_user, user_headers):
        headers = user_headers(make_user())

        for price in ('free', -1):
            response = client.post('/api/requests', headers=headers, json={
                'title': 'Milk', 'description': 'One litre', 'price': price,
            })
            assert response.status_code == 400

        assert DeliveryRequest.query.count() == 0

    def test_create_request_requires_fields(self, client, make_user, user_headers):
        response = client.post('/api/requests', headers=user_headers(make_user()),
                               json={'title': 'Milk'})

        assert response.status_code == 400
        assert response.get_json()['message'] == 'description is required'

    def test_list_own_requests_only(self, client, make_user, make_request, user_headers):
        me = make_user(email='me@x.com')
        other = make_user(email='other@x.com')
        make_request(me, title='Bread')
        make_request(me, title='Eggs')
        make_request(other, title='Tea')

        body = client.get('/api/requests', headers=user_headers(me)).get_json()

        assert [req['title'] for req in body['requests']] == ['Bread', 'Eggs']

    def test_profile_includes_requests(self, client, make_user, make_request, user_headers):
        me = make_user()
        make_request(me, title='Bread')

        body = client.get('/api/user', headers=user_headers(me)).get_json()

        assert [req['title'] for req in body['user']['requests']] == ['Bread']

    def test_all_requests_include_owner(self, client, make_user, make_request, user_headers):
        me = make_user(email='me@x.com')
        other = make_user(name='Kiran', email='kiran@x.com')
        make_request(other, title='Tea')

        body = client.get('/api/allrequests', headers=user_headers(me)).get_json()

        assert body['requests'][0]['owner']['name'] == 'Kiran'

    def test_open_request_marks_accepted(self, client, make_user, make_request, user_headers):
        owner = make_user(email='owner@x.com')
        helper = make_user(email='helper@x.com')
        delivery_request = make_request(owner)

        response = client.get(f'/api/requests/{delivery_request.id}', headers=user_headers(helper))

        assert response.status_code == 200
        assert response.get_json()['request']['status'] == 'accepted'
        assert delivery_request.status == RequestStatus.ACCEPTED

    def test_open_missing_request(self, client, make_user, user_headers):
        response = client.get('/api/requests/404', headers=user_headers(make_user()))

        assert response.status_code == 404


class TestAdminRequests:

    def test_complete_and_delete(self, client, make_user, make_request, make_admin, admin_headers):
        admin = make_admin()
        delivery_request = make_request(make_user())
        request_id = delivery_request.id

        response = client.patch(f'/admin/requests/{request_id}/complete', headers=admin_headers(admin))
        assert response.status_code == 200
        assert response.get_json()['request']['status'] == 'completed'

        response = client.delete(f'/admin/requests/{request_id}', headers=admin_headers(admin))
        assert response.status_code == 200
        assert DeliveryRequest.query.count() == 0

    def test_complete_missing_request(self, client, make_admin, admin_headers):
        response = client.patch('/admin/requests/99/complete', headers=admin_headers(make_admin()))
        assert response.status_code == 404

    def test_search_title_or_description(self, client, make_user, make_request,
                                         super_admin, admin_headers):
        owner = make_user()
        make_request(owner, title='Milk', description='toned')
        make_request(owner, title='Bread', description='brown, and some milk powder')
        make_request(owner, title='Tea', description='green')

        body = client.get('/admin/requests?search=MILK', headers=admin_headers(super_admin)).get_json()

        assert body['total'] == 2


def test_register_post_and_moderate_end_to_end(client, super_admin, admin_headers):
    response = client.post('/api/register', json={
        'name': 'A', 'email': 'a@x.com', 'password': 'secret123', 'type': 'hosteller',
    })
    user_auth = {'Authorization': f"Bearer {response.get_json()['token']}"}

    response = client.post('/api/requests', headers=user_auth, json={
        'title': 'Milk', 'description': 'One litre', 'price': 20,
    })
    request_id = response.get_json()['request']['id']

    admin_auth = admin_headers(super_admin)

    def listed(status):
        body = client.get(f'/admin/requests?status={status}', headers=admin_auth).get_json()
        return [req['id'] for req in body['requests']]

    assert request_id in listed('active')

    response = client.patch(f'/admin/requests/{request_id}/complete', headers=admin_auth)
    assert response.status_code == 200

    assert request_id in listed('completed')
    assert request_id not in listed('active')


class TestMalformedRequestBodies:

    def test_non_object_body(self, client, make_user, user_headers):
        response = client.post('/api/requests', headers=user_headers(make_user()), json=['x'])

        assert response.status_code == 400
        assert response.get_json()['kind'] == 'ValidationError'

    def test_non_string_fields(self, client, make_user, user_headers):
        headers = user_headers(make_user())
        base = {'title': 'Milk', 'description': 'One litre', 'price': 20}

        for field, value in [('title', 5), ('description', ['x']),
                             ('category', {'a': 1}), ('location', 7), ('price', {'v': 1})]:
            response = client.post('/api/requests', headers=headers, json={**base, field: value})
            assert response.status_code == 400, field
            assert response.get_json()['kind'] == 'ValidationError'

        assert DeliveryRequest.query.count() == 0
