from datetime import timedelta

import pytest
from flask_jwt_extended import create_access_token

from lifelink.commands import DEMO_PASSWORD, seed_demo_accounts
from lifelink.models import Donor


def register_donor(client, **overrides):
    body = {'email': 'Ada@Example.com ', 'password': 's3cret-pass', 'name': 'Ada', 'type': 'donor',
            'bloodType': 'a-'}
    body.update(overrides)
    return client.post('/api/auth/register', json=body)


def test_register_donor_hashes_password(client, app):
    resp = register_donor(client)
    assert resp.status_code == 201
    data = resp.get_json()
    assert data['success'] is True
    assert data['user'] == {'id': 1, 'name': 'Ada', 'email': 'ada@example.com', 'type': 'donor',
                            'bloodType': 'A-'}

    donor = Donor.query.filter_by(email='ada@example.com').one()
    assert donor.password != 's3cret-pass'


def test_register_hospital(client):
    resp = client.post('/api/auth/register', json={
        'email': 'er@memorial.org', 'password': 'pw123456', 'name': 'Memorial Hospital',
        'type': 'hospital', 'location': ' 123 Medical Ave '
    })
    assert resp.status_code == 201
    assert resp.get_json()['user']['location'] == '123 Medical Ave'


@pytest.mark.parametrize('overrides,message', [
    ({'password': None}, 'Missing required fields'),
    ({'name': ''}, 'Missing required fields'),
    ({'type': 'nurse'}, 'Invalid user type'),
    ({'bloodType': 'Q'}, 'A valid blood type is required for donors'),
])
def test_register_validation(client, overrides, message):
    resp = register_donor(client, **overrides)
    assert resp.status_code == 400
    assert resp.get_json() == {'error': message}


def test_register_hospital_requires_location(client):
    resp = register_donor(client, type='hospital', bloodType=None)
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'Location is required for hospitals'}


def test_register_duplicate_email(client):
    assert register_donor(client).status_code == 201
    resp = register_donor(client)
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'Email is already in use'}


def test_login_success_sets_token_cookie(client):
    register_donor(client)
    resp = client.post('/api/auth/login', json={'email': ' ADA@example.com', 'password': 's3cret-pass',
                                                'userType': 'donor'})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data['success'] is True
    assert data['token']
    assert data['user']['email'] == 'ada@example.com'
    assert 'password' not in data['user']

    cookies = resp.headers.getlist('Set-Cookie')
    assert any(c.startswith('lifelink_token=') and 'HttpOnly' in c for c in cookies)


def test_login_missing_password(client):
    resp = client.post('/api/auth/login', json={'email': 'ada@example.com'})
    assert resp.status_code == 400
    assert resp.get_json() == {'success': False, 'message': 'Email and password are required'}


def test_login_non_object_body(client):
    resp = client.post('/api/auth/login', json='ada')
    assert resp.status_code == 400
    assert resp.get_json()['message'] == 'Invalid request body'


def test_login_bad_credentials(client):
    register_donor(client)
    resp = client.post('/api/auth/login', json={'email': 'ada@example.com', 'password': 'wrong'})
    assert resp.status_code == 401
    assert resp.get_json() == {'success': False, 'message': 'Invalid credentials'}

    resp = client.post('/api/auth/login', json={'email': 'nobody@example.com', 'password': 'x'})
    assert resp.status_code == 401


def test_login_checks_the_table_for_the_user_type(client):
    register_donor(client)
    resp = client.post('/api/auth/login', json={'email': 'ada@example.com', 'password': 's3cret-pass',
                                                'userType': 'hospital'})
    assert resp.status_code == 401


def test_accounts_variant_uses_users_and_admins(client, app):
    seed_demo_accounts()
    app.config['LOGIN_VARIANT'] = 'accounts'

    resp = client.post('/api/auth/login', json={'email': 'admin@example.com', 'password': DEMO_PASSWORD,
                                                'userType': 'admin'})
    assert resp.status_code == 200
    assert resp.get_json()['user']['type'] == 'admin'

    resp = client.post('/api/auth/login', json={'email': 'user@example.com', 'password': DEMO_PASSWORD})
    assert resp.status_code == 200
    assert resp.get_json()['user']['type'] == 'user'

    # donors are not consulted in this variant
    resp = client.post('/api/auth/login', json={'email': 'donor@example.com', 'password': DEMO_PASSWORD})
    assert resp.status_code == 401


def test_session_without_token_returns_demo_donor(client):
    resp = client.get('/api/auth/session')
    assert resp.status_code == 200
    assert resp.get_json()['user']['name'] == 'John Donor'


def test_session_follows_login_and_logout(client):
    register_donor(client)
    token = client.post('/api/auth/login', json={'email': 'ada@example.com',
                                                 'password': 's3cret-pass'}).get_json()['token']

    resp = client.get('/api/auth/session')
    assert resp.get_json()['user']['email'] == 'ada@example.com'

    resp = client.post('/api/auth/logout')
    assert resp.status_code == 200
    resp = client.get('/api/auth/session')
    assert resp.get_json()['user']['name'] == 'John Donor'

    resp = client.get('/api/auth/session', headers={'Authorization': f'Bearer {token}'})
    assert resp.get_json()['user']['email'] == 'ada@example.com'


def test_seed_demo_is_idempotent(app):
    assert len(seed_demo_accounts()) == 4
    assert seed_demo_accounts() == []


def test_seed_demo_cli(app):
    result = app.test_cli_runner().invoke(args=['seed-demo', '--password', 'pw'])
    assert result.exit_code == 0
    assert '4 demo account(s) created.' in result.output


@pytest.mark.parametrize('headers', [
    {'Authorization': 'Bearer not-a-jwt'},
    {'Authorization': 'Basic dXNlcjpwdw=='},
])
def test_session_ignores_unusable_header_tokens(client, headers):
    resp = client.get('/api/auth/session', headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()['user']['name'] == 'John Donor'


def test_session_ignores_stale_cookies(client, app):
    client.set_cookie(app.config['JWT_ACCESS_COOKIE_NAME'], 'fake-jwt-token-for-demo')
    client.set_cookie('session', 'fake-jwt-token-for-demo')
    resp = client.get('/api/auth/session')
    assert resp.status_code == 200
    assert resp.get_json()['user']['name'] == 'John Donor'


def test_session_ignores_expired_token(client):
    register_donor(client)
    token = create_access_token(identity='donors:1', expires_delta=timedelta(seconds=-1))
    resp = client.get('/api/auth/session', headers={'Authorization': f'Bearer {token}'})
    assert resp.status_code == 200
    assert resp.get_json()['user']['name'] == 'John Donor'


def test_session_for_deleted_account_falls_back_to_demo(client):
    token = create_access_token(identity='donors:99')
    resp = client.get('/api/auth/session', headers={'Authorization': f'Bearer {token}'})
    assert resp.status_code == 200
    assert resp.get_json()['user']['name'] == 'John Donor'
