import pytest

from app.services.auth import InvalidCredentials, authenticate, check_admin_credentials, get_user
from app.services.supabase import BackendError


def test_authenticate_matches_exactly_one_user(backend, candidate):
    user = authenticate(backend, 'jane', 'secret')

    assert user.id == candidate['id']
    assert user.full_name == 'Jane Doe'


@pytest.mark.parametrize('username,password', [
    ('jane', 'wrong'),
    ('nobody', 'secret'),
])
def test_authenticate_rejects_no_match(backend, candidate, username, password):
    with pytest.raises(InvalidCredentials):
        authenticate(backend, username, password)


def test_authenticate_rejects_duplicate_matches(backend, candidate):
    backend.insert('users', {'username': 'jane', 'password': 'secret',
                             'email': 'other@example.com', 'full_name': 'Other Jane'})

    with pytest.raises(InvalidCredentials):
        authenticate(backend, 'jane', 'secret')


def test_authenticate_surfaces_backend_errors(backend, candidate):
    backend.fail('select', 'users')

    with pytest.raises(BackendError):
        authenticate(backend, 'jane', 'secret')


def test_get_user_missing_returns_none(backend):
    assert get_user(backend, 'missing') is None


def test_admin_credentials():
    config = {'ADMIN_USERNAME': 'admin', 'ADMIN_PASSWORD': 'pw'}

    assert check_admin_credentials(config, 'admin', 'pw')
    assert not check_admin_credentials(config, 'admin', 'nope')
    assert not check_admin_credentials({'ADMIN_USERNAME': 'admin', 'ADMIN_PASSWORD': ''}, 'admin', '')


def test_login_sets_current_user(client, candidate):
    response = client.post('/login', data={'username': 'jane', 'password': 'secret'})

    assert response.status_code == 302
    assert response.headers['Location'].endswith('/opportunities')
    page = client.get('/opportunities').get_data(as_text=True)
    assert 'Jane Doe' in page
    assert 'Congratulations on Your Qualification!' in page


def test_login_failure_shows_generic_message(client, candidate):
    response = client.post('/login', data={'username': 'jane', 'password': 'wrong'})

    assert response.status_code == 401
    assert 'Invalid username or password' in response.get_data(as_text=True)


def test_login_backend_error_shows_same_message(client, backend, candidate):
    backend.fail('select', 'users')

    response = client.post('/login', data={'username': 'jane', 'password': 'secret'})

    assert response.status_code == 401
    assert 'Invalid username or password' in response.get_data(as_text=True)


def test_logout_clears_user(logged_in):
    logged_in.get('/logout')

    page = logged_in.get('/opportunities').get_data(as_text=True)
    assert 'Log in to View Available Opportunities' in page


def test_deleted_user_session_becomes_anonymous(logged_in, backend):
    backend.tables['users'].clear()

    page = logged_in.get('/opportunities').get_data(as_text=True)
    assert 'Log in to View Available Opportunities' in page


def test_backend_error_on_session_restore_becomes_anonymous(logged_in, backend):
    backend.fail('select', 'users')

    page = logged_in.get('/opportunities').get_data(as_text=True)
    assert 'Log in to View Available Opportunities' in page


def test_index_redirects_to_opportunities(client):
    response = client.get('/')

    assert response.status_code == 302
    assert response.headers['Location'].endswith('/opportunities')
