import os
import sys
import pytest

# Ensure the backend root (containing the `arcade` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from arcade import create_app, db, socketio, seed_defaults
from arcade.services.accounts import get_accounts


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Minimum bcrypt cost keeps the suite fast
    BCRYPT_LOG_ROUNDS = 4
    TOKEN_TTL_SEC = 7 * 24 * 60 * 60
    LEADERBOARD_SIZE = 10
    ADMIN_USERNAME = 'admin'
    ADMIN_EMAIL = 'admin@ashura.games'
    ADMIN_PASSWORD = 'admin123'
    SEED_ON_STARTUP = False


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import arcade.models  # noqa: F401
        db.create_all()
        seed_defaults(application)
    # No app context stays pushed around test-client requests, so each request
    # gets its own `g` (Flask-Login caches the current user there).
    yield application
    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def accounts(flask_app):
    with flask_app.app_context():
        yield get_accounts()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')


@pytest.fixture()
def signup(client):
    """Register and log in through the API; returns (token, user dict)."""
    def _signup(username, password='password123', email=None):
        email = email or f'{username}@example.com'
        res = client.post('/api/auth/register', json={'username': username, 'email': email, 'password': password})
        assert res.status_code == 201, res.get_json()
        res = client.post('/api/auth/login', json={'username': username, 'password': password})
        assert res.status_code == 200, res.get_json()
        body = res.get_json()
        return body['token'], body['user']
    return _signup


@pytest.fixture()
def admin_token(client):
    res = client.post('/api/auth/login', json={'username': 'admin', 'password': 'admin123'})
    assert res.status_code == 200
    return res.get_json()['token']
