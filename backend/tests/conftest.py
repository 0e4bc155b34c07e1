import os
import sys
import pytest

# Ensure the backend root (containing the `arcade` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from arcade import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    ADMIN_KEY = ''
    LEADERBOARD_GAMES = ('fruit', 'flappy', 'potato')
    # One in-memory connection is shared, so keep fan-out inline
    LEADERBOARD_MAX_WORKERS = 1
    CORS_ORIGINS = ('*',)
    AUTO_CREATE_TABLES = False
    MAX_CONTENT_LENGTH = 10 * 1024


class AdminKeyConfig(TestConfig):
    ADMIN_KEY = 's3cret'


def _build_app(config_class):
    application = create_app(config_class)
    with application.app_context():
        # Ensure models are imported so tables are created
        import arcade.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def flask_app():
    yield from _build_app(TestConfig)


@pytest.fixture()
def keyed_app():
    yield from _build_app(AdminKeyConfig)


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def keyed_client(keyed_app):
    return keyed_app.test_client()


@pytest.fixture()
def submit(client):
    """Post a score and return the response."""
    def _submit(game, score, name='Tester'):
        return client.post(f'/api/leaderboards/{game}', json={'name': name, 'score': score})
    return _submit


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
