import os
import sys
from datetime import timedelta

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
    CORS_ALLOWED_ORIGINS = ['*']
    RATE_LIMIT_WINDOW_SEC = 3600
    MAX_SUBMISSIONS_PER_WINDOW = 10
    ROUND_DURATION_SEC = 30
    SPAWN_INTERVAL_MS = 800
    MAX_COMBO_MULTIPLIER = 5
    LEADERBOARD_DEFAULT_LIMIT = 10


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import arcade.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


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


@pytest.fixture()
def add_entries(flask_app):
    """Insert ``count`` rows for a wallet, ``age`` before now."""
    from arcade.models import LeaderboardEntry, utcnow

    def _add(wallet_address, count, age=timedelta(minutes=1), score=100):
        created_at = utcnow() - age
        for _ in range(count):
            db.session.add(LeaderboardEntry(
                wallet_address=wallet_address,
                score=score,
                created_at=created_at,
            ))
        db.session.commit()

    return _add
