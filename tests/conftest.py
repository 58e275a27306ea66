import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# app.py exits without a secret key, so set the environment before import
os.environ.setdefault('FLASK_SECRET_KEY', 'test-secret-key')
os.environ['SESSION_COOKIE_SECURE'] = 'false'
os.environ['WTF_CSRF_ENABLED'] = 'false'

from state import Orchestrator  # noqa: E402


@pytest.fixture
def orchestrator():
    return Orchestrator()


@pytest.fixture
def flask_app():
    import app as app_module
    app_module.app.config.update(
        TESTING=True,
        WTF_CSRF_ENABLED=False,
        SESSION_COOKIE_SECURE=False
    )
    with app_module.app.app_context():
        app_module.cache.clear()
        app_module.state_store.clear()
    yield app_module.app


@pytest.fixture
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture
def logged_in_client(client):
    client.post('/login')
    return client
