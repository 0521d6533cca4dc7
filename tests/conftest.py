from datetime import datetime, timedelta

import pytest

from portfolio import create_app
from portfolio.config import TestConfig
from portfolio.services.sessions import SessionStore


class FakeClock:
    """Manually advanced clock for session expiry tests."""

    def __init__(self, start=datetime(2026, 1, 1, 12, 0, 0)):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def session_store(clock):
    return SessionStore(clock=clock)


@pytest.fixture()
def app(session_store):
    return create_app(TestConfig, session_store=session_store)


@pytest.fixture()
def app_context(app):
    with app.app_context():
        yield


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_client(client):
    r = client.post('/admin/login', data={'username': 'admin', 'password': 'secret-pass'})
    assert r.status_code == 302
    return client
