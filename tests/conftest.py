"""Shared fixtures: an app on in-memory SQLite plus registered users."""

import pytest

from config import TestConfig
from jobboard import create_app
from jobboard.extensions import db
from tests.helpers import register


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def employer(client):
    token, user = register(client, "acme@x.com", "employer", name="Acme HR", company="Acme")
    return {"token": token, "user": user}


@pytest.fixture
def other_employer(client):
    token, user = register(client, "globex@x.com", "employer", name="Globex HR", company="Globex")
    return {"token": token, "user": user}


@pytest.fixture
def seeker(client):
    token, user = register(client, "bob@x.com", "jobseeker", name="Bob")
    return {"token": token, "user": user}


@pytest.fixture
def other_seeker(client):
    token, user = register(client, "carol@x.com", "jobseeker", name="Carol")
    return {"token": token, "user": user}
