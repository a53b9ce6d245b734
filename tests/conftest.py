import pytest

from database.database import RegistrationDatabase
from mastermind import create_app
from mastermind.config import TestConfig


@pytest.fixture
def db(tmp_path):
    return RegistrationDatabase(str(tmp_path / "registrations.db"))


@pytest.fixture
def app(db):
    app = create_app(TestConfig, record_store=db)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
