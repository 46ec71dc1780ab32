import pytest
from fastapi.testclient import TestClient

from wiremit.core.config import Settings
from wiremit.db.dal import Database
from wiremit.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        db_path=tmp_path / "test.sqlite3",
        rate_provider="static",
        transactions_seed=7,
        debug=False,
    )


@pytest.fixture
def app(settings):
    return create_app(settings_override=settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app, settings):
    # app fixture creates the schema
    return Database(settings.db_path, users_record_key=settings.users_record_key)
