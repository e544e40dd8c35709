import os

import pytest
from fastapi.testclient import TestClient

# Tests run against in-memory SQLite unless a real DSN is exported
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("OPENAI_API_KEY", "")

from apps.api.main import create_app  # noqa: E402
from apps.core.db import Database  # noqa: E402
from apps.places.models import Place  # noqa: E402

USER_ID = 1
OTHER_USER_ID = 2


@pytest.fixture
def database():
    db = Database(url="sqlite+pysqlite:///:memory:", echo=False)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    s = database.session()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def client(database):
    app = create_app(database=database)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth():
    return {"X-User-Id": str(USER_ID)}


@pytest.fixture
def other_auth():
    return {"X-User-Id": str(OTHER_USER_ID)}


@pytest.fixture
def make_place(session):
    """Insert a place directly; returns its id."""

    def _make(name="Place", user_id=USER_ID, **fields):
        place = Place(user_id=user_id, name=name, **fields)
        session.add(place)
        session.commit()
        return place.id

    return _make
