import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from database import get_db, init_db
from main import app


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'users.db'}",
        connect_args={"check_same_thread": False}
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(engine):
    def override_get_db():
        db = engine.connect()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_user(engine):
    def _add(user_id, username, password="secret"):
        with engine.begin() as conn:
            conn.exec_driver_sql(
                "INSERT INTO users (id, username, password) VALUES (?, ?, ?)",
                (user_id, username, password)
            )
    return _add
