import os

# Force the in-memory SQLite engine before judging.db.database is imported
os.environ.setdefault("PYTEST_RUNNING", "1")

import pytest
from fastapi.testclient import TestClient

from judging.api.main import app
from judging.db import models
from judging.db.database import SessionLocal, engine


# Per-test schema: create before, drop after (fast enough on in-memory SQLite)
@pytest.fixture(autouse=True)
def db_session():
    models.Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        models.Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)
