import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from taskboard.config import Settings
from taskboard.database import Database, build_engine
from taskboard.main import create_app

TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def database() -> Database:
    engine = build_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    database = Database(engine)
    database.create_all()
    try:
        yield database
    finally:
        engine.dispose()


@pytest.fixture
def db_session(database: Database) -> Session:
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, DATABASE_URL=TEST_DATABASE_URL, LOG_LEVEL="WARNING")


@pytest.fixture
def client(settings: Settings, database: Database) -> TestClient:
    app = create_app(settings=settings, database=database)
    with TestClient(app) as test_client:
        yield test_client
