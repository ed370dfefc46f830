import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.db.session import create_db_engine, get_db, init_db
from app.main import app
from app.services.moderation_service import get_moderation_client
from tests.fakes import FakeOpenAI, make_moderation_client


@pytest.fixture
def db_engine(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'test.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def fake_openai():
    return FakeOpenAI(replies=["true"])


@pytest.fixture
def client(session_factory, fake_openai):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_moderation_client] = lambda: make_moderation_client(fake_openai)

    yield TestClient(app)

    app.dependency_overrides.clear()
