import os

# Antes de importar app.main: la app se crea al importar y exige estas variables
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-key-12345")
os.environ.setdefault("API_KEY", "test-api-key-12345")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.core.config import Settings, get_settings
from app.core.security import hash_password, issue_token_for
from app.db.base import Base
from app.db.session import get_db
from app.main import create_app
from app.models import PostType, User

API_KEY = "test-api-key-12345"
JWT_SECRET = "test-secret-key-12345"
PREFIX = "/prisma"


def make_settings(**overrides) -> Settings:
    values = dict(
        database_url="sqlite://",
        jwt_secret=JWT_SECRET,
        api_key=API_KEY,
        api_prefix=PREFIX,
        env="local",
    )
    values.update(overrides)
    return Settings(**values)


def headers(token=None, api_key=API_KEY) -> dict:
    h = {}
    if api_key is not None:
        h["x-api-key"] = api_key
    if token is not None:
        h["Authorization"] = f"Bearer {token}"
    return h


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def post_types(db):
    types = {}
    for name in ("evento", "blog", "comunicado"):
        pt = PostType(name=name)
        db.add(pt)
        db.flush()
        types[name] = pt.id
    db.commit()
    return types


def _make_user(db, username, email, password, is_admin=False) -> User:
    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        is_admin=is_admin,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin_user(db):
    return _make_user(db, "admin", "admin@mail.com", "admin123", is_admin=True)


@pytest.fixture
def normal_user(db):
    return _make_user(db, "testuser", "test@example.com", "Password123")


@pytest.fixture
def other_user(db):
    return _make_user(db, "otro", "otro@example.com", "Password123")


@pytest.fixture
def admin_token(admin_user):
    return issue_token_for(admin_user, JWT_SECRET, 30)


@pytest.fixture
def user_token(normal_user):
    return issue_token_for(normal_user, JWT_SECRET, 30)


@pytest.fixture
def other_token(other_user):
    return issue_token_for(other_user, JWT_SECRET, 30)


def _build_client(session_factory, settings: Settings) -> TestClient:
    application = create_app(settings)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_settings] = lambda: settings
    return TestClient(application)


@pytest.fixture
def client(session_factory):
    with _build_client(session_factory, make_settings()) as c:
        yield c


@pytest.fixture
def bypass_client(session_factory):
    with _build_client(session_factory, make_settings(env="test")) as c:
        yield c
