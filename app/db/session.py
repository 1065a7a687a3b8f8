# app/db/session.py
from functools import lru_cache

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from app.core.config import get_settings


def build_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        return create_engine(database_url, future=True)

    return create_engine(
        database_url,
        poolclass=NullPool,     # OK para Render free y evita conexiones colgadas
        future=True,
        connect_args={
            "options": "-c client_encoding=UTF8"
        },
    )


@lru_cache
def get_engine() -> Engine:
    # Se crea al primer uso, no al importar
    return build_engine(get_settings().database_url)


@lru_cache
def get_sessionmaker() -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine(), future=True)


def get_db():
    """Dependency para FastAPI."""
    db = get_sessionmaker()()
    try:
        yield db
    finally:
        db.close()


def test_db_connection() -> bool:
    """Para /db/ping."""
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
