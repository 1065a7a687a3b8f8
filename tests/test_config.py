import pytest

from app.core.config import get_settings, normalize_db_url


@pytest.fixture
def fresh_settings(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.setenv("DATABASE_URL", "postgres://u:p@localhost:5432/colegio")
    monkeypatch.setenv("JWT_SECRET", "s")
    monkeypatch.setenv("API_KEY", "k")
    yield monkeypatch
    get_settings.cache_clear()


def test_reads_environment(fresh_settings):
    fresh_settings.setenv("CORS_ORIGIN", "http://localhost:5173, https://colegio.edu.pe")
    fresh_settings.setenv("PORT", "4000")
    fresh_settings.setenv("ENV", "test")

    s = get_settings()
    assert s.database_url == "postgresql+psycopg2://u:p@localhost:5432/colegio"
    assert s.cors_origins == ("http://localhost:5173", "https://colegio.edu.pe")
    assert s.port == 4000
    assert s.jwt_expires_min == 30
    assert s.auth_bypass is True


@pytest.mark.parametrize("missing", ["JWT_SECRET", "API_KEY", "DATABASE_URL"])
def test_missing_required_is_fatal(fresh_settings, missing):
    fresh_settings.delenv(missing)
    with pytest.raises(RuntimeError, match=missing):
        get_settings()


def test_bypass_only_in_test_env(fresh_settings):
    fresh_settings.setenv("ENV", "production")
    assert get_settings().auth_bypass is False


def test_normalize_db_url():
    assert normalize_db_url("postgresql://a/b") == "postgresql+psycopg2://a/b"
    assert normalize_db_url("postgresql+psycopg2://a/b") == "postgresql+psycopg2://a/b"
    assert normalize_db_url("sqlite://") == "sqlite://"
