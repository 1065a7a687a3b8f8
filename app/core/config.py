# app/core/config.py
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


def _load_dotenv_if_exists() -> None:
    """
    Loader simple de .env (sin python-dotenv).
    - Lee el .env en la raíz del proyecto (misma carpeta donde está /app).
    - Solo setea variables que NO existan ya en el entorno.
    """
    root = Path(__file__).resolve().parents[2]
    env_path = root / ".env"
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, val = line.split("=", 1)
        key = key.strip()
        val = val.strip().strip('"').strip("'")
        os.environ.setdefault(key, val)


def normalize_db_url(url: str) -> str:
    # Algunos proveedores usan postgres:// y sin driver
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    if url.startswith("postgresql://") and "+psycopg2" not in url:
        url = url.replace("postgresql://", "postgresql+psycopg2://", 1)
    return url


def _required(name: str) -> str:
    value = (os.getenv(name) or "").strip()
    if not value:
        raise RuntimeError(f"{name} no está definida. Revisa .env o variables de entorno.")
    return value


@dataclass(frozen=True)
class Settings:
    database_url: str
    jwt_secret: str
    api_key: str
    port: int = 3000
    cors_origins: tuple = field(default_factory=tuple)
    api_prefix: str = "/prisma"
    jwt_expires_min: int = 30
    env: str = "local"
    log_level: str = "INFO"

    @property
    def auth_bypass(self) -> bool:
        # Solo para pruebas automatizadas: desactiva API key y token
        return self.env == "test"


@lru_cache
def get_settings() -> Settings:
    _load_dotenv_if_exists()

    cors = os.getenv("CORS_ORIGIN", "")
    prefix = os.getenv("API_PREFIX", "/prisma").strip().rstrip("/")

    return Settings(
        database_url=normalize_db_url(_required("DATABASE_URL")),
        jwt_secret=_required("JWT_SECRET"),
        api_key=_required("API_KEY"),
        port=int(os.getenv("PORT", "3000")),
        cors_origins=tuple(o.strip() for o in cors.split(",") if o.strip()),
        api_prefix=prefix,
        jwt_expires_min=int(os.getenv("JWT_EXPIRES_MIN", "30")),
        env=os.getenv("ENV", "local").strip().lower(),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
