# Crea las tablas (si faltan) y carga los datos base:
# tipos de post, usuario admin y videos iniciales.
import logging

import app.models  # noqa: F401  (registra los modelos en Base.metadata)
from app.db.base import Base
from app.db.session import get_engine, get_sessionmaker
from app.services.seed import run_seed


def main():
    logging.basicConfig(level=logging.INFO)

    Base.metadata.create_all(bind=get_engine())

    db = get_sessionmaker()()
    try:
        created = run_seed(db)
    finally:
        db.close()

    print("OK: seed aplicado:", created)


if __name__ == "__main__":
    main()
