# app/services/seed.py
import logging

from sqlalchemy.orm import Session

from app.core.security import hash_password
from app.models.enlaces import Video
from app.models.posts import POST_TYPES, PostType
from app.models.usuarios import User

logger = logging.getLogger(__name__)

ADMIN_EMAIL = "admin@mail.com"
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"

VIDEOS = [
    ("https://www.youtube.com/embed/K5o7U1WrJXc?autoplay=1&rel=0&modestbranding=1", "home"),
    ("https://www.youtube.com/embed/QEpJy9eiqX4", "blog"),
    ("https://www.youtube.com/embed/FOt91LmV_fY", "blog"),
    ("https://www.youtube.com/embed/Ic8EgWhbA9U", "blog"),
]


def run_seed(db: Session) -> dict:
    """Idempotente: se puede correr varias veces sin duplicar filas."""
    created = {"post_types": 0, "admin": False, "videos": 0}

    for name in POST_TYPES:
        exists = db.query(PostType).filter(PostType.name == name).first()
        if not exists:
            db.add(PostType(name=name))
            created["post_types"] += 1

    admin = db.query(User).filter(User.email == ADMIN_EMAIL).first()
    if not admin:
        db.add(
            User(
                username=ADMIN_USERNAME,
                email=ADMIN_EMAIL,
                password_hash=hash_password(ADMIN_PASSWORD),
                is_admin=True,
            )
        )
        created["admin"] = True

    for enlace, pagina in VIDEOS:
        exists = db.query(Video).filter(Video.enlace == enlace, Video.pagina == pagina).first()
        if not exists:
            db.add(Video(enlace=enlace, pagina=pagina))
            created["videos"] += 1

    db.commit()
    logger.info("Seed: %s", created)
    return created
