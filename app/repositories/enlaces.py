# app/repositories/enlaces.py
from sqlalchemy.orm import Session

from app.models.enlaces import Video


class VideoRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_by_pagina(self, pagina: str) -> list[Video]:
        return self.db.query(Video).filter(Video.pagina == pagina).order_by(Video.id.asc()).all()

    def get(self, video_id: int) -> Video | None:
        return self.db.get(Video, video_id)
