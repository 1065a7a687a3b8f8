# app/routes/enlaces.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.deps import require_admin
from app.core.errors import NotFoundError, ValidationError, db_errors
from app.db.session import get_db
from app.repositories.enlaces import VideoRepository
from app.schemas.enlaces import VideoOut, VideoUpdate
from app.utils.validators import is_valid_url

router = APIRouter(tags=["videos"])


@router.get("/home", response_model=list[VideoOut])
def videos_home(db: Session = Depends(get_db)):
    with db_errors(db, "Error al obtener videos con pagina home"):
        return VideoRepository(db).list_by_pagina("home")


@router.get("/blog", response_model=list[VideoOut])
def videos_blog(db: Session = Depends(get_db)):
    with db_errors(db, "Error al obtener videos con pagina blog"):
        return VideoRepository(db).list_by_pagina("blog")


@router.put("/edit/{video_id}", response_model=VideoOut, dependencies=[Depends(require_admin)])
def actualizar_video(video_id: int, payload: VideoUpdate, db: Session = Depends(get_db)):
    enlace = payload.enlace.strip()
    if not is_valid_url(enlace):
        raise ValidationError("Enlace inválido")

    with db_errors(db, "Error al actualizar el video"):
        video = VideoRepository(db).get(video_id)
        if not video:
            raise NotFoundError("Video no encontrado")

        video.enlace = enlace
        video.pagina = payload.pagina
        db.commit()
        db.refresh(video)
    return video
