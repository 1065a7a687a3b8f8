# app/schemas/posts.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


def _empty_date_to_none(v):
    # Inputs de fecha vacíos llegan como "" (o 0/false): se guardan como null
    if not v:
        return None
    return v


class PostImageIn(BaseModel):
    image_url: str
    # None = no lo indicó el cliente (importa para la portada por defecto)
    is_cover: Optional[bool] = None


class PostCreate(BaseModel):
    post_type: int = Field(alias="postType")
    title: str
    content: str
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    images: Optional[List[PostImageIn]] = None
    # Solo se usa si no hay identidad (modo test)
    user_id: Optional[int] = Field(default=None, alias="userId")

    class Config:
        populate_by_name = True

    @field_validator("start_at", "end_at", mode="before")
    @classmethod
    def fechas_vacias(cls, v):
        return _empty_date_to_none(v)


class PostUpdate(BaseModel):
    title: str
    content: str
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    # Omitido o null => no se tocan las imágenes; [] => se borran todas
    images: Optional[List[PostImageIn]] = None

    @field_validator("start_at", "end_at", mode="before")
    @classmethod
    def fechas_vacias(cls, v):
        return _empty_date_to_none(v)
