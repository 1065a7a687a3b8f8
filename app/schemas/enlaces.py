# app/schemas/enlaces.py
from typing import Literal

from pydantic import BaseModel


class VideoUpdate(BaseModel):
    enlace: str
    pagina: Literal["home", "blog"]


class VideoOut(BaseModel):
    id: int
    enlace: str
    pagina: str

    class Config:
        from_attributes = True
