# app/schemas/formularios.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class FormSubmissionCreate(BaseModel):
    nombre: str
    dni: str
    telefono: str
    correo: str
    grado: str
    nivel: str


class FormSubmissionOut(BaseModel):
    id: int
    nombre: str
    dni: str
    telefono: str
    correo: str
    grado: str
    nivel: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
