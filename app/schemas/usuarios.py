# app/schemas/usuarios.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class UserCreate(BaseModel):
    username: str
    email: str
    password: str
    is_admin: Optional[bool] = None


class UserUpdate(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    # Solo se re-hashea si viene y no está en blanco
    password: Optional[str] = None
    is_admin: Optional[bool] = None


class UserOut(BaseModel):
    id: int
    username: str
    email: str
    is_admin: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
