# app/models/formularios.py
from sqlalchemy import Column, Integer, String, DateTime, func
from app.db.base import Base


class FormSubmission(Base):
    __tablename__ = "form_submissions"

    id = Column(Integer, primary_key=True, autoincrement=True)

    nombre = Column(String(255), nullable=False)
    dni = Column(String(20), nullable=False)
    telefono = Column(String(30), nullable=False)
    correo = Column(String(255), nullable=False)
    grado = Column(String(100), nullable=False)
    nivel = Column(String(100), nullable=False)

    created_at = Column(DateTime(timezone=False), server_default=func.now(), nullable=False)
