# app/models/usuarios.py
from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from sqlalchemy.orm import relationship
from app.db.base import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)

    username = Column(String(80), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)

    password_hash = Column(String, nullable=False)

    is_admin = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=False), server_default=func.now(), nullable=False)

    # Borrar un usuario NO borra sus posts
    posts = relationship("Post", back_populates="user", passive_deletes=True)
