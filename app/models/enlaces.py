# app/models/enlaces.py
from sqlalchemy import Column, Integer, String, Text
from app.db.base import Base

# home | blog
PAGINAS = ("home", "blog")

class Video(Base):
    __tablename__ = "videos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    enlace = Column(Text, nullable=False)
    pagina = Column(String(10), nullable=False, index=True)
