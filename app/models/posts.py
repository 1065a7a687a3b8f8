# app/models/posts.py
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from app.db.base import Base

# Tipos fijos de publicación (seed)
POST_TYPES = ("evento", "blog", "comunicado")


class PostType(Base):
    __tablename__ = "post_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), unique=True, nullable=False)


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)

    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)

    post_type_id = Column(Integer, ForeignKey("post_types.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    start_at = Column(DateTime(timezone=False), nullable=True)
    end_at = Column(DateTime(timezone=False), nullable=True)

    created_at = Column(DateTime(timezone=False), server_default=func.now(), nullable=False)

    post_type = relationship("PostType", lazy="joined")
    user = relationship("User", back_populates="posts")

    # Orden de inserción = orden de la galería
    images = relationship(
        "PostImage",
        back_populates="post",
        order_by="PostImage.id",
        passive_deletes=True,
    )


class PostImage(Base):
    __tablename__ = "post_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)

    image_url = Column(Text, nullable=False)
    is_cover = Column(Boolean, nullable=False, default=False)

    post = relationship("Post", back_populates="images")
