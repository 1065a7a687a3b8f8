# app/repositories/posts.py
from sqlalchemy import delete
from sqlalchemy.orm import Session, joinedload, selectinload

from app.models.posts import Post, PostImage, PostType
from app.models.usuarios import User


class PostRepository:
    """
    Acceso a datos del agregado post + imágenes.
    No hace commit: la transacción la cierra quien llama.
    """

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Post).options(
            joinedload(Post.post_type),
            joinedload(Post.user),
            selectinload(Post.images),
        )

    def get(self, post_id: int) -> Post | None:
        return self._query().filter(Post.id == post_id).first()

    def get_visible(self, post_id: int, owner_id: int | None) -> Post | None:
        # owner_id None = sin filtro de autor (admin)
        q = self._query().filter(Post.id == post_id)
        if owner_id is not None:
            q = q.filter(Post.user_id == owner_id)
        return q.first()

    def list_all(self) -> list[Post]:
        return self._query().order_by(Post.id.asc()).all()

    def list_by_user(self, user_id: int) -> list[Post]:
        return self._query().filter(Post.user_id == user_id).order_by(Post.id.asc()).all()

    def list_public(self, post_type_id: int | None = None) -> list[Post]:
        q = self._query()
        if post_type_id is not None:
            q = q.filter(Post.post_type_id == post_type_id)
        return q.order_by(Post.created_at.desc(), Post.id.desc()).all()

    def post_type_exists(self, post_type_id: int) -> bool:
        return self.db.get(PostType, post_type_id) is not None

    def user_exists(self, user_id: int) -> bool:
        return self.db.get(User, user_id) is not None

    def add(self, post: Post) -> Post:
        self.db.add(post)
        self.db.flush()
        return post

    def add_images(self, post_id: int, images: list[dict]) -> None:
        self.db.add_all(
            PostImage(post_id=post_id, image_url=img["image_url"], is_cover=img["is_cover"])
            for img in images
        )
        self.db.flush()

    def delete_images(self, post_id: int) -> int:
        result = self.db.execute(delete(PostImage).where(PostImage.post_id == post_id))
        return result.rowcount or 0

    def delete(self, post_id: int) -> int:
        # Sentencia directa: las imágenes se borran antes, en delete_images
        result = self.db.execute(delete(Post).where(Post.id == post_id))
        return result.rowcount or 0
