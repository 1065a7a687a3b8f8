# app/services/posts.py
"""
Agregado post + imágenes.

Reglas:
- Un post tiene 0..N imágenes y como máximo una portada (is_cover).
- Crear: primero el post, luego las imágenes (si vienen).
- Actualizar: si llega lista de imágenes (aunque sea vacía) se reemplazan todas;
  si no llega, no se tocan.
- Borrar: primero las imágenes, después el post.

Cada operación de escritura es una sola transacción: commit al final,
rollback si algo falla en medio.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import NotFoundError, ServerError
from app.core.security import Claims
from app.models.posts import Post
from app.repositories.posts import PostRepository
from app.schemas.posts import PostCreate, PostImageIn, PostUpdate
from app.utils.fechas import to_iso_z, to_naive_utc

logger = logging.getLogger(__name__)

MSG_NOT_FOUND = "Post no encontrado"
MSG_NOT_FOUND_OWNER = "Post no encontrado o no tienes permiso para acceder a este recurso"


def normalize_images(images: list[PostImageIn], default_first_cover: bool) -> list[dict]:
    """
    Deja como máximo una portada: la primera marcada explícitamente.
    Si ninguna viene marcada y default_first_cover=True, la primera es portada.
    """
    out = [{"image_url": img.image_url, "is_cover": False} for img in images]

    explicit = [i for i, img in enumerate(images) if img.is_cover]
    if explicit:
        out[explicit[0]]["is_cover"] = True
    elif default_first_cover and out:
        out[0]["is_cover"] = True

    return out


def serialize_image(img) -> dict:
    return {
        "id": img.id,
        "postId": img.post_id,
        "image_url": img.image_url,
        "is_cover": bool(img.is_cover),
    }


def serialize_post(post: Post, include_user: bool = True) -> dict:
    out = {
        "id": post.id,
        "title": post.title,
        "content": post.content,
        "postTypeId": post.post_type_id,
        "userId": post.user_id,
        "start_at": to_iso_z(post.start_at),
        "end_at": to_iso_z(post.end_at),
        "created_at": to_iso_z(post.created_at),
        "postType": {"id": post.post_type.id, "name": post.post_type.name} if post.post_type else None,
        "images": [serialize_image(img) for img in post.images],
    }
    if include_user:
        out["user"] = (
            {"id": post.user.id, "username": post.user.username, "email": post.user.email}
            if post.user
            else None
        )
    return out


def _owner_filter(claims: Claims) -> int | None:
    # Admin ve todo; el resto solo lo suyo
    return None if claims.is_admin else claims.user_id


class PostService:
    def __init__(self, repo: PostRepository):
        self.repo = repo
        self.db = repo.db

    # ------------------------
    # Lecturas
    # ------------------------
    def get_visible(self, claims: Claims, post_id: int) -> Post:
        # El filtro de autor va en la consulta: un post ajeno y uno inexistente dan el mismo 404
        post = self.repo.get_visible(post_id, _owner_filter(claims))
        if not post:
            raise NotFoundError(MSG_NOT_FOUND if claims.is_admin else MSG_NOT_FOUND_OWNER)
        return post

    def list_mine(self, user_id: int) -> list[Post]:
        posts = self.repo.list_by_user(user_id)
        if not posts:
            raise NotFoundError("No se encontraron posts para este usuario")
        return posts

    def list_all(self) -> list[Post]:
        return self.repo.list_all()

    def list_public(self, post_type_id: int | None = None) -> list[Post]:
        return self.repo.list_public(post_type_id)

    def get_public(self, post_id: int) -> Post:
        post = self.repo.get(post_id)
        if not post:
            raise NotFoundError("Publicación no encontrada")
        return post

    # ------------------------
    # Escrituras
    # ------------------------
    def create(self, author_id: int, data: PostCreate) -> Post:
        try:
            if not self.repo.post_type_exists(data.post_type) or not self.repo.user_exists(author_id):
                raise ServerError("Error al crear el post", "postType o usuario inexistente")

            post = self.repo.add(
                Post(
                    title=data.title,
                    content=data.content,
                    post_type_id=data.post_type,
                    user_id=author_id,
                    start_at=to_naive_utc(data.start_at),
                    end_at=to_naive_utc(data.end_at),
                )
            )

            post_id = post.id
            if data.images:
                self.repo.add_images(post_id, normalize_images(data.images, default_first_cover=False))
                logger.info("Imágenes creadas para post %s: %s", post_id, len(data.images))

            self.db.commit()
        except ServerError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Error al crear el post")
            raise ServerError("Error al crear el post") from e

        return self._reload(post_id)

    def update(self, post_id: int, data: PostUpdate) -> Post:
        # Lectura previa por id: 404 antes de cualquier escritura
        post = self._get_or_404(post_id)

        try:
            if data.images is not None:
                self.repo.delete_images(post.id)
                if data.images:
                    self.repo.add_images(post.id, normalize_images(data.images, default_first_cover=True))

            post.title = data.title
            post.content = data.content
            # Fechas ausentes => null (a diferencia de images)
            post.start_at = to_naive_utc(data.start_at) if data.start_at else None
            post.end_at = to_naive_utc(data.end_at) if data.end_at else None

            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Error al actualizar el post %s", post_id)
            raise ServerError("Error al actualizar el post", str(e)) from e

        return self._reload(post_id)

    def delete(self, post_id: int) -> None:
        post = self._get_or_404(post_id)

        try:
            removed = self.repo.delete_images(post.id)
            self.repo.delete(post.id)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Error al eliminar el post %s", post_id)
            raise ServerError("Error al eliminar el post") from e

        logger.info("Post %s eliminado (%s imágenes)", post_id, removed)

    def _get_or_404(self, post_id: int) -> Post:
        post = self.repo.get(post_id)
        if not post:
            raise NotFoundError(MSG_NOT_FOUND)
        return post

    def _reload(self, post_id: int) -> Post:
        self.db.expire_all()
        post = self.repo.get(post_id)
        if not post:
            raise ServerError("Error al leer el post")
        return post
