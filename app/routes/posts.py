# app/routes/posts.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.deps import (
    get_claims,
    get_post_service,
    require_admin,
    require_identity,
)
from app.core.errors import ValidationError, db_errors
from app.core.security import Claims
from app.schemas.posts import PostCreate, PostUpdate
from app.services.posts import PostService, serialize_post
from app.utils.validators import paginate

router = APIRouter(tags=["posts"])


# -------------------------
# Públicas (solo API key)
# -------------------------
@router.get("/post/page")
def listar_posts_publicos(
    tipo: Optional[int] = Query(default=None),
    page: Optional[int] = Query(default=None),
    page_size: Optional[int] = Query(default=None, alias="pageSize"),
    service: PostService = Depends(get_post_service),
):
    with db_errors(service.db, "Error al obtener los posts"):
        posts = [serialize_post(p) for p in service.list_public(tipo)]

    # Sin ?page devolvemos la lista completa
    if page is None:
        return posts
    return paginate(posts, page, page_size or 10)


@router.get("/post/public/{post_id}")
def obtener_post_publico(post_id: int, service: PostService = Depends(get_post_service)):
    with db_errors(service.db, "Error del servidor al obtener la publicación"):
        return serialize_post(service.get_public(post_id), include_user=False)


# -------------------------
# Protegidas (token)
# -------------------------
@router.get("/post", dependencies=[Depends(require_admin)])
def listar_posts(service: PostService = Depends(get_post_service)):
    with db_errors(service.db, "Error al obtener los posts"):
        return [serialize_post(p) for p in service.list_all()]


@router.get("/post/e/{post_id}")
def obtener_post(
    post_id: int,
    claims: Claims = Depends(require_identity),
    service: PostService = Depends(get_post_service),
):
    with db_errors(service.db, "Error al obtener el post"):
        return serialize_post(service.get_visible(claims, post_id))


@router.get("/post/{user}")
def listar_mis_posts(
    user: str,
    claims: Claims = Depends(require_identity),
    service: PostService = Depends(get_post_service),
):
    # El segmento {user} no se usa: "mis posts" sale del token
    with db_errors(service.db, "Error al obtener los posts del usuario"):
        return [serialize_post(p) for p in service.list_mine(claims.user_id)]


@router.post("/post", status_code=201)
def crear_post(
    payload: PostCreate,
    claims: Claims | None = Depends(get_claims),
    service: PostService = Depends(get_post_service),
):
    author_id = claims.user_id if claims else payload.user_id
    if author_id is None:
        raise ValidationError("userId requerido")

    return serialize_post(service.create(author_id, payload))


@router.put("/post/{post_id}")
def actualizar_post(
    post_id: int,
    payload: PostUpdate,
    service: PostService = Depends(get_post_service),
):
    return serialize_post(service.update(post_id, payload))


@router.delete("/post/{post_id}")
def eliminar_post(
    post_id: int,
    service: PostService = Depends(get_post_service),
):
    service.delete(post_id)
    return {"message": "Post eliminado correctamente"}
