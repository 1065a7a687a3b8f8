# app/routes/usuarios.py
from fastapi import APIRouter, Depends

from app.core.deps import get_user_repository, require_admin
from app.core.errors import NotFoundError, ValidationError, db_errors
from app.core.security import hash_password
from app.models.usuarios import User
from app.repositories.usuarios import UserRepository
from app.schemas.usuarios import UserCreate, UserOut, UserUpdate
from app.utils.validators import is_valid_email

router = APIRouter(tags=["usuarios"])


def _normalize_email(email: str) -> str:
    email = (email or "").strip().lower()
    if not is_valid_email(email):
        raise ValidationError("Email inválido")
    return email


def _get_or_404(users: UserRepository, user_id: int) -> User:
    with db_errors(users.db, "Error al obtener el usuario"):
        user = users.get(user_id)
    if not user:
        raise NotFoundError("Usuario no encontrado")
    return user


@router.get("/users", response_model=list[UserOut])
def listar_usuarios(users: UserRepository = Depends(get_user_repository)):
    with db_errors(users.db, "Error al obtener los usuarios"):
        return users.list()


@router.get("/users/{user_id}", response_model=UserOut, dependencies=[Depends(require_admin)])
def obtener_usuario(user_id: int, users: UserRepository = Depends(get_user_repository)):
    return _get_or_404(users, user_id)


@router.post("/users", response_model=UserOut, status_code=201, dependencies=[Depends(require_admin)])
def crear_usuario(payload: UserCreate, users: UserRepository = Depends(get_user_repository)):
    email = _normalize_email(payload.email)
    username = payload.username.strip()
    if not username or not payload.password.strip():
        raise ValidationError("username y password son requeridos")

    with db_errors(users.db, "Error al crear el usuario"):
        if users.get_by_email(email):
            raise ValidationError("El email ya está registrado")

        user = users.add(
            User(
                username=username,
                email=email,
                password_hash=hash_password(payload.password),
                is_admin=bool(payload.is_admin),
            )
        )
        users.db.commit()
        users.db.refresh(user)
    return user


@router.put("/users/{user_id}", response_model=UserOut, dependencies=[Depends(require_admin)])
def actualizar_usuario(
    user_id: int,
    payload: UserUpdate,
    users: UserRepository = Depends(get_user_repository),
):
    user = _get_or_404(users, user_id)

    with db_errors(users.db, "Error al actualizar el usuario"):
        if payload.email is not None:
            email = _normalize_email(payload.email)
            other = users.get_by_email(email)
            if other and other.id != user.id:
                raise ValidationError("El email ya está registrado")
            user.email = email

        if payload.username is not None and payload.username.strip():
            user.username = payload.username.strip()
        if payload.is_admin is not None:
            user.is_admin = payload.is_admin

        # Solo se cambia el hash si mandan una clave no vacía
        if payload.password and payload.password.strip():
            user.password_hash = hash_password(payload.password)

        users.db.commit()
        users.db.refresh(user)
    return user


@router.delete("/users/{user_id}", dependencies=[Depends(require_admin)])
def eliminar_usuario(user_id: int, users: UserRepository = Depends(get_user_repository)):
    user = _get_or_404(users, user_id)

    with db_errors(users.db, "Error al eliminar el usuario"):
        users.delete(user)
        users.db.commit()
    return {"message": "Usuario eliminado correctamente"}
