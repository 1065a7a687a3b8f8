# app/routes/auth.py
import logging

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.core.deps import get_user_repository
from app.core.errors import AuthenticationError, ValidationError, db_errors
from app.core.security import issue_token_for, verify_password
from app.repositories.usuarios import UserRepository
from app.schemas.auth import LoginIn, TokenOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=TokenOut)
def login(
    payload: LoginIn,
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
):
    email = payload.email.strip().lower()
    if not email or not payload.password.strip():
        raise ValidationError("Email y contraseña son requeridos")

    with db_errors(users.db, "Error en el servidor"):
        user = users.get_by_email(email)

    # Mismo mensaje si no existe o si la clave no coincide
    if not user or not verify_password(payload.password, user.password_hash):
        raise AuthenticationError("Credenciales inválidas")

    token = issue_token_for(user, settings.jwt_secret, settings.jwt_expires_min)
    logger.info("Login ok user_id=%s", user.id)
    return {"token": token}
