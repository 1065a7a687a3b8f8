# app/core/security.py
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError
from passlib.context import CryptContext

JWT_ALG = "HS256"
JWT_EXPIRES_MIN = 30

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str | None) -> bool:
    if not password or not password_hash:
        return False
    try:
        return pwd_context.verify(password, password_hash)
    except ValueError:
        # hash con formato desconocido
        return False


@dataclass(frozen=True)
class Claims:
    """Identidad verificada que viaja del token a cada handler."""

    user_id: int
    user_name: str | None
    email: str | None
    is_admin: bool
    exp: int | None = None

    @classmethod
    def from_payload(cls, payload: dict) -> "Claims":
        user_id = payload.get("userId")
        if user_id is None:
            raise ValueError("Token sin 'userId'")
        return cls(
            user_id=int(user_id),
            user_name=payload.get("userName"),
            email=payload.get("email"),
            # Solo True literal da privilegios
            is_admin=payload.get("is_admin") is True,
            exp=payload.get("exp"),
        )

    def to_payload(self) -> dict:
        return {
            "userId": self.user_id,
            "userName": self.user_name,
            "email": self.email,
            "is_admin": self.is_admin,
        }


def create_access_token(data: dict, secret: str, expires_minutes: int = JWT_EXPIRES_MIN) -> str:
    to_encode = dict(data)
    now = datetime.now(timezone.utc)
    to_encode.update({"iat": now, "exp": now + timedelta(minutes=expires_minutes)})
    return jwt.encode(to_encode, secret, algorithm=JWT_ALG)


def issue_token_for(user, secret: str, expires_minutes: int = JWT_EXPIRES_MIN) -> str:
    claims = Claims(
        user_id=int(user.id),
        user_name=user.username,
        email=user.email,
        is_admin=bool(user.is_admin),
    )
    return create_access_token(claims.to_payload(), secret, expires_minutes)


def decode_token(token: str, secret: str) -> dict:
    try:
        return jwt.decode(token, secret, algorithms=[JWT_ALG])
    except JWTError as e:
        raise ValueError("Token inválido") from e
