# app/schemas/auth.py
from pydantic import BaseModel


class LoginIn(BaseModel):
    # Vacíos por defecto: el 400 lo decide el handler, no pydantic
    email: str = ""
    password: str = ""


class TokenOut(BaseModel):
    token: str
