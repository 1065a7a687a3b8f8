# app/utils/validators.py
"""
Funciones puras de validación y transformación.
Sin dependencias de FastAPI ni de la BD para poder probarlas aisladas.
"""
import math
import re
from urllib.parse import urlparse

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_RE = re.compile(r"^\+?\d{7,15}$")
_PHONE_STRIP_RE = re.compile(r"[\s\-()]")


def is_valid_email(email) -> bool:
    if not isinstance(email, str) or not email.strip():
        return False
    return bool(_EMAIL_RE.match(email))


def is_valid_positive_integer(value, allow_zero: bool = False) -> bool:
    # bool es subclase de int: no cuenta
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    if value < 0:
        return False
    if value == 0 and not allow_zero:
        return False
    return True


def is_valid_phone_number(phone) -> bool:
    """Acepta +1234567890, 123-456-7890, (123) 456-7890, 1234567890."""
    if not isinstance(phone, str) or not phone.strip():
        return False
    clean = _PHONE_STRIP_RE.sub("", phone)
    return bool(_PHONE_RE.match(clean))


def is_valid_url(url) -> bool:
    if not isinstance(url, str) or not url.strip():
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme and (parsed.netloc or parsed.path))


def paginate(items, page, page_size) -> dict:
    if not isinstance(items, list):
        return {"items": [], "totalItems": 0, "totalPages": 0, "currentPage": page}

    if not is_valid_positive_integer(page):
        page = 1
    if not is_valid_positive_integer(page_size):
        page_size = 10

    total_items = len(items)
    total_pages = math.ceil(total_items / page_size)
    start = (page - 1) * page_size

    return {
        "items": items[start:start + page_size],
        "totalItems": total_items,
        "totalPages": total_pages,
        "currentPage": min(page, total_pages or 1),
    }
