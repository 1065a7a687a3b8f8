# app/utils/fechas.py
from datetime import datetime, timezone


def to_naive_utc(value: datetime | None) -> datetime | None:
    # Las columnas son TIMESTAMP sin zona: se guardan en UTC
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def to_iso_z(value: datetime | None) -> str | None:
    """Formato fijo 'YYYY-MM-DDTHH:MM:SS.mmmZ' (UTC, milisegundos)."""
    if value is None:
        return None
    value = to_naive_utc(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
