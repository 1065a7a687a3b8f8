# app/routes/db.py
import logging

from fastapi import APIRouter

from app.db.session import get_engine, test_db_connection

logger = logging.getLogger(__name__)

# Health check: sin API key ni token
router = APIRouter(prefix="/db", tags=["DB"])


@router.get("/ping")
def ping():
    ok = test_db_connection()
    if not ok:
        logger.warning("DB ping falló")
    return {"ok": ok, "dialect": get_engine().dialect.name}
