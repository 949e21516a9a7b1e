import logging
from typing import Any, Dict

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError

from rodo_audit.config import settings

logger = logging.getLogger(__name__)


def _connect_args(database_url: str, environment: str) -> Dict[str, Any]:
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    if environment == "production" and database_url.startswith("postgresql"):
        return {"sslmode": "require"}
    return {}


engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.database_url, settings.environment),
)


def check_database() -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Database readiness check failed", extra={"error": str(exc)})
        return False
    return True
