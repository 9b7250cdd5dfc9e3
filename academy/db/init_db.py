"""Database initialization utilities."""
import logging
from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from academy.db.base import Base, import_models

logger = logging.getLogger(__name__)


def _resolve(bind: Optional[Engine]) -> Engine:
    if bind is not None:
        return bind
    from academy.db.session import engine
    return engine


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create all tables that do not exist yet.

    Suitable for development and tests; production schemas should be
    managed with migrations.
    """
    bind = _resolve(bind)
    import_models()

    existing_tables = inspect(bind).get_table_names()
    Base.metadata.create_all(bind=bind)
    if existing_tables:
        logger.info(f"Database already had {len(existing_tables)} tables; missing ones created")
    else:
        logger.info("Database tables created successfully")
