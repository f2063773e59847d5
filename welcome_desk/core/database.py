# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Database engine and table definitions — single source of truth for store
connectivity. An empty URL leaves the store unconfigured (engine is None).
"""

from typing import Optional

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
)
from sqlalchemy.engine import Engine

from welcome_desk.core.config import settings
from welcome_desk.core.logging import get_logger

logger = get_logger(__name__)

metadata = MetaData()

visitors_table = Table(
    "visitors",
    metadata,
    Column("seq", Integer, primary_key=True, autoincrement=True),
    Column("id", String(36), unique=True, nullable=False, index=True),
    Column("full_name", Text, nullable=False),
    Column("phone", Text),
    Column("email", Text),
    Column("age_group", String(20), nullable=False),
    Column("city", Text),
    Column("hear_about", Text),
    Column("is_first_time", Boolean, nullable=False, default=False),
    Column("notes", Text),
    Column("language", String(2), nullable=False, default="en"),
    Column("submission_date", DateTime(timezone=True), nullable=False, index=True),
)

church_settings_table = Table(
    "church_settings",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", Text, nullable=False),
    Column("subtitle", Text, nullable=False),
    Column("logo_url", Text),
    Column("primary_color", String(7), nullable=False),
    Column("notification_emails", JSON, nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)


def build_engine(url: str) -> Optional[Engine]:
    if not url:
        logger.warning("DATABASE_URL not set; store is unconfigured and data routes will fail")
        return None
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=settings.DB_POOL_RECYCLE,
    )


def init_schema(engine: Engine) -> None:
    metadata.create_all(engine)


engine = build_engine(settings.DATABASE_URL)
