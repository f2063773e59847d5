# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Church settings data access.
A single logical row; writes are upserts with a key-by-key merge of the
notification email map.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from welcome_desk.core.database import church_settings_table
from welcome_desk.core.errors import ConfigurationError, StorageError
from welcome_desk.core.logging import get_logger
from welcome_desk.models.domain import default_church_settings, merge_church_settings

logger = get_logger(__name__)

SETTINGS_ID = "default"

WRITABLE_FIELDS = ("name", "subtitle", "logo_url", "primary_color", "notification_emails")


def _iso(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def _row_to_dict(row) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "name": row["name"],
        "subtitle": row["subtitle"],
        "logo_url": row["logo_url"],
        "primary_color": row["primary_color"],
        "notification_emails": dict(row["notification_emails"] or {}),
        "updated_at": _iso(row["updated_at"]),
    }


class SettingsRepository:
    """SQL-backed singleton settings document."""

    def __init__(self, engine: Optional[Engine]):
        self._engine = engine

    def _require_engine(self) -> Engine:
        if self._engine is None:
            raise ConfigurationError("Settings store is not configured (set DATABASE_URL)")
        return self._engine

    @staticmethod
    def _select_row(conn: Connection):
        return conn.execute(
            select(church_settings_table).where(church_settings_table.c.id == SETTINGS_ID)
        ).mappings().first()

    def get(self) -> Optional[Dict[str, Any]]:
        """Return the settings document, or None if nothing was saved yet."""
        engine = self._require_engine()
        try:
            with engine.connect() as conn:
                row = self._select_row(conn)
        except SQLAlchemyError as exc:
            logger.error("Failed to load church settings: %s", exc)
            raise StorageError("Failed to fetch church settings") from exc
        return _row_to_dict(row) if row else None

    def _write(self, conn: Connection, changes: Dict[str, Any], now: datetime):
        row = self._select_row(conn)
        if row is None:
            merged = merge_church_settings(default_church_settings(), changes)
            merged["id"] = SETTINGS_ID
            values = {k: merged[k] for k in WRITABLE_FIELDS}
            conn.execute(
                insert(church_settings_table).values(id=SETTINGS_ID, updated_at=now, **values)
            )
            return merged, "created"
        merged = merge_church_settings(_row_to_dict(row), changes)
        values = {k: merged[k] for k in WRITABLE_FIELDS}
        conn.execute(
            update(church_settings_table)
            .where(church_settings_table.c.id == SETTINGS_ID)
            .values(updated_at=now, **values)
        )
        return merged, "updated"

    def upsert(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Create the settings over defaults, or merge `changes` into the existing row."""
        engine = self._require_engine()
        now = datetime.now(timezone.utc)
        try:
            try:
                with engine.begin() as conn:
                    merged, action = self._write(conn, changes, now)
            except IntegrityError:
                # A concurrent first write created the row; merge into it.
                logger.warning("Settings row created concurrently, retrying as update")
                with engine.begin() as conn:
                    merged, action = self._write(conn, changes, now)
        except SQLAlchemyError as exc:
            logger.error("Failed to save church settings: %s", exc)
            raise StorageError("Failed to update church settings") from exc

        logger.info("Church settings %s id=%s fields=%s", action, merged["id"], sorted(changes))
        merged["updated_at"] = _iso(now)
        return merged
