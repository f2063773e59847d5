# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Visitor data access.
Append-only — records are inserted and read, never updated or deleted.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import func, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from welcome_desk.core.database import visitors_table
from welcome_desk.core.errors import ConfigurationError, StorageError
from welcome_desk.core.logging import get_logger

logger = get_logger(__name__)

VISITOR_FIELDS = (
    "full_name", "phone", "email", "age_group", "city",
    "hear_about", "is_first_time", "notes", "language",
)


def _iso(value: datetime) -> str:
    # SQLite hands back naive datetimes; everything is stored in UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def _row_to_dict(row) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "full_name": row["full_name"],
        "phone": row["phone"],
        "email": row["email"],
        "age_group": row["age_group"],
        "city": row["city"],
        "hear_about": row["hear_about"],
        "is_first_time": bool(row["is_first_time"]),
        "notes": row["notes"],
        "language": row["language"],
        "submission_date": _iso(row["submission_date"]),
    }


class VisitorRepository:
    """SQL-backed visitor collection."""

    def __init__(self, engine: Optional[Engine]):
        self._engine = engine

    def _require_engine(self) -> Engine:
        if self._engine is None:
            raise ConfigurationError("Visitor store is not configured (set DATABASE_URL)")
        return self._engine

    # ── Write ──

    def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Persist a validated visitor, assigning id and submission_date."""
        engine = self._require_engine()
        record = {name: fields.get(name) for name in VISITOR_FIELDS}
        record["is_first_time"] = bool(record["is_first_time"])
        record["id"] = str(uuid.uuid4())
        record["submission_date"] = datetime.now(timezone.utc)
        try:
            with engine.begin() as conn:
                conn.execute(insert(visitors_table).values(**record))
        except SQLAlchemyError as exc:
            logger.error("Failed to persist visitor %s: %s", record["id"], exc)
            raise StorageError("Failed to save visitor") from exc
        record["submission_date"] = _iso(record["submission_date"])
        return record

    # ── Read ──

    def list(self) -> List[Dict[str, Any]]:
        """All visitors, most recent first."""
        engine = self._require_engine()
        query = select(visitors_table).order_by(
            visitors_table.c.submission_date.desc(), visitors_table.c.seq.desc()
        )
        try:
            with engine.connect() as conn:
                rows = conn.execute(query).mappings().all()
        except SQLAlchemyError as exc:
            logger.error("Failed to list visitors: %s", exc)
            raise StorageError("Failed to fetch visitors") from exc
        return [_row_to_dict(r) for r in rows]

    def get_by_id(self, visitor_id: str) -> Optional[Dict[str, Any]]:
        engine = self._require_engine()
        try:
            with engine.connect() as conn:
                row = conn.execute(
                    select(visitors_table).where(visitors_table.c.id == visitor_id)
                ).mappings().first()
        except SQLAlchemyError as exc:
            logger.error("Failed to load visitor %s: %s", visitor_id, exc)
            raise StorageError("Failed to fetch visitor") from exc
        return _row_to_dict(row) if row else None

    def count(self) -> int:
        engine = self._require_engine()
        with engine.connect() as conn:
            return conn.execute(select(func.count()).select_from(visitors_table)).scalar() or 0

    def verify_connection(self) -> int:
        return self.count()
