# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Church settings — defaults on read, validated merge on write.
"""

from typing import Any, Dict

from welcome_desk.core.errors import WelcomeDeskError
from welcome_desk.core.logging import get_logger
from welcome_desk.metrics import SETTINGS_UPDATES
from welcome_desk.models.domain import default_church_settings
from welcome_desk.repositories.settings_repository import SettingsRepository
from welcome_desk.schemas import validate_settings

logger = get_logger(__name__)


class SettingsService:
    def __init__(self, settings_repo: SettingsRepository) -> None:
        self._repo = settings_repo

    def get_settings(self) -> Dict[str, Any]:
        """Persisted settings, or the documented defaults if none were saved."""
        return self._repo.get() or default_church_settings()

    def update_settings(self, raw: Any) -> Dict[str, Any]:
        changes = validate_settings(raw)
        try:
            result = self._repo.upsert(changes)
        except WelcomeDeskError:
            SETTINGS_UPDATES.labels(status="error").inc()
            raise
        SETTINGS_UPDATES.labels(status="ok").inc()
        return result
