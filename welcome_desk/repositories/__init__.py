# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package."""
from welcome_desk.repositories.settings_repository import SettingsRepository
from welcome_desk.repositories.visitor_repository import VisitorRepository

__all__ = ["SettingsRepository", "VisitorRepository"]
