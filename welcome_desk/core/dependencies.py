# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire repositories and services.
"""

from welcome_desk.core.config import settings
from welcome_desk.core.database import engine
from welcome_desk.repositories.settings_repository import SettingsRepository
from welcome_desk.repositories.visitor_repository import VisitorRepository
from welcome_desk.services.email_transport import build_transport
from welcome_desk.services.logo_storage import LogoStorage
from welcome_desk.services.notification_dispatcher import NotificationDispatcher
from welcome_desk.services.settings_service import SettingsService
from welcome_desk.services.submission_service import SubmissionService

# ── Singleton instances ──
_visitor_repo = VisitorRepository(engine)
_settings_repo = SettingsRepository(engine)
_dispatcher = NotificationDispatcher(build_transport(settings))
_logo_storage = LogoStorage(settings.UPLOAD_DIR, settings.MAX_LOGO_BYTES)

_submission_service = SubmissionService(
    visitor_repo=_visitor_repo,
    settings_repo=_settings_repo,
    dispatcher=_dispatcher,
)
_settings_service = SettingsService(_settings_repo)


# ── FastAPI dependency functions ──
def get_submission_service() -> SubmissionService:
    return _submission_service


def get_settings_service() -> SettingsService:
    return _settings_service


def get_logo_storage() -> LogoStorage:
    return _logo_storage


def get_visitor_repo() -> VisitorRepository:
    return _visitor_repo
