# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Visitor submission pipeline.

    received ─► validated ─► persisted ─► notified | skipped ─► complete

Validation, storage and configuration failures halt the pipeline and
propagate to the caller. Nothing is rolled back or retried. Once the
visitor is persisted the submission succeeds, whatever happens while
reading settings or sending the notification.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from welcome_desk.core.errors import WelcomeDeskError
from welcome_desk.core.logging import get_logger
from welcome_desk.metrics import SUBMISSION_FAILURES, SUBMISSION_PROCESSING, VISITORS_SUBMITTED
from welcome_desk.repositories.settings_repository import SettingsRepository
from welcome_desk.repositories.visitor_repository import VisitorRepository
from welcome_desk.schemas import validate_visitor
from welcome_desk.services.notification_dispatcher import FAILED, SENT, NotificationDispatcher

logger = get_logger(__name__)


class Stage(str, Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    PERSISTED = "persisted"
    NOTIFIED = "notified"
    SKIPPED = "skipped"
    COMPLETE = "complete"


class SubmissionResult:
    def __init__(self, visitor: Dict[str, Any], notification: str, stages: List[Stage]):
        self.visitor = visitor
        self.notification = notification
        self.stages = stages


class SubmissionService:
    """Orchestrates validate → store → notify for one visitor submission."""

    def __init__(
        self,
        visitor_repo: VisitorRepository,
        settings_repo: SettingsRepository,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self._visitors = visitor_repo
        self._settings = settings_repo
        self._dispatcher = dispatcher

    # ── Commands ──

    def submit(self, raw: Any, language: str) -> SubmissionResult:
        with SUBMISSION_PROCESSING.time():
            stages = [Stage.RECEIVED]

            try:
                fields = validate_visitor(raw, default_language=language)
            except WelcomeDeskError:
                SUBMISSION_FAILURES.labels(stage=Stage.RECEIVED.value).inc()
                raise
            stages.append(Stage.VALIDATED)

            try:
                visitor = self._visitors.create(fields)
            except WelcomeDeskError as exc:
                SUBMISSION_FAILURES.labels(stage=Stage.VALIDATED.value).inc()
                logger.error("Visitor submission lost during persistence: %s", exc)
                raise
            stages.append(Stage.PERSISTED)
            VISITORS_SUBMITTED.labels(age_group=visitor["age_group"], language=visitor["language"]).inc()
            logger.info("Visitor created id=%s age_group=%s", visitor["id"], visitor["age_group"])

            notification = self._notify(visitor)
            stages.append(Stage.NOTIFIED if notification in (SENT, FAILED) else Stage.SKIPPED)
            stages.append(Stage.COMPLETE)
            return SubmissionResult(visitor, notification, stages)

    def _notify(self, visitor: Dict[str, Any]) -> str:
        try:
            church_settings = self._settings.get()
        except WelcomeDeskError as exc:
            logger.error("Could not read settings for visitor %s notification: %s", visitor["id"], exc)
            return FAILED
        return self._dispatcher.notify(visitor, church_settings)

    # ── Queries ──

    def list_visitors(self) -> List[Dict[str, Any]]:
        return self._visitors.list()

    def get_visitor(self, visitor_id: str) -> Optional[Dict[str, Any]]:
        return self._visitors.get_by_id(visitor_id)
