# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Visitor endpoints — submit, list, get.
Thin HTTP layer — delegates ALL logic to SubmissionService.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Header

from welcome_desk.core.config import settings
from welcome_desk.core.dependencies import get_submission_service
from welcome_desk.core.errors import NotFoundError
from welcome_desk.models.domain import Language
from welcome_desk.schemas import ErrorResponse, VisitorOut
from welcome_desk.services.submission_service import SubmissionService

router = APIRouter(prefix="/api", tags=["Visitors"])

SUPPORTED_LANGUAGES = {lang.value for lang in Language}


def resolve_language(x_language: Optional[str], accept_language: Optional[str]) -> str:
    """Client's active language: X-Language, then Accept-Language, then the default."""
    for candidate in (x_language, (accept_language or "").split(",")[0]):
        primary = (candidate or "").split(";")[0].split("-")[0].strip().lower()
        if primary in SUPPORTED_LANGUAGES:
            return primary
    return settings.DEFAULT_LANGUAGE if settings.DEFAULT_LANGUAGE in SUPPORTED_LANGUAGES else "en"


@router.get("/visitors", response_model=List[VisitorOut])
def list_visitors(service: SubmissionService = Depends(get_submission_service)):
    """All visitor submissions, most recent first."""
    return service.list_visitors()


@router.get("/visitors/{visitor_id}", response_model=VisitorOut,
            responses={404: {"model": ErrorResponse}})
def get_visitor(visitor_id: str, service: SubmissionService = Depends(get_submission_service)):
    visitor = service.get_visitor(visitor_id)
    if visitor is None:
        raise NotFoundError(f"Visitor {visitor_id} not found")
    return visitor


@router.post("/visitors", response_model=VisitorOut, status_code=201,
             responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
def create_visitor(
    payload: Any = Body(...),
    x_language: Optional[str] = Header(default=None),
    accept_language: Optional[str] = Header(default=None),
    service: SubmissionService = Depends(get_submission_service),
):
    """Validate, store and route a welcome-desk submission."""
    result = service.submit(payload, language=resolve_language(x_language, accept_language))
    return result.visitor
