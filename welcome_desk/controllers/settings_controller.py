# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Church settings and age-group catalogue.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends

from welcome_desk.core.dependencies import get_settings_service
from welcome_desk.models.domain import AGE_GROUP_LABELS, AGE_GROUP_NOTIFICATION_KEY, AgeGroup
from welcome_desk.schemas import AgeGroupOut, ChurchSettingsOut, ErrorResponse
from welcome_desk.services.settings_service import SettingsService

router = APIRouter(prefix="/api", tags=["Settings"])


@router.get("/church-settings", response_model=ChurchSettingsOut)
def get_church_settings(service: SettingsService = Depends(get_settings_service)):
    """Current settings; defaults when none have been saved."""
    return service.get_settings()


@router.post("/church-settings", response_model=ChurchSettingsOut,
             responses={400: {"model": ErrorResponse}})
def update_church_settings(
    payload: Any = Body(...),
    service: SettingsService = Depends(get_settings_service),
):
    """Partial or full update, merged into the stored settings."""
    return service.update_settings(payload)


@router.get("/age-groups", response_model=List[AgeGroupOut])
def list_age_groups():
    return [
        {
            "value": group.value,
            "notification_key": AGE_GROUP_NOTIFICATION_KEY[group.value],
            "labels": AGE_GROUP_LABELS[group.value],
        }
        for group in AgeGroup
    ]
