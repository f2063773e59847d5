# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / response schemas and the validators built on them.
JSON keys are camelCase on the wire; internal dicts use snake_case.
"""

from typing import Annotated, Any, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, StrictBool, StringConstraints, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from welcome_desk.core.errors import ValidationError
from welcome_desk.models.domain import (
    AgeGroup,
    Language,
    default_church_settings,
    merge_church_settings,
)

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"

HexColor = Annotated[str, StringConstraints(pattern=HEX_COLOR_PATTERN)]


def _email_or_empty(value: Optional[str]) -> Optional[str]:
    if value is None or value == "":
        return value
    try:
        return validate_email(value, check_deliverability=False, allow_display_name=False).normalized
    except EmailNotValidError:
        raise PydanticCustomError("email", "Invalid email address")


def _required_text(value: Optional[str], message: str) -> Optional[str]:
    if value is not None and not value.strip():
        raise PydanticCustomError("required", message)
    return value


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Visitor ──

class VisitorIn(CamelModel):
    full_name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    age_group: AgeGroup
    city: Optional[str] = None
    hear_about: Optional[str] = None
    is_first_time: Optional[StrictBool] = False
    notes: Optional[str] = None
    language: Language

    @field_validator("full_name")
    @classmethod
    def full_name_not_blank(cls, v: str) -> str:
        return _required_text(v, "Full name is required")

    @field_validator("email")
    @classmethod
    def email_or_empty(cls, v: Optional[str]) -> Optional[str]:
        return _email_or_empty(v)

    @field_validator("is_first_time")
    @classmethod
    def first_time_defaults_false(cls, v: Optional[bool]) -> bool:
        return bool(v)


class VisitorOut(CamelModel):
    id: str
    full_name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    age_group: str
    city: Optional[str] = None
    hear_about: Optional[str] = None
    is_first_time: bool = False
    notes: Optional[str] = None
    language: str
    submission_date: str


# ── Church settings ──

class NotificationEmails(CamelModel):
    children: Optional[str] = None
    youth: Optional[str] = None
    young_adult: Optional[str] = None
    adult: Optional[str] = None
    senior: Optional[str] = None

    @field_validator("*")
    @classmethod
    def email_or_empty(cls, v: Optional[str]) -> Optional[str]:
        return _email_or_empty(v)


class ChurchSettingsUpdate(CamelModel):
    """Partial update — every field optional, constraints apply when present."""

    name: Optional[str] = None
    subtitle: Optional[str] = None
    logo_url: Optional[str] = None
    primary_color: Optional[HexColor] = None
    notification_emails: Optional[NotificationEmails] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _required_text(v, "Church name is required")

    @field_validator("subtitle")
    @classmethod
    def subtitle_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _required_text(v, "Subtitle is required")


class ChurchSettingsOut(CamelModel):
    id: Optional[str] = None
    name: str
    subtitle: str
    logo_url: Optional[str] = None
    primary_color: str
    notification_emails: Dict[str, str]
    updated_at: Optional[str] = None


# ── Misc responses ──

class LogoUploadOut(CamelModel):
    logo_url: str


class AgeGroupOut(CamelModel):
    value: str
    notification_key: str
    labels: Dict[str, str]


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    message: str
    errors: Optional[List[FieldError]] = None
    request_id: Optional[str] = None


# ── Validators ──

def field_errors(exc: PydanticValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into [{field, message}] with camelCase dotted paths."""
    errors: list[dict[str, str]] = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "body"
        errors.append({"field": field, "message": err["msg"]})
    return errors


def _require_object(raw: Any) -> None:
    if not isinstance(raw, dict):
        raise ValidationError([{"field": "body", "message": "Expected a JSON object"}])


def validate_visitor(raw: Any, default_language: str = Language.EN.value) -> dict[str, Any]:
    """Validate an untrusted visitor submission.

    Returns a snake_case dict ready for the visitor store. Raises
    ValidationError naming every failing field, not only the first one.
    `language` falls back to the caller's active language when omitted.
    """
    _require_object(raw)
    data = dict(raw)
    if data.get("language") in (None, ""):
        data["language"] = default_language
    try:
        visitor = VisitorIn.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(field_errors(exc)) from None
    return visitor.model_dump(mode="json")


def validate_settings(raw: Any, fill_defaults: bool = False) -> dict[str, Any]:
    """Validate an untrusted church-settings payload.

    Returns only the fields the caller supplied (snake_case top level,
    settings-key spelling inside notification_emails). With fill_defaults,
    omitted fields take their documented defaults instead.
    """
    _require_object(raw)
    try:
        model = ChurchSettingsUpdate.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError(field_errors(exc)) from None

    provided = model.model_fields_set
    update: dict[str, Any] = {}
    for name in ("name", "subtitle", "primary_color"):
        value = getattr(model, name)
        if name in provided and value is not None:
            update[name] = value
    if "logo_url" in provided:
        update["logo_url"] = model.logo_url or None
    if "notification_emails" in provided and model.notification_emails is not None:
        emails = model.notification_emails.model_dump(by_alias=True, exclude_unset=True)
        update["notification_emails"] = {key: value or "" for key, value in emails.items()}

    if fill_defaults:
        defaults = default_church_settings()
        defaults.pop("id")
        defaults.pop("updated_at")
        return merge_church_settings(defaults, update)
    return update
