# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain constants — pure data, NO FastAPI dependency.
"""

from enum import Enum
from typing import Any


class AgeGroup(str, Enum):
    CHILDREN = "children"
    YOUTH = "youth"
    YOUNG_ADULT = "young_adult"
    ADULT = "adult"
    SENIOR = "senior"


class Language(str, Enum):
    EN = "en"
    ES = "es"


# Visitor age groups and settings keys use different spellings for the
# same ministry. A new age group needs an entry here and in NOTIFICATION_KEYS.
AGE_GROUP_NOTIFICATION_KEY: dict[str, str] = {
    AgeGroup.CHILDREN.value: "children",
    AgeGroup.YOUTH.value: "youth",
    AgeGroup.YOUNG_ADULT.value: "youngAdult",
    AgeGroup.ADULT.value: "adult",
    AgeGroup.SENIOR.value: "senior",
}

NOTIFICATION_KEYS: tuple[str, ...] = ("children", "youth", "youngAdult", "adult", "senior")

AGE_GROUP_LABELS: dict[str, dict[str, str]] = {
    AgeGroup.CHILDREN.value: {"en": "Children (0-12)", "es": "Niños (0-12)"},
    AgeGroup.YOUTH.value: {"en": "Youth (13-17)", "es": "Jóvenes (13-17)"},
    AgeGroup.YOUNG_ADULT.value: {"en": "Young Adult (18-30)", "es": "Jóvenes Adultos (18-30)"},
    AgeGroup.ADULT.value: {"en": "Adult (31-64)", "es": "Adultos (31-64)"},
    AgeGroup.SENIOR.value: {"en": "Senior (65+)", "es": "Adultos Mayores (65+)"},
}

LANGUAGE_NAMES: dict[str, str] = {Language.EN.value: "English", Language.ES.value: "Spanish"}

DEFAULT_CHURCH_NAME = "Grace Community Church"
DEFAULT_SUBTITLE = "Welcome Center"
DEFAULT_PRIMARY_COLOR = "#1976D2"


def default_notification_emails() -> dict[str, str]:
    return {key: "" for key in NOTIFICATION_KEYS}


def default_church_settings() -> dict[str, Any]:
    """Settings served when none have been persisted yet."""
    return {
        "id": None,
        "name": DEFAULT_CHURCH_NAME,
        "subtitle": DEFAULT_SUBTITLE,
        "logo_url": None,
        "primary_color": DEFAULT_PRIMARY_COLOR,
        "notification_emails": default_notification_emails(),
        "updated_at": None,
    }


def merge_church_settings(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Shallow merge of top-level fields; notification_emails merged key by key."""
    merged = dict(base)
    for key, value in update.items():
        if key == "notification_emails":
            emails = dict(base.get("notification_emails") or {})
            emails.update(value or {})
            merged["notification_emails"] = emails
        else:
            merged[key] = value
    return merged
