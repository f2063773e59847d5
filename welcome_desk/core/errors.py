# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Error taxonomy. Every error raised on purpose by the service derives from
WelcomeDeskError and carries the HTTP status and machine code the global
exception handler renders.
"""

from typing import Any, Optional


class WelcomeDeskError(Exception):
    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message}


class ValidationError(WelcomeDeskError):
    """Caller input failed schema constraints. `errors` lists every failing field."""

    status_code = 400
    code = "validation_error"

    def __init__(self, errors: list[dict[str, str]], message: str = "Validation error"):
        super().__init__(message)
        self.errors = errors

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors]

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["errors"] = self.errors
        return data


class UploadTooLargeError(ValidationError):
    status_code = 413
    code = "payload_too_large"

    def __init__(self, limit: int):
        super().__init__(
            [{"field": "logo", "message": f"File exceeds the {limit} byte limit"}],
            message="Uploaded file is too large",
        )
        self.limit = limit


class NotFoundError(WelcomeDeskError):
    status_code = 404
    code = "not_found"


class StorageError(WelcomeDeskError):
    """The store is unreachable or rejected an operation. Never retried."""

    status_code = 500
    code = "storage_error"


class ConfigurationError(WelcomeDeskError):
    """Required external configuration is absent."""

    status_code = 500
    code = "configuration_error"


class NotificationError(WelcomeDeskError):
    """Email transport failure. Recovered inside the dispatcher, never surfaced."""

    code = "notification_error"

    def __init__(self, message: str, recipient: Optional[str] = None):
        super().__init__(message)
        self.recipient = recipient
