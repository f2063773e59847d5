# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Church logo uploads on local disk.
"""

import time
import uuid
from pathlib import Path
from typing import Optional

from welcome_desk.core.errors import NotFoundError, UploadTooLargeError, ValidationError
from welcome_desk.core.logging import get_logger
from welcome_desk.metrics import LOGO_UPLOADS

logger = get_logger(__name__)

URL_PREFIX = "/uploads/"

ALLOWED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".webp"}

CONTENT_TYPE_EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


class LogoStorage:
    def __init__(self, upload_dir: str, max_bytes: int):
        self._dir = Path(upload_dir)
        self._max_bytes = max_bytes

    @property
    def max_bytes(self) -> int:
        return self._max_bytes

    def save(self, filename: Optional[str], content_type: Optional[str], data: bytes) -> str:
        """Store an image and return its public URL. Raises ValidationError on bad input."""
        if not data:
            LOGO_UPLOADS.labels(status="rejected").inc()
            raise ValidationError([{"field": "logo", "message": "No file uploaded"}])
        if not (content_type or "").startswith("image/"):
            LOGO_UPLOADS.labels(status="rejected").inc()
            raise ValidationError([{"field": "logo", "message": "Only image files are allowed"}])
        extension = Path(filename or "").suffix.lower() or CONTENT_TYPE_EXTENSIONS.get(content_type, "")
        if extension not in ALLOWED_EXTENSIONS:
            LOGO_UPLOADS.labels(status="rejected").inc()
            raise ValidationError([{"field": "logo", "message": "Only PNG, JPEG, GIF or WebP images are allowed"}])
        if len(data) > self._max_bytes:
            LOGO_UPLOADS.labels(status="too_large").inc()
            raise UploadTooLargeError(self._max_bytes)

        self._dir.mkdir(parents=True, exist_ok=True)
        stored_name = f"church-logo-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{extension}"
        (self._dir / stored_name).write_bytes(data)

        LOGO_UPLOADS.labels(status="ok").inc()
        logger.info("Logo stored as %s (%d bytes)", stored_name, len(data))
        return URL_PREFIX + stored_name

    def resolve(self, filename: str) -> Path:
        """Path of a stored upload; only bare file names inside the upload dir resolve."""
        if not filename or filename != Path(filename).name or filename.startswith("."):
            raise NotFoundError("File not found")
        path = self._dir / filename
        if not path.is_file():
            raise NotFoundError("File not found")
        return path
