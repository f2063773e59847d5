# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Logo upload and static serving of uploaded files.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse

from welcome_desk.core.dependencies import get_logo_storage
from welcome_desk.core.errors import ValidationError
from welcome_desk.schemas import ErrorResponse, LogoUploadOut
from welcome_desk.services.logo_storage import LogoStorage

router = APIRouter(tags=["Uploads"])


@router.post("/api/upload-logo", response_model=LogoUploadOut,
             responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}})
async def upload_logo(
    logo: Optional[UploadFile] = File(default=None),
    storage: LogoStorage = Depends(get_logo_storage),
):
    if logo is None:
        raise ValidationError([{"field": "logo", "message": "No file uploaded"}])
    # Read one byte past the cap so oversize files are detected without buffering them whole.
    data = await logo.read(storage.max_bytes + 1)
    return {"logo_url": storage.save(logo.filename, logo.content_type, data)}


@router.get("/uploads/{filename}", responses={404: {"model": ErrorResponse}})
def serve_upload(filename: str, storage: LogoStorage = Depends(get_logo_storage)):
    return FileResponse(storage.resolve(filename))
