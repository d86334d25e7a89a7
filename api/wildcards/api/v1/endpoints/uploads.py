"""
Upload endpoint for card artwork.
"""
from fastapi import APIRouter, Depends, File, UploadFile, status
from typing import Optional

from wildcards.core.config import Settings, get_settings
from wildcards.core.exceptions import ValidationError
from wildcards.schemas.upload import UploadResponse
from wildcards.services.upload_service import store_upload
from wildcards.utils.assets_utils import get_upload_directory

router = APIRouter(prefix="/upload", tags=["upload"])

UPLOAD_FIELD = "imagem"


@router.post("", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_image(
    file: Optional[UploadFile] = File(None, alias=UPLOAD_FIELD),
    settings: Settings = Depends(get_settings),
):
    """
    Store one image file and return the URL it is served from.

    The file is expected in the multipart field "imagem". It is saved under a
    generated unique name whose extension matches the detected image format.
    """
    if file is None:
        raise ValidationError("No file was uploaded")

    file_content = await file.read()
    url = store_upload(
        upload_dir=get_upload_directory(settings),
        field_name=UPLOAD_FIELD,
        original_filename=file.filename,
        file_content=file_content,
        max_bytes=settings.max_upload_bytes,
        url_prefix=settings.upload_url_prefix,
    )
    return UploadResponse(url=url)
