"""
Image record endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List
from wildcards.core.database import get_session
from wildcards.schemas.lookup import CreateImageRequest, ImageResponse
from wildcards.services.lookup_service import create_image, list_images

router = APIRouter(prefix="/imagens", tags=["imagens"])


@router.get("", response_model=List[ImageResponse])
def get_images(session: Session = Depends(get_session)):
    """Get all images."""
    return [ImageResponse.model_validate(row) for row in list_images(session)]


@router.post("", status_code=status.HTTP_201_CREATED)
def post_image(request: CreateImageRequest, session: Session = Depends(get_session)):
    """Register an image URL, typically one returned by POST /upload."""
    row_id = create_image(session, request)
    return {"message": "Image created successfully", "imagemID": row_id}
