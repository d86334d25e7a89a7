"""
Attribute endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List
from wildcards.core.database import get_session
from wildcards.schemas.lookup import CreateAttributeRequest, AttributeResponse
from wildcards.services.lookup_service import create_attribute, list_attributes

router = APIRouter(prefix="/atributos", tags=["atributos"])


@router.get("", response_model=List[AttributeResponse])
def get_attributes(session: Session = Depends(get_session)):
    return [AttributeResponse.model_validate(row) for row in list_attributes(session)]


@router.post("", status_code=status.HTTP_201_CREATED)
def post_attribute(request: CreateAttributeRequest, session: Session = Depends(get_session)):
    """Create an attribute."""
    row_id = create_attribute(session, request)
    return {"message": "Attribute created successfully", "atributoID": row_id}
