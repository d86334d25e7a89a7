"""
Effect endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List
from wildcards.core.database import get_session
from wildcards.schemas.lookup import CreateEffectRequest, EffectResponse
from wildcards.services.lookup_service import create_effect, list_effects

router = APIRouter(prefix="/efeitos", tags=["efeitos"])


@router.get("", response_model=List[EffectResponse])
def get_effects(session: Session = Depends(get_session)):
    """Get all effects, ordered by id."""
    return [EffectResponse.model_validate(row) for row in list_effects(session)]


@router.post("", status_code=status.HTTP_201_CREATED)
def post_effect(request: CreateEffectRequest, session: Session = Depends(get_session)):
    """Create an effect."""
    row_id = create_effect(session, request)
    return {"message": "Effect created successfully", "efeitoID": row_id}
