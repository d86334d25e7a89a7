"""
Action endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List
from wildcards.core.database import get_session
from wildcards.schemas.lookup import CreateActionRequest, ActionResponse
from wildcards.services.lookup_service import create_action, list_actions

router = APIRouter(prefix="/acoes", tags=["acoes"])


@router.get("", response_model=List[ActionResponse])
def get_actions(session: Session = Depends(get_session)):
    return [ActionResponse.model_validate(row) for row in list_actions(session)]


@router.post("", status_code=status.HTTP_201_CREATED)
def post_action(request: CreateActionRequest, session: Session = Depends(get_session)):
    """Create an action."""
    row_id = create_action(session, request)
    return {"message": "Action created successfully", "acaoID": row_id}
