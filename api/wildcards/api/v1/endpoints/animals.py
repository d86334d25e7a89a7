"""
Animal endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List
from wildcards.core.database import get_session
from wildcards.schemas.lookup import CreateAnimalRequest, AnimalResponse
from wildcards.services.lookup_service import create_animal, list_animals

router = APIRouter(prefix="/animais", tags=["animais"])


@router.get("", response_model=List[AnimalResponse])
def get_animals(session: Session = Depends(get_session)):
    """Get all animals."""
    return [AnimalResponse.model_validate(row) for row in list_animals(session)]


@router.post("", status_code=status.HTTP_201_CREATED)
def post_animal(request: CreateAnimalRequest, session: Session = Depends(get_session)):
    """Create an animal. The referenced image must already exist, otherwise 500."""
    row_id = create_animal(session, request)
    return {"message": "Animal created successfully", "animalID": row_id}
