"""
Card CRUD endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List
from wildcards.core.database import get_session
from wildcards.schemas.card import (
    CardCreatedResponse,
    CardDetailResponse,
    CardResponse,
    CardWriteRequest,
    MessageResponse,
)
from wildcards.services.card_read_service import get_card, list_cards
from wildcards.services.card_service import create_card, delete_card, update_card

router = APIRouter(prefix="/cartas", tags=["cartas"])


@router.get("", response_model=List[CardResponse])
def get_cards(session: Session = Depends(get_session)):
    """Get all cards joined with their animal and image."""
    return list_cards(session)


@router.get("/{card_id}", response_model=CardDetailResponse)
def get_card_by_id(card_id: int, session: Session = Depends(get_session)):
    """Get one card with its actions, attributes and effects."""
    return get_card(session, card_id)


@router.post("", response_model=CardCreatedResponse, status_code=status.HTTP_201_CREATED)
def post_card(request: CardWriteRequest, session: Session = Depends(get_session)):
    """
    Create a card and its associations in one transaction.

    Returns 400 if a required field is missing, 409 if the animal already
    belongs to another card.
    """
    card_id = create_card(session, request)
    return CardCreatedResponse(message="Card created successfully", card_id=card_id)


@router.put("/{card_id}", response_model=MessageResponse)
def put_card(card_id: int, request: CardWriteRequest, session: Session = Depends(get_session)):
    """Replace a card's fields and all of its association sets."""
    update_card(session, card_id, request)
    return MessageResponse(message="Card updated successfully")


@router.delete("/{card_id}", response_model=MessageResponse)
def remove_card(card_id: int, session: Session = Depends(get_session)):
    """Delete a card and every association row that references it."""
    delete_card(session, card_id)
    return MessageResponse(message="Card and its associations deleted successfully")
