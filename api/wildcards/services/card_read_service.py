"""
Card read service - denormalized card views for clients.
"""
from typing import List

from sqlmodel import Session, select

from wildcards.core.exceptions import NotFoundError
from wildcards.models import (
    Action,
    Animal,
    Attribute,
    Card,
    CardAction,
    CardAttribute,
    CardEffect,
    Effect,
    Image,
)
from wildcards.schemas.card import CardDetailResponse, CardResponse
from wildcards.schemas.lookup import ActionResponse, AttributeResponse, EffectResponse


def _joined_cards_query():
    """Cards joined with their animal and the animal's image."""
    return (
        select(Card, Animal, Image)
        .select_from(Card)
        .join(Animal, Card.animal_id == Animal.id)
        .join(Image, Animal.image_id == Image.id)
    )


def _card_fields(card: Card, animal: Animal, image: Image) -> dict:
    return dict(
        card_id=card.id,
        ability=card.ability,
        health=card.health,
        size=card.size,
        attack=card.attack,
        defense=card.defense,
        cost=card.cost,
        animal_id=card.animal_id,
        scientific_name=animal.scientific_name,
        animal_description=animal.description,
        image_url=image.url,
    )


def list_cards(session: Session) -> List[CardResponse]:
    """Get every card with its animal and image, ordered by card id."""
    rows = session.exec(_joined_cards_query().order_by(Card.id)).all()
    return [CardResponse(**_card_fields(card, animal, image)) for card, animal, image in rows]


def get_card(session: Session, card_id: int) -> CardDetailResponse:
    """
    Get one card with its animal, image and association sets.

    Raises:
        NotFoundError: If no card has this id
    """
    row = session.exec(_joined_cards_query().where(Card.id == card_id)).first()
    if row is None:
        raise NotFoundError(f"Card with id {card_id} not found")
    card, animal, image = row

    actions = session.exec(
        select(Action)
        .join(CardAction, CardAction.action_id == Action.id)
        .where(CardAction.card_id == card_id)
        .order_by(Action.id)
    ).all()
    attributes = session.exec(
        select(Attribute)
        .join(CardAttribute, CardAttribute.attribute_id == Attribute.id)
        .where(CardAttribute.card_id == card_id)
        .order_by(Attribute.id)
    ).all()
    effects = session.exec(
        select(Effect)
        .join(CardEffect, CardEffect.effect_id == Effect.id)
        .where(CardEffect.card_id == card_id)
        .order_by(Effect.id)
    ).all()

    return CardDetailResponse(
        **_card_fields(card, animal, image),
        actions=[ActionResponse.model_validate(action) for action in actions],
        attributes=[AttributeResponse.model_validate(attribute) for attribute in attributes],
        effects=[EffectResponse.model_validate(effect) for effect in effects],
    )
