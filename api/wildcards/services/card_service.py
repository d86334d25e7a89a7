"""
Card service - atomic writes of a card together with its association sets.

A card is stored as one row in Cartas plus its rows in CartasAcoes,
CartasAtributos and EfeitosCartas. Every write below runs in a single
transaction on the request's session: it either commits the card row and
all three sets, or rolls back and leaves storage untouched.
"""
import logging
from contextlib import contextmanager
from typing import Dict, Iterator, List

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from wildcards.core.database import is_duplicate_key_error
from wildcards.core.exceptions import (
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from wildcards.models import Card, CardAction, CardAttribute, CardEffect
from wildcards.schemas.card import CardWriteRequest

logger = logging.getLogger(__name__)

ANIMAL_CONFLICT_MESSAGE = "This animal is already associated with another card"

# Wire names of the fields a card cannot be written without
REQUIRED_FIELDS = {
    'health': 'vida',
    'attack': 'ataque',
    'defense': 'defesa',
    'cost': 'custo',
    'animal_id': 'animalID',
}

ASSOCIATION_TABLES = (CardAction, CardAttribute, CardEffect)


def validate_card_request(request: CardWriteRequest) -> None:
    """
    Check required card fields before any storage access.

    Raises:
        ValidationError: If health, attack, defense, cost or animalID is missing
    """
    missing = [
        wire_name for field_name, wire_name in REQUIRED_FIELDS.items()
        if getattr(request, field_name) is None
    ]
    # Ids start at 1, so animalID 0 is as good as absent
    if request.animal_id == 0:
        missing.append('animalID')
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def _card_values(request: CardWriteRequest) -> Dict:
    return {
        Card.ability: request.ability,
        Card.health: request.health,
        Card.size: request.size,
        Card.attack: request.attack,
        Card.defense: request.defense,
        Card.cost: request.cost,
        Card.animal_id: request.animal_id,
    }


@contextmanager
def _card_transaction(session: Session, operation: str) -> Iterator[None]:
    """
    Commit the work done inside the block, or roll all of it back.

    Storage failures are translated here: a duplicate key (the unique animalID)
    becomes ConflictError, anything else from the engine becomes StorageError
    with a generic message. Application errors raised inside the block
    (e.g. NotFoundError) roll back and propagate unchanged.
    """
    try:
        yield
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if is_duplicate_key_error(e):
            logger.warning(f"Card {operation} rejected: animal already bound to another card")
            raise ConflictError(ANIMAL_CONFLICT_MESSAGE) from e
        logger.error(f"Integrity error during card {operation}: {e}", exc_info=True)
        raise StorageError(f"Failed to {operation} card") from e
    except (SQLAlchemyError, OverflowError) as e:
        # OverflowError comes from the driver unwrapped (integer out of column range)
        session.rollback()
        logger.error(f"Database error during card {operation}: {e}", exc_info=True)
        raise StorageError(f"Failed to {operation} card") from e
    except Exception:
        session.rollback()
        raise


def _insert_associations(session: Session, card_id: int, request: CardWriteRequest) -> None:
    """Bulk-insert the three association sets, skipping empty ones."""
    rows: List = []
    rows.extend(CardAction(card_id=card_id, action_id=action_id) for action_id in request.action_ids or [])
    rows.extend(CardAttribute(card_id=card_id, attribute_id=attribute_id) for attribute_id in request.attribute_ids or [])
    rows.extend(CardEffect(card_id=card_id, effect_id=effect_id) for effect_id in request.effect_ids or [])
    if rows:
        session.add_all(rows)
        session.flush()


def _delete_associations(session: Session, card_id: int) -> None:
    # Junction rows go before the card row (foreign keys)
    for table in ASSOCIATION_TABLES:
        session.exec(
            delete(table)
            .where(table.card_id == card_id)
            .execution_options(synchronize_session="fetch")
        )


def create_card(session: Session, request: CardWriteRequest) -> int:
    """
    Create a card and its action, attribute and effect associations.

    Args:
        session: Database session
        request: Card fields and association id sets

    Returns:
        The new card's id

    Raises:
        ValidationError: If a required field is missing (nothing is written)
        ConflictError: If the animal already belongs to another card
        StorageError: For any other database failure (e.g. unknown animal or lookup id)
    """
    validate_card_request(request)

    with _card_transaction(session, "create"):
        card = Card(
            ability=request.ability,
            health=request.health,
            size=request.size,
            attack=request.attack,
            defense=request.defense,
            cost=request.cost,
            animal_id=request.animal_id,
        )
        session.add(card)
        session.flush()  # Assigns card.id
        card_id = card.id
        _insert_associations(session, card_id, request)

    logger.info(
        f"Created card {card_id} with {len(request.action_ids or [])} actions, "
        f"{len(request.attribute_ids or [])} attributes, {len(request.effect_ids or [])} effects"
    )
    return card_id


def update_card(session: Session, card_id: int, request: CardWriteRequest) -> None:
    """
    Replace a card's fields and all three of its association sets.

    The provided sets become the complete membership; an omitted or empty set
    leaves the card with no associations of that kind.

    Raises:
        ValidationError: If a required field is missing (nothing is written)
        NotFoundError: If no card has this id (association tables are not touched)
        ConflictError: If the animal already belongs to another card
        StorageError: For any other database failure
    """
    validate_card_request(request)

    with _card_transaction(session, "update"):
        result = session.exec(
            update(Card).where(Card.id == card_id).values(_card_values(request))
        )
        if result.rowcount == 0:
            raise NotFoundError(f"Card with id {card_id} not found")
        _delete_associations(session, card_id)
        _insert_associations(session, card_id, request)

    logger.info(f"Updated card {card_id} and replaced its associations")


def delete_card(session: Session, card_id: int) -> None:
    """
    Delete a card together with all of its association rows.

    Deleting an unknown (or already deleted) card changes nothing and raises
    NotFoundError every time.

    Raises:
        NotFoundError: If no card has this id
        StorageError: For any database failure
    """
    with _card_transaction(session, "delete"):
        _delete_associations(session, card_id)
        result = session.exec(delete(Card).where(Card.id == card_id))
        if result.rowcount == 0:
            raise NotFoundError(f"Card with id {card_id} not found")

    logger.info(f"Deleted card {card_id} and its associations")
