"""
Lookup service - images, animals, attributes, actions and effects.

These rows exist independently of cards; card writes only reference them.
"""
import logging
from typing import List, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from wildcards.core.exceptions import StorageError, ValidationError
from wildcards.models import Action, Animal, Attribute, Effect, Image
from wildcards.schemas.lookup import (
    CreateActionRequest,
    CreateAnimalRequest,
    CreateAttributeRequest,
    CreateEffectRequest,
    CreateImageRequest,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=SQLModel)


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _insert(session: Session, row: T, label: str) -> int:
    """Insert one row in its own transaction and return its id."""
    try:
        session.add(row)
        session.commit()
        session.refresh(row)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Error inserting {label}: {e}", exc_info=True)
        raise StorageError(f"Failed to create {label}") from e
    logger.info(f"Created {label} {row.id}")
    return row.id


def _list(session: Session, model: Type[T]) -> List[T]:
    return list(session.exec(select(model).order_by(model.id)).all())


def create_image(session: Session, request: CreateImageRequest) -> int:
    """
    Register an image URL.

    Raises:
        ValidationError: If urlImagem is missing
        StorageError: If the insert fails
    """
    if _is_blank(request.url):
        raise ValidationError("urlImagem is required")
    return _insert(session, Image(url=request.url), "image")


def create_animal(session: Session, request: CreateAnimalRequest) -> int:
    """
    Create an animal pointing at an existing image.

    Raises:
        ValidationError: If nomeCientifico or imagemID is missing
        StorageError: If the insert fails (e.g. unknown imagemID)
    """
    if _is_blank(request.scientific_name) or not request.image_id:
        raise ValidationError("nomeCientifico and imagemID are required")
    animal = Animal(
        scientific_name=request.scientific_name,
        description=request.description,
        image_id=request.image_id,
    )
    return _insert(session, animal, "animal")


def create_attribute(session: Session, request: CreateAttributeRequest) -> int:
    """Create an attribute; nomeAtributo is required."""
    if _is_blank(request.name):
        raise ValidationError("nomeAtributo is required")
    return _insert(session, Attribute(name=request.name, description=request.description), "attribute")


def create_action(session: Session, request: CreateActionRequest) -> int:
    """Create an action; nomeAcao is required."""
    if _is_blank(request.name):
        raise ValidationError("nomeAcao is required")
    return _insert(session, Action(name=request.name, description=request.description), "action")


def create_effect(session: Session, request: CreateEffectRequest) -> int:
    """Create an effect; nomeEfeito is required."""
    if _is_blank(request.name):
        raise ValidationError("nomeEfeito is required")
    return _insert(session, Effect(name=request.name, description=request.description), "effect")


def list_images(session: Session) -> List[Image]:
    return _list(session, Image)


def list_animals(session: Session) -> List[Animal]:
    return _list(session, Animal)


def list_attributes(session: Session) -> List[Attribute]:
    return _list(session, Attribute)


def list_actions(session: Session) -> List[Action]:
    return _list(session, Action)


def list_effects(session: Session) -> List[Effect]:
    return _list(session, Effect)
