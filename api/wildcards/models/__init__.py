"""
Models package - imports all models so they are registered with SQLModel metadata.
"""
from wildcards.models.image import Image
from wildcards.models.animal import Animal
from wildcards.models.card import Card
from wildcards.models.attribute import Attribute
from wildcards.models.action import Action
from wildcards.models.effect import Effect
from wildcards.models.card_action import CardAction
from wildcards.models.card_attribute import CardAttribute
from wildcards.models.card_effect import CardEffect

__all__ = [
    'Image',
    'Animal',
    'Card',
    'Attribute',
    'Action',
    'Effect',
    'CardAction',
    'CardAttribute',
    'CardEffect',
]
