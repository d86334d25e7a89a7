"""
Card schemas.
"""
from pydantic import BaseModel, Field, StrictInt, field_validator
from typing import List, Optional
from wildcards.schemas.lookup import ActionResponse, AttributeResponse, EffectResponse
from wildcards.schemas.utils import normalize_id_set


class CardWriteRequest(BaseModel):
    """Request schema for creating or replacing a card and its associations.

    Required fields are Optional here on purpose: their absence is reported by
    the card service as a 400, not by pydantic as a 422.
    """
    ability: Optional[str] = Field(None, alias="habilidade")
    health: Optional[int] = Field(None, alias="vida")
    size: Optional[int] = Field(None, alias="tamanho")
    attack: Optional[int] = Field(None, alias="ataque")
    defense: Optional[int] = Field(None, alias="defesa")
    cost: Optional[int] = Field(None, alias="custo")
    animal_id: Optional[StrictInt] = Field(None, alias="animalID")
    action_ids: Optional[List[StrictInt]] = Field(default=None, alias="acoesIds")
    attribute_ids: Optional[List[StrictInt]] = Field(default=None, alias="atributosIds")
    effect_ids: Optional[List[StrictInt]] = Field(default=None, alias="efeitosIds")

    @field_validator('action_ids', 'attribute_ids', 'effect_ids')
    @classmethod
    def validate_id_set(cls, v):
        """Treat the id lists as sets; null means empty."""
        return normalize_id_set(v)

    class Config:
        populate_by_name = True


class CardCreatedResponse(BaseModel):
    """Response schema for a created card."""
    message: str
    card_id: int = Field(..., alias="cartaID")

    class Config:
        populate_by_name = True


class MessageResponse(BaseModel):
    """Plain acknowledgement."""
    message: str


class CardResponse(BaseModel):
    """Card joined with its animal and the animal's image."""
    card_id: int = Field(..., alias="cartaID")
    ability: Optional[str] = Field(None, alias="habilidade")
    health: int = Field(..., alias="vida")
    size: Optional[int] = Field(None, alias="tamanho")
    attack: int = Field(..., alias="ataque")
    defense: int = Field(..., alias="defesa")
    cost: int = Field(..., alias="custo")
    animal_id: int = Field(..., alias="animalID")
    scientific_name: str = Field(..., alias="nomeCientifico")
    animal_description: Optional[str] = Field(None, alias="descricaoAnimal")
    image_url: str = Field(..., alias="urlImagem")

    class Config:
        populate_by_name = True


class CardDetailResponse(CardResponse):
    """Single card view with its association sets embedded."""
    actions: List[ActionResponse] = Field(default_factory=list, alias="acoes")
    attributes: List[AttributeResponse] = Field(default_factory=list, alias="atributos")
    effects: List[EffectResponse] = Field(default_factory=list, alias="efeitos")
