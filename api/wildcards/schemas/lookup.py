"""
Schemas for the entities cards only reference: images, animals, attributes, actions and effects.
"""
from pydantic import BaseModel, Field
from typing import Optional


class ImageResponse(BaseModel):
    """Image response schema."""
    id: int = Field(..., alias="imagemID")
    url: str = Field(..., alias="urlImagem")

    class Config:
        from_attributes = True
        populate_by_name = True


class CreateImageRequest(BaseModel):
    """Request schema for registering an image URL."""
    url: Optional[str] = Field(None, alias="urlImagem")

    class Config:
        populate_by_name = True


class AnimalResponse(BaseModel):
    """Animal response schema."""
    id: int = Field(..., alias="animalID")
    scientific_name: str = Field(..., alias="nomeCientifico")
    description: Optional[str] = Field(None, alias="descricaoAnimal")
    image_id: int = Field(..., alias="imagemID")

    class Config:
        from_attributes = True
        populate_by_name = True


class CreateAnimalRequest(BaseModel):
    """Request schema for creating an animal."""
    scientific_name: Optional[str] = Field(None, alias="nomeCientifico")
    description: Optional[str] = Field(None, alias="descricaoAnimal")
    image_id: Optional[int] = Field(None, alias="imagemID")

    class Config:
        populate_by_name = True


class AttributeResponse(BaseModel):
    """Attribute response schema."""
    id: int = Field(..., alias="atributoID")
    name: str = Field(..., alias="nomeAtributo")
    description: Optional[str] = Field(None, alias="descricaoAtributo")

    class Config:
        from_attributes = True
        populate_by_name = True


class CreateAttributeRequest(BaseModel):
    """Request schema for creating an attribute."""
    name: Optional[str] = Field(None, alias="nomeAtributo")
    description: Optional[str] = Field(None, alias="descricaoAtributo")

    class Config:
        populate_by_name = True


class ActionResponse(BaseModel):
    """Action response schema."""
    id: int = Field(..., alias="acaoID")
    name: str = Field(..., alias="nomeAcao")
    description: Optional[str] = Field(None, alias="descricaoAcao")

    class Config:
        from_attributes = True
        populate_by_name = True


class CreateActionRequest(BaseModel):
    """Request schema for creating an action."""
    name: Optional[str] = Field(None, alias="nomeAcao")
    description: Optional[str] = Field(None, alias="descricaoAcao")

    class Config:
        populate_by_name = True


class EffectResponse(BaseModel):
    """Effect response schema."""
    id: int = Field(..., alias="efeitoID")
    name: str = Field(..., alias="nomeEfeito")
    description: Optional[str] = Field(None, alias="descricaoEfeito")

    class Config:
        from_attributes = True
        populate_by_name = True


class CreateEffectRequest(BaseModel):
    """Request schema for creating an effect."""
    name: Optional[str] = Field(None, alias="nomeEfeito")
    description: Optional[str] = Field(None, alias="descricaoEfeito")

    class Config:
        populate_by_name = True

