"""
Animal model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional


class Animal(SQLModel, table=True):
    """Animais table - the creature a card depicts."""
    __tablename__ = "Animais"

    id: Optional[int] = Field(default=None, primary_key=True, sa_column_kwargs={"name": "animalID"})
    scientific_name: str = Field(sa_column_kwargs={"name": "nomeCientifico"})
    description: Optional[str] = Field(default=None, sa_column_kwargs={"name": "descricaoAnimal"})
    image_id: int = Field(foreign_key="Imagens.imagemID", sa_column_kwargs={"name": "imagemID"})
