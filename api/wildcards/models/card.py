"""
Card model.
"""
from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field
from typing import Optional


class Card(SQLModel, table=True):
    """Cartas table - a playable card, bound to exactly one animal."""
    __tablename__ = "Cartas"
    # An animal can back at most one card
    __table_args__ = (UniqueConstraint("animalID", name="uq_cartas_animal"),)

    id: Optional[int] = Field(default=None, primary_key=True, sa_column_kwargs={"name": "cartaID"})
    ability: Optional[str] = Field(default=None, sa_column_kwargs={"name": "habilidade"})
    health: int = Field(sa_column_kwargs={"name": "vida"})
    size: Optional[int] = Field(default=None, sa_column_kwargs={"name": "tamanho"})
    attack: int = Field(sa_column_kwargs={"name": "ataque"})
    defense: int = Field(sa_column_kwargs={"name": "defesa"})
    cost: int = Field(sa_column_kwargs={"name": "custo"})
    animal_id: int = Field(foreign_key="Animais.animalID", sa_column_kwargs={"name": "animalID"})
