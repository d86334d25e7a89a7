"""
Effect model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional


class Effect(SQLModel, table=True):
    """Efeitos table - lookup of effects a card applies."""
    __tablename__ = "Efeitos"

    id: Optional[int] = Field(default=None, primary_key=True, sa_column_kwargs={"name": "efeitoID"})
    name: str = Field(sa_column_kwargs={"name": "nomeEfeito"})
    description: Optional[str] = Field(default=None, sa_column_kwargs={"name": "descricaoEfeito"})
