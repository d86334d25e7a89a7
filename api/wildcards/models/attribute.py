"""
Attribute model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional


class Attribute(SQLModel, table=True):
    """Atributos table - lookup of card attributes."""
    __tablename__ = "Atributos"

    id: Optional[int] = Field(default=None, primary_key=True, sa_column_kwargs={"name": "atributoID"})
    name: str = Field(sa_column_kwargs={"name": "nomeAtributo"})
    description: Optional[str] = Field(default=None, sa_column_kwargs={"name": "descricaoAtributo"})
