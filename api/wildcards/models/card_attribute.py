"""
CardAttribute model - junction table for the many-to-many relationship between cards and attributes.
"""
from sqlmodel import SQLModel, Field


class CardAttribute(SQLModel, table=True):
    """CartasAtributos junction table."""
    __tablename__ = "CartasAtributos"

    card_id: int = Field(foreign_key="Cartas.cartaID", primary_key=True, sa_column_kwargs={"name": "cartaFK"})
    attribute_id: int = Field(foreign_key="Atributos.atributoID", primary_key=True, sa_column_kwargs={"name": "atributoFK"})
