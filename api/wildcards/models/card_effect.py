"""
CardEffect model - junction table for the many-to-many relationship between cards and effects.
"""
from sqlmodel import SQLModel, Field


class CardEffect(SQLModel, table=True):
    """EfeitosCartas junction table."""
    __tablename__ = "EfeitosCartas"

    card_id: int = Field(foreign_key="Cartas.cartaID", primary_key=True, sa_column_kwargs={"name": "cartaFK"})
    effect_id: int = Field(foreign_key="Efeitos.efeitoID", primary_key=True, sa_column_kwargs={"name": "efeitoFK"})
