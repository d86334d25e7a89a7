"""
CardAction model - junction table for the many-to-many relationship between cards and actions.
"""
from sqlmodel import SQLModel, Field


class CardAction(SQLModel, table=True):
    """CartasAcoes junction table."""
    __tablename__ = "CartasAcoes"

    card_id: int = Field(foreign_key="Cartas.cartaID", primary_key=True, sa_column_kwargs={"name": "cartaFK"})
    action_id: int = Field(foreign_key="Acoes.acaoID", primary_key=True, sa_column_kwargs={"name": "acaoFK"})
