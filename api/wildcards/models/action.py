"""
Action model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional


class Action(SQLModel, table=True):
    """Acoes table - lookup of actions a card can perform."""
    __tablename__ = "Acoes"

    id: Optional[int] = Field(default=None, primary_key=True, sa_column_kwargs={"name": "acaoID"})
    name: str = Field(sa_column_kwargs={"name": "nomeAcao"})
    description: Optional[str] = Field(default=None, sa_column_kwargs={"name": "descricaoAcao"})
