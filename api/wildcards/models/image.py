"""
Image model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional


class Image(SQLModel, table=True):
    """Imagens table - card artwork, referenced by animals."""
    __tablename__ = "Imagens"

    id: Optional[int] = Field(default=None, primary_key=True, sa_column_kwargs={"name": "imagemID"})
    url: str = Field(sa_column_kwargs={"name": "urlImagem"})  # Usually a /uploads/... URL
