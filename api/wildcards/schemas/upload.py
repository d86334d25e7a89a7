"""
Upload schemas.
"""
from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Stable relative URL of a stored upload."""
    url: str
