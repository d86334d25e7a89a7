"""
Shared utilities for upload directory management.
"""
import logging
from pathlib import Path

from wildcards.core.config import Settings

logger = logging.getLogger(__name__)


def get_upload_directory(settings: Settings) -> Path:
    """
    Get the directory uploaded card artwork is stored in.

    Uses UPLOAD_DIR if set (e.g. a mounted volume), otherwise falls back to
    the api/assets/uploads directory.

    Returns:
        Path to the upload directory
    """
    if settings.upload_dir:
        return Path(settings.upload_dir)
    # utils -> wildcards -> api, then into assets/uploads
    api_root = Path(__file__).parent.parent.parent
    return api_root / "assets" / "uploads"


def ensure_upload_directory(settings: Settings) -> Path:
    """
    Ensure the upload directory exists and return its path.
    Safe to call any number of times.
    """
    upload_dir = get_upload_directory(settings)
    upload_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Using upload directory: {upload_dir}")
    return upload_dir
