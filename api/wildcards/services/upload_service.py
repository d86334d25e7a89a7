"""
Upload service for card artwork files.
"""
import io
import logging
import uuid
from pathlib import Path
from typing import Optional

from PIL import Image as PILImage

from wildcards.core.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)


# Served extension for formats whose first registered one is unusual
PREFERRED_EXTENSIONS = {"JPEG": ".jpg", "TIFF": ".tif"}


def verify_image(file_content: bytes) -> str:
    """
    Check that the uploaded bytes decode as an image.

    Returns:
        The format Pillow detected, e.g. "PNG"

    Raises:
        ValidationError: If Pillow cannot identify or verify the file
    """
    try:
        with PILImage.open(io.BytesIO(file_content)) as img:
            image_format = img.format
            img.verify()
    except Exception as e:
        raise ValidationError(f"Invalid image file: {str(e)}") from e
    return image_format


def build_upload_name(field_name: str, original_filename: Optional[str], image_format: str) -> str:
    """
    Unique file name for an upload, with an extension matching its format.

    The original extension is kept when it belongs to the detected format,
    and the format's own extension is used when the file has none.

    Raises:
        ValidationError: If the original extension names another format
    """
    registered = PILImage.registered_extensions()
    extension = Path(original_filename).suffix if original_filename else ""
    if not extension:
        extension = PREFERRED_EXTENSIONS.get(image_format) or next(
            (ext for ext, fmt in registered.items() if fmt == image_format), ""
        )
    elif registered.get(extension.lower()) != image_format:
        raise ValidationError(f"File extension {extension} does not match the {image_format} image format")
    return f"{field_name}-{uuid.uuid4().hex}{extension}"


def store_upload(
    upload_dir: Path,
    field_name: str,
    original_filename: Optional[str],
    file_content: bytes,
    max_bytes: int,
    url_prefix: str,
) -> str:
    """
    Persist one uploaded image and return its stable relative URL.

    Args:
        upload_dir: Directory to store the file in (created if missing)
        field_name: Multipart field the file arrived in, used as name prefix
        original_filename: Client-side file name, only its extension is kept
        file_content: Raw file bytes
        max_bytes: Largest accepted upload
        url_prefix: URL path the upload directory is served under

    Returns:
        URL such as /uploads/imagem-<hex>.png

    Raises:
        ValidationError: If the file is empty, too large, not an image, or named
            with another format's extension
        StorageError: If the file cannot be written
    """
    if not file_content:
        raise ValidationError("No file was uploaded")
    if len(file_content) > max_bytes:
        raise ValidationError(f"File exceeds the maximum upload size of {max_bytes} bytes")
    image_format = verify_image(file_content)

    filename = build_upload_name(field_name, original_filename, image_format)
    try:
        upload_dir.mkdir(parents=True, exist_ok=True)
        (upload_dir / filename).write_bytes(file_content)
    except OSError as e:
        logger.error(f"Failed to write upload {filename}: {e}", exc_info=True)
        raise StorageError("Failed to store uploaded file") from e

    logger.info(f"Stored upload {filename} ({len(file_content)} bytes)")
    return f"{url_prefix.rstrip('/')}/{filename}"
