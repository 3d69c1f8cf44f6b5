"""Image handling utilities for thumbnails and uploads."""

import io
from typing import Optional

from PIL import Image, ImageOps

# Upload formats the Images API accepts as references
IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.webp'}
IMAGE_FORMATS = {'JPEG', 'PNG', 'WEBP'}


def image_format(data: bytes) -> Optional[str]:
    """Pillow format name of a payload (e.g. 'PNG'), or None if unreadable."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            return img.format
    except Exception:
        return None


def validate_image_bytes(data: bytes) -> bool:
    """
    Validate that a payload is a readable image.

    Args:
        data: Raw file bytes

    Returns:
        True if Pillow can identify and verify the image, False otherwise
    """
    if not data:
        return False
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
        return True
    except Exception:
        return False


def is_supported_upload(data: bytes) -> bool:
    """True for a readable PNG, JPEG or WebP payload."""
    return validate_image_bytes(data) and image_format(data) in IMAGE_FORMATS


def _to_rgb(img: Image.Image) -> Image.Image:
    """Flatten transparency onto white and convert to RGB."""
    if img.mode in ('RGBA', 'LA', 'P'):
        background = Image.new('RGB', img.size, (255, 255, 255))
        if img.mode == 'P':
            img = img.convert('RGBA')
        background.paste(img, mask=img.split()[-1] if img.mode in ('RGBA', 'LA') else None)
        return background
    if img.mode != 'RGB':
        return img.convert('RGB')
    return img


def fit_thumbnail(data: bytes, size: tuple = (1280, 720)) -> bytes:
    """
    Crop and resize an image to exactly ``size`` and encode it as PNG.

    Raises:
        PIL.UnidentifiedImageError / OSError if the payload is not an image.
    """
    with Image.open(io.BytesIO(data)) as img:
        img = _to_rgb(img)
        if img.size != tuple(size):
            img = ImageOps.fit(img, size, Image.Resampling.LANCZOS)
        buffer = io.BytesIO()
        img.save(buffer, format='PNG')
        return buffer.getvalue()


def create_preview(data: bytes, size: tuple = (200, 200)) -> Optional[bytes]:
    """
    Create a small JPEG preview for upload galleries.

    Returns:
        Bytes of the preview image, or None if creation fails
    """
    if not validate_image_bytes(data):
        return None
    try:
        with Image.open(io.BytesIO(data)) as img:
            img = _to_rgb(img)
            img.thumbnail(size, Image.Resampling.LANCZOS)
            buffer = io.BytesIO()
            img.save(buffer, format='JPEG', quality=85)
            return buffer.getvalue()
    except Exception:
        return None
