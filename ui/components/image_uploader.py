"""Image upload component - turns uploaded files into ImageData values."""

import logging

import streamlit as st

from core.models import ImageData
from utils.image_utils import IMAGE_EXTENSIONS, create_preview, is_supported_upload

logger = logging.getLogger(__name__)

UPLOAD_TYPES = sorted(ext.lstrip(".") for ext in IMAGE_EXTENSIONS)


def files_to_images(files) -> tuple[list[ImageData], list[str]]:
    """Convert uploaded files to ImageData, keeping PNG/JPEG/WebP only. Returns (images, skipped filenames)."""
    images: list[ImageData] = []
    skipped: list[str] = []
    for f in files:
        data = f.getvalue()
        if not is_supported_upload(data):
            logger.warning(f"Skipping unsupported upload: {f.name}")
            skipped.append(f.name)
            continue
        images.append(ImageData.from_bytes(data, f.name))
    return images, skipped


def render_image_uploader(label: str, key: str, multiple: bool) -> list[ImageData]:
    """Render a file uploader with previews. Removing a file in the widget drops it."""
    uploaded = st.file_uploader(label, type=UPLOAD_TYPES, accept_multiple_files=multiple, key=key)
    if not uploaded:
        return []
    files = uploaded if multiple else [uploaded]
    images, skipped = files_to_images(files)
    if skipped:
        st.warning(f"Skipped files that are not PNG, JPEG or WebP images: {', '.join(skipped)}")
    if images:
        cols = st.columns(min(len(images), 4))
        for i, img in enumerate(images):
            preview = create_preview(img.to_bytes())
            if preview:
                with cols[i % len(cols)]:
                    st.image(preview, caption=img.name, use_container_width=True)
    return images
