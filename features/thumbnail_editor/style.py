"""Style analyzer adapter - reference thumbnails to a style prompt fragment."""

from __future__ import annotations

from typing import Sequence

from core.errors import ValidationError
from core.models import ImageData, StyleAttributes

NO_STYLE_IMAGES_MESSAGE = "Upload at least one thumbnail to copy its style."


def style_prompt_fragment(attributes: StyleAttributes) -> str:
    """Render style attributes as text injected into thumbnail prompts."""
    return (
        "Apply a style similar to the references. Key characteristics:\n"
        f"-   Color Palette: {', '.join(attributes.palette)}\n"
        f"-   Typography: {attributes.typography}\n"
        f"-   Layout: {attributes.layout}\n"
        f"-   Effects: {attributes.effects}"
    )


def analyze(gateway, images: Sequence[ImageData]) -> tuple[StyleAttributes, str]:
    """Analyze 1..N reference images. Returns (attributes, prompt fragment)."""
    if not images:
        raise ValidationError(NO_STYLE_IMAGES_MESSAGE)
    attributes = gateway.analyze_style(list(images))
    return attributes, style_prompt_fragment(attributes)
