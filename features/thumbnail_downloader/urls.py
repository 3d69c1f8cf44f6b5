"""Video URL -> thumbnail URL derivation. Pure string transforms, no network."""

from __future__ import annotations

import re
from dataclasses import dataclass

from config import THUMBNAIL_QUALITIES, THUMBNAIL_URL_TEMPLATE
from core.errors import ValidationError

INVALID_URL_MESSAGE = "Invalid YouTube URL. Please check the link and try again."

# watch?v=, &v=, youtu.be/, embed/, v/, e/, shorts/, live/
VIDEO_ID_PATTERN = re.compile(
    r"(?:https?://)?(?:www\.|m\.)?"
    r"(?:youtube\.com/(?:[^/\n\s]+/\S+/|(?:v|e(?:mbed)?|shorts|live)/|\S*?[?&]v=)|youtu\.be/)"
    r"([a-zA-Z0-9_-]{11})"
)


@dataclass(frozen=True)
class ThumbnailLink:
    quality: str
    url: str


def extract_video_id(url: str) -> str | None:
    match = VIDEO_ID_PATTERN.search(url or "")
    return match.group(1) if match else None


def thumbnail_links(url: str) -> list[ThumbnailLink]:
    """Thumbnail links for a pasted video URL. Raises ValidationError if no id is found."""
    video_id = extract_video_id(url.strip() if url else "")
    if not video_id:
        raise ValidationError(INVALID_URL_MESSAGE)
    return [
        ThumbnailLink(quality=quality, url=THUMBNAIL_URL_TEMPLATE.format(video_id=video_id, name=name))
        for quality, name in THUMBNAIL_QUALITIES
    ]
