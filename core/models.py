"""Domain types for the content wizard."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field

# Magic-byte prefixes for the formats the uploader accepts
_MIME_SIGNATURES = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
)


@dataclass(frozen=True)
class TitleCandidate:
    """One proposed title string returned by the generation call."""
    text: str


@dataclass(frozen=True)
class ImageData:
    """An uploaded image as base64 plus its original filename."""
    base64: str
    name: str

    @classmethod
    def from_bytes(cls, data: bytes, name: str) -> "ImageData":
        return cls(base64=base64.b64encode(data).decode("utf-8"), name=name)

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.base64)

    @property
    def mime_type(self) -> str:
        """Mime type sniffed from the payload, defaulting to JPEG."""
        head = self.to_bytes()[:12]
        for signature, mime in _MIME_SIGNATURES:
            if head.startswith(signature):
                return mime
        if head[:4] == b"RIFF" and head[8:12] == b"WEBP":
            return "image/webp"
        return "image/jpeg"


@dataclass(frozen=True)
class ThumbnailArtifact:
    """One generated or edited thumbnail. Edits always produce a new artifact."""
    base64: str
    mime_type: str = "image/png"

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.base64)

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64}"


@dataclass(frozen=True)
class StyleAttributes:
    """Style extracted from reference thumbnails."""
    palette: tuple[str, ...]
    typography: str
    layout: str
    effects: str


@dataclass
class MetadataResult:
    """Keywords and description for the selected title, with per-part status.

    Status values follow the workflow convention:
    "pending", "in_progress", "completed", "failed".
    """
    keywords: list[str] = field(default_factory=list)
    description: str = ""
    keywords_status: str = "pending"
    description_status: str = "pending"
    error: str | None = None

    @property
    def is_loading(self) -> bool:
        return "in_progress" in (self.keywords_status, self.description_status)

    @property
    def is_complete(self) -> bool:
        return self.keywords_status == "completed" and self.description_status == "completed"

    @property
    def keywords_text(self) -> str:
        """Clipboard payload for the keyword list."""
        return ", ".join(self.keywords)
