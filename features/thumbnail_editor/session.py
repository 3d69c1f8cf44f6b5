"""Thumbnail editing session - generation, text edits and undo/redo.

A session lives exactly as long as the thumbnail step. It owns the edit
history, the face photo, the style references and the analyzed style; the
wizard throws the whole session away when the user navigates back past the
thumbnail step or restarts.
"""

from __future__ import annotations

import logging
import re
import uuid
from typing import Callable, Sequence, TypeVar

from config import HISTORY_LIMIT
from core.errors import AppError, ValidationError
from core.history import EditHistory
from core.models import ImageData, StyleAttributes, ThumbnailArtifact
from features.thumbnail_editor import style as style_adapter

logger = logging.getLogger(__name__)

T = TypeVar("T")

GENERATING = "Generating thumbnail..."
ANALYZING = "Analyzing styles..."
EDITING = "Applying edit..."


def thumbnail_filename(title: str) -> str:
    """Download filename: lower-cased title, whitespace runs -> '_', plus suffix."""
    stem = re.sub(r"\s+", "_", title).lower()
    return f"{stem}_thumbnail.png"


class ThumbnailEditorSession:
    """State and actions of the thumbnail step."""

    def __init__(self, history_limit: int | None = HISTORY_LIMIT):
        # Stable per session; widget keys derive from it so a new session starts empty
        self.session_id = uuid.uuid4().hex
        self.history: EditHistory[ThumbnailArtifact] = EditHistory(limit=history_limit)
        self.face_image: ImageData | None = None
        self.style_images: list[ImageData] = []
        self.style: StyleAttributes | None = None
        self.style_prompt: str = ""
        self.pending_action: str | None = None
        self.error: str | None = None

    # -------------------------------------------------------------------------
    # Inputs
    # -------------------------------------------------------------------------

    @property
    def is_loading(self) -> bool:
        return self.pending_action is not None

    @property
    def current(self) -> ThumbnailArtifact | None:
        return self.history.current()

    def set_face_image(self, image: ImageData | None) -> None:
        self.face_image = image

    def set_style_images(self, images: Sequence[ImageData]) -> None:
        """Replace the style reference batch. Analyzed style is kept until re-analysis."""
        self.style_images = list(images)

    # -------------------------------------------------------------------------
    # Model-backed actions
    # -------------------------------------------------------------------------

    def _run(self, action: str, call: Callable[[], T]) -> T | None:
        """Run ``call`` under the pending flag; errors become ``self.error``."""
        if self.pending_action is not None:
            logger.warning(f"Ignoring '{action}' while '{self.pending_action}' is pending")
            return None
        self.error = None
        self.pending_action = action
        try:
            return call()
        except AppError as e:
            logger.error(f"{action} failed: {e.message}")
            self.error = e.message
            return None
        finally:
            self.pending_action = None

    def analyze_style(self, gateway) -> StyleAttributes | None:
        """Analyze the uploaded references. On failure the previous style is kept."""
        analyzed = self._run(ANALYZING, lambda: style_adapter.analyze(gateway, self.style_images))
        if analyzed is None:
            return None
        self.style, self.style_prompt = analyzed
        return self.style

    def generate(self, gateway, title: str, topic: str) -> ThumbnailArtifact | None:
        artifact = self._run(
            GENERATING,
            lambda: gateway.generate_thumbnail(title, topic, self.face_image, self.style_prompt),
        )
        if artifact is not None:
            self.history.append(artifact)
        return artifact

    def edit(self, gateway, command: str, title: str) -> ThumbnailArtifact | None:
        def _call():
            current = self.history.current()
            if current is None:
                raise ValidationError("Generate a thumbnail before editing it.")
            if not command.strip():
                raise ValidationError("Please describe the edit to apply.")
            return gateway.edit_thumbnail(current, command.strip(), title, self.face_image)

        artifact = self._run(EDITING, _call)
        if artifact is not None:
            self.history.append(artifact)
        return artifact

    # -------------------------------------------------------------------------
    # History / output
    # -------------------------------------------------------------------------

    def undo(self) -> ThumbnailArtifact | None:
        return self.history.undo()

    def redo(self) -> ThumbnailArtifact | None:
        return self.history.redo()

    def download(self, title: str) -> tuple[str, bytes] | None:
        """(filename, PNG bytes) for the current thumbnail, or None."""
        current = self.history.current()
        if current is None:
            return None
        return thumbnail_filename(title), current.to_bytes()
