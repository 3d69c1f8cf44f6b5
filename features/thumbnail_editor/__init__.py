"""Thumbnail editor feature: generation, style copy, text edits, undo/redo."""

from features.thumbnail_editor.session import ThumbnailEditorSession, thumbnail_filename
from features.thumbnail_editor.style import analyze, style_prompt_fragment

__all__ = [
    "ThumbnailEditorSession",
    "thumbnail_filename",
    "analyze",
    "style_prompt_fragment",
]
