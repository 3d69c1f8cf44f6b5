"""Core wizard logic: state machine, edit history, prompts and domain types."""

from core.errors import AppError, ConfigurationError, GenerationError, ValidationError
from core.history import EditHistory
from core.models import ImageData, MetadataResult, StyleAttributes, ThumbnailArtifact, TitleCandidate
from core.state import WizardState, WizardStep, reduce

__all__ = [
    "AppError",
    "ConfigurationError",
    "GenerationError",
    "ValidationError",
    "EditHistory",
    "ImageData",
    "MetadataResult",
    "StyleAttributes",
    "ThumbnailArtifact",
    "TitleCandidate",
    "WizardState",
    "WizardStep",
    "reduce",
]
