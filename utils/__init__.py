"""Utility functions for the YouTube Content Optimizer."""

from .image_utils import create_preview, fit_thumbnail, is_supported_upload, validate_image_bytes
from .logging_config import setup_logging

__all__ = [
    "create_preview",
    "fit_thumbnail",
    "is_supported_upload",
    "validate_image_bytes",
    "setup_logging",
]
