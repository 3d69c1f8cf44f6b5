"""Metadata feature: SEO keywords and description."""

from features.metadata.workflow import run_metadata

__all__ = ["run_metadata"]
