"""Keyword + description generation for the selected title."""

from __future__ import annotations

import logging
from typing import Callable

from core.errors import GenerationError
from core.models import MetadataResult

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Something went wrong while generating metadata. Please try again."


def run_metadata(
    gateway,
    topic: str,
    title: str,
    result: MetadataResult | None = None,
    on_update: Callable[[MetadataResult], None] | None = None,
) -> MetadataResult:
    """
    Generate keywords, then a description that uses them.

    Parts already completed in ``result`` are kept, so passing a partially
    failed result back in is a manual retry of only the missing part. A
    failure marks just the failed part as "failed"; the other part keeps its
    data and a non-loading status.

    Args:
        gateway: Model gateway (or a stub with the same methods).
        topic: Video topic.
        title: Selected title.
        result: Previous result to resume from. A fresh one is created if None.
        on_update: Optional callback(result) fired after each status change.

    Returns:
        The same MetadataResult instance, updated in place.

    Raises:
        Any non-GenerationError from the gateway, after in-progress parts
        have been marked "failed".
    """
    result = result if result is not None else MetadataResult()
    if result.is_loading:
        logger.warning("Metadata generation already in progress; ignoring request")
        return result

    def _notify():
        if on_update:
            on_update(result)

    result.error = None
    try:
        _generate(gateway, topic, title, result, _notify)
    finally:
        if result.is_loading:
            # Unexpected exception mid-call; never leave a part spinning
            logger.error("Metadata generation aborted by an unexpected error")
            if result.keywords_status == "in_progress":
                result.keywords_status = "failed"
            if result.description_status == "in_progress":
                result.description_status = "failed"
            result.error = result.error or UNEXPECTED_ERROR_MESSAGE
            _notify()
    return result


def _generate(gateway, topic: str, title: str, result: MetadataResult, notify: Callable[[], None]) -> None:
    if result.keywords_status != "completed":
        result.keywords_status = "in_progress"
        if result.description_status != "completed":
            result.description_status = "pending"
        notify()
        try:
            result.keywords = gateway.generate_keywords(topic, title)
            result.keywords_status = "completed"
        except GenerationError as e:
            logger.error(f"Keyword generation failed: {e.message}")
            result.keywords_status = "failed"
            result.error = e.message
            notify()
            return
        notify()

    if result.description_status != "completed":
        result.description_status = "in_progress"
        notify()
        try:
            result.description = gateway.generate_description(topic, title, result.keywords)
            result.description_status = "completed"
        except GenerationError as e:
            logger.error(f"Description generation failed: {e.message}")
            result.description_status = "failed"
            result.error = e.message
        notify()
