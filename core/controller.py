"""Runs wizard events through the reducer and performs their side effects."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable

from core.errors import GenerationError
from core.models import MetadataResult
from core.state import (
    DiscardMetadata,
    DiscardThumbnail,
    Effect,
    Event,
    GenerateMetadata,
    GenerateTitles,
    MetadataSettled,
    TitlesArrived,
    TitlesFailed,
    WizardState,
    reduce,
)
from features.metadata.workflow import run_metadata
from features.thumbnail_editor.session import ThumbnailEditorSession

logger = logging.getLogger(__name__)

UNEXPECTED_TITLES_MESSAGE = "Something went wrong while generating titles. Please try again."


class WizardController:
    """Owns the wizard state and the per-step sessions derived from it.

    ``dispatch`` applies an event, then executes the returned effects in
    order. Model calls made by effects feed their outcome back in as new
    events, so one user action may settle several transitions.

    Args:
        gateway: Model gateway used by effects.
        on_metadata_update: Optional callback(result) for progress rendering.
            A callback passed to ``dispatch`` takes precedence for that call.
    """

    def __init__(self, gateway, on_metadata_update: Callable[[MetadataResult], None] | None = None):
        self.gateway = gateway
        self.state = WizardState()
        self.metadata: MetadataResult | None = None
        self.thumbnail: ThumbnailEditorSession | None = None
        self.on_metadata_update = on_metadata_update
        self._metadata_listener = on_metadata_update

    def dispatch(
        self,
        event: Event,
        on_metadata_update: Callable[[MetadataResult], None] | None = None,
    ) -> WizardState:
        self._metadata_listener = on_metadata_update or self.on_metadata_update
        queue: deque[Event] = deque([event])
        try:
            while queue:
                current = queue.popleft()
                before = self.state.step
                transition = reduce(self.state, current)
                self.state = transition.state
                if self.state.step is not before:
                    logger.info(f"{type(current).__name__}: {before.value} -> {self.state.step.value}")
                for effect in transition.effects:
                    follow_up = self._perform(effect)
                    if follow_up is not None:
                        queue.append(follow_up)
        finally:
            self._metadata_listener = self.on_metadata_update
        return self.state

    def thumbnail_session(self) -> ThumbnailEditorSession:
        """The thumbnail step's session, created on first use."""
        if self.thumbnail is None:
            self.thumbnail = ThumbnailEditorSession()
        return self.thumbnail

    # -------------------------------------------------------------------------
    # Effects
    # -------------------------------------------------------------------------

    def _perform(self, effect: Effect) -> Event | None:
        if isinstance(effect, GenerateTitles):
            return self._generate_titles(effect)
        if isinstance(effect, GenerateMetadata):
            return self._generate_metadata(effect)
        if isinstance(effect, DiscardMetadata):
            self.metadata = None
        elif isinstance(effect, DiscardThumbnail):
            self.thumbnail = None
        return None

    def _generate_titles(self, effect: GenerateTitles) -> Event:
        try:
            titles = self.gateway.generate_titles(effect.topic)
        except GenerationError as e:
            return TitlesFailed(e.message)
        except Exception:
            logger.exception("Unexpected error while generating titles")
            return TitlesFailed(UNEXPECTED_TITLES_MESSAGE)
        return TitlesArrived(effect.topic, tuple(titles))

    def _generate_metadata(self, effect: GenerateMetadata) -> Event:
        if self.metadata is None:
            self.metadata = MetadataResult()
        try:
            run_metadata(
                self.gateway,
                effect.topic,
                effect.title,
                result=self.metadata,
                on_update=self._metadata_listener,
            )
        except Exception:
            logger.exception("Unexpected error while generating metadata")
        return MetadataSettled(self.metadata.is_complete)
