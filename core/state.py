"""Wizard state schema and the state-transition function.

Every user action is an event. ``reduce(state, event)`` returns the next
state plus the side effects (model calls, discards) the caller must run;
the function itself never touches the network.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Union

from core.errors import ValidationError
from core.models import TitleCandidate

EMPTY_TOPIC_MESSAGE = "Please enter a topic."


class WizardStep(str, Enum):
    AWAITING_TOPIC = "awaiting_topic"
    TITLES_READY = "titles_ready"
    TITLE_CHOSEN = "title_chosen"
    METADATA_READY = "metadata_ready"
    THUMBNAIL_EDITING = "thumbnail_editing"


# Steps that render the metadata view
METADATA_STEPS = (WizardStep.TITLE_CHOSEN, WizardStep.METADATA_READY)


@dataclass(frozen=True)
class WizardState:
    """State owned by the step flow controller."""
    step: WizardStep = WizardStep.AWAITING_TOPIC
    topic: str = ""
    titles: tuple[TitleCandidate, ...] = ()
    selected_title: str = ""
    error: str | None = None

    # Title request in flight
    loading: bool = False
    pending_topic: str = ""

    # Metadata request in flight for the selected title
    metadata_pending: bool = False
    metadata_complete: bool = False


# -----------------------------------------------------------------------------
# Events
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TopicSubmitted:
    topic: str


@dataclass(frozen=True)
class TitlesArrived:
    topic: str
    titles: tuple[TitleCandidate, ...]


@dataclass(frozen=True)
class TitlesFailed:
    message: str


@dataclass(frozen=True)
class TitleSelected:
    title: str


@dataclass(frozen=True)
class MetadataSettled:
    complete: bool


@dataclass(frozen=True)
class RetryMetadata:
    pass


@dataclass(frozen=True)
class ProceedToThumbnail:
    pass


@dataclass(frozen=True)
class BackOneStep:
    pass


@dataclass(frozen=True)
class Restart:
    pass


Event = Union[
    TopicSubmitted,
    TitlesArrived,
    TitlesFailed,
    TitleSelected,
    MetadataSettled,
    RetryMetadata,
    ProceedToThumbnail,
    BackOneStep,
    Restart,
]


# -----------------------------------------------------------------------------
# Effects
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerateTitles:
    topic: str


@dataclass(frozen=True)
class GenerateMetadata:
    topic: str
    title: str


@dataclass(frozen=True)
class DiscardMetadata:
    pass


@dataclass(frozen=True)
class DiscardThumbnail:
    pass


Effect = Union[GenerateTitles, GenerateMetadata, DiscardMetadata, DiscardThumbnail]


@dataclass(frozen=True)
class Transition:
    state: WizardState
    effects: tuple[Effect, ...] = field(default_factory=tuple)


def validate_topic(topic: str) -> str:
    """Return the stripped topic or raise ValidationError when blank."""
    cleaned = (topic or "").strip()
    if not cleaned:
        raise ValidationError(EMPTY_TOPIC_MESSAGE)
    return cleaned


def _on_topic_submitted(state: WizardState, event: TopicSubmitted) -> Transition:
    if state.step is not WizardStep.AWAITING_TOPIC or state.loading:
        return Transition(state)
    try:
        topic = validate_topic(event.topic)
    except ValidationError as e:
        return Transition(replace(state, error=e.message))
    return Transition(
        replace(state, loading=True, pending_topic=topic, error=None),
        (GenerateTitles(topic),),
    )


def _on_titles_arrived(state: WizardState, event: TitlesArrived) -> Transition:
    if (
        state.step is not WizardStep.AWAITING_TOPIC
        or not state.loading
        or event.topic != state.pending_topic
    ):
        return Transition(state)
    return Transition(
        replace(
            state,
            step=WizardStep.TITLES_READY,
            topic=event.topic,
            titles=tuple(event.titles),
            loading=False,
            pending_topic="",
            error=None,
        )
    )


def _on_titles_failed(state: WizardState, event: TitlesFailed) -> Transition:
    if state.step is not WizardStep.AWAITING_TOPIC or not state.loading:
        return Transition(state)
    return Transition(
        replace(
            state,
            loading=False,
            pending_topic="",
            error=event.message or "An unexpected error occurred.",
        )
    )


def _on_title_selected(state: WizardState, event: TitleSelected) -> Transition:
    if state.step is not WizardStep.TITLES_READY or not event.title.strip():
        return Transition(state)
    return Transition(
        replace(
            state,
            step=WizardStep.TITLE_CHOSEN,
            selected_title=event.title,
            metadata_pending=True,
            metadata_complete=False,
            error=None,
        ),
        (DiscardMetadata(), GenerateMetadata(state.topic, event.title)),
    )


def _on_metadata_settled(state: WizardState, event: MetadataSettled) -> Transition:
    if state.step not in METADATA_STEPS or not state.metadata_pending:
        return Transition(state)
    step = WizardStep.METADATA_READY if event.complete else WizardStep.TITLE_CHOSEN
    return Transition(
        replace(state, step=step, metadata_pending=False, metadata_complete=event.complete)
    )


def _on_retry_metadata(state: WizardState, event: RetryMetadata) -> Transition:
    # Keeps the partial result; only the failed parts are regenerated
    if state.step is not WizardStep.TITLE_CHOSEN or state.metadata_pending:
        return Transition(state)
    return Transition(
        replace(state, metadata_pending=True),
        (GenerateMetadata(state.topic, state.selected_title),),
    )


def _on_proceed(state: WizardState, event: ProceedToThumbnail) -> Transition:
    if state.step not in METADATA_STEPS or state.metadata_pending:
        return Transition(state)
    return Transition(replace(state, step=WizardStep.THUMBNAIL_EDITING))


def _on_back(state: WizardState, event: BackOneStep) -> Transition:
    if state.step in METADATA_STEPS:
        return Transition(
            replace(
                state,
                step=WizardStep.TITLES_READY,
                selected_title="",
                metadata_pending=False,
                metadata_complete=False,
                error=None,
            ),
            (DiscardMetadata(), DiscardThumbnail()),
        )
    if state.step is WizardStep.THUMBNAIL_EDITING:
        step = WizardStep.METADATA_READY if state.metadata_complete else WizardStep.TITLE_CHOSEN
        return Transition(replace(state, step=step), (DiscardThumbnail(),))
    return Transition(state)


def _on_restart(state: WizardState, event: Restart) -> Transition:
    return Transition(WizardState(), (DiscardMetadata(), DiscardThumbnail()))


_HANDLERS = {
    TopicSubmitted: _on_topic_submitted,
    TitlesArrived: _on_titles_arrived,
    TitlesFailed: _on_titles_failed,
    TitleSelected: _on_title_selected,
    MetadataSettled: _on_metadata_settled,
    RetryMetadata: _on_retry_metadata,
    ProceedToThumbnail: _on_proceed,
    BackOneStep: _on_back,
    Restart: _on_restart,
}


def reduce(state: WizardState, event: Event) -> Transition:
    """Apply ``event`` to ``state``. Unknown or invalid events are no-ops."""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        return Transition(state)
    return handler(state, event)
