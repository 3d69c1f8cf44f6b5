"""Tests for the wizard state-transition function."""

import pytest

from core.models import TitleCandidate
from core.state import (
    EMPTY_TOPIC_MESSAGE,
    BackOneStep,
    DiscardMetadata,
    DiscardThumbnail,
    GenerateMetadata,
    GenerateTitles,
    MetadataSettled,
    ProceedToThumbnail,
    Restart,
    RetryMetadata,
    TitlesArrived,
    TitleSelected,
    TitlesFailed,
    TopicSubmitted,
    WizardState,
    WizardStep,
    reduce,
)

TITLES = (TitleCandidate("First"), TitleCandidate("Second"))


def run(state, *events):
    for event in events:
        state = reduce(state, event).state
    return state


def titles_ready():
    return run(WizardState(), TopicSubmitted("python"), TitlesArrived("python", TITLES))


def title_chosen():
    return run(titles_ready(), TitleSelected("First"))


def metadata_ready():
    return run(title_chosen(), MetadataSettled(True))


def thumbnail_editing():
    return run(metadata_ready(), ProceedToThumbnail())


@pytest.mark.parametrize("topic", ["", "   ", "\n\t"])
def test_blank_topic_is_validation_error(topic):
    transition = reduce(WizardState(), TopicSubmitted(topic))
    assert transition.state.step is WizardStep.AWAITING_TOPIC
    assert transition.state.error == EMPTY_TOPIC_MESSAGE
    assert transition.state.loading is False
    assert transition.effects == ()


def test_topic_submission_starts_loading_and_requests_titles():
    transition = reduce(WizardState(error="old"), TopicSubmitted("  python tips  "))
    assert transition.state.loading is True
    assert transition.state.error is None
    assert transition.effects == (GenerateTitles("python tips"),)


def test_titles_arrived_moves_to_titles_ready():
    state = titles_ready()
    assert state.step is WizardStep.TITLES_READY
    assert state.topic == "python"
    assert state.titles == TITLES
    assert state.loading is False


def test_titles_failed_stays_and_reports():
    state = run(WizardState(), TopicSubmitted("python"), TitlesFailed("Failed to generate titles."))
    assert state.step is WizardStep.AWAITING_TOPIC
    assert state.error == "Failed to generate titles."
    assert state.loading is False


def test_resubmit_while_loading_is_ignored():
    state = run(WizardState(), TopicSubmitted("python"))
    transition = reduce(state, TopicSubmitted("rust"))
    assert transition.state == state
    assert transition.effects == ()


def test_stale_titles_after_restart_are_ignored():
    state = run(WizardState(), TopicSubmitted("python"), Restart())
    state = run(state, TitlesArrived("python", TITLES))
    assert state == WizardState()


def test_title_selected_requests_fresh_metadata():
    transition = reduce(titles_ready(), TitleSelected("First"))
    assert transition.state.step is WizardStep.TITLE_CHOSEN
    assert transition.state.selected_title == "First"
    assert transition.state.metadata_pending is True
    assert transition.effects == (DiscardMetadata(), GenerateMetadata("python", "First"))


def test_title_selected_outside_titles_ready_is_noop():
    state = WizardState()
    assert reduce(state, TitleSelected("First")).state == state


def test_metadata_settled():
    assert metadata_ready().step is WizardStep.METADATA_READY
    assert metadata_ready().metadata_pending is False
    partial = run(title_chosen(), MetadataSettled(False))
    assert partial.step is WizardStep.TITLE_CHOSEN
    assert partial.metadata_pending is False


def test_proceed_blocked_while_metadata_pending():
    state = title_chosen()
    assert reduce(state, ProceedToThumbnail()).state == state


@pytest.mark.parametrize("complete", [True, False])
def test_proceed_after_metadata_settles(complete):
    state = run(title_chosen(), MetadataSettled(complete), ProceedToThumbnail())
    assert state.step is WizardStep.THUMBNAIL_EDITING
    assert state.selected_title == "First"


def test_back_from_title_chosen_clears_selection_and_discards_downstream():
    transition = reduce(metadata_ready(), BackOneStep())
    assert transition.state.step is WizardStep.TITLES_READY
    assert transition.state.selected_title == ""
    assert transition.state.titles == TITLES
    assert transition.effects == (DiscardMetadata(), DiscardThumbnail())


def test_reselecting_after_back_regenerates_metadata():
    state = run(metadata_ready(), BackOneStep())
    transition = reduce(state, TitleSelected("Second"))
    assert GenerateMetadata("python", "Second") in transition.effects
    assert transition.state.metadata_pending is True


def test_back_from_thumbnail_keeps_selection():
    transition = reduce(thumbnail_editing(), BackOneStep())
    assert transition.state.step is WizardStep.METADATA_READY
    assert transition.state.selected_title == "First"
    assert transition.effects == (DiscardThumbnail(),)


def test_back_from_thumbnail_after_partial_metadata():
    state = run(title_chosen(), MetadataSettled(False), ProceedToThumbnail(), BackOneStep())
    assert state.step is WizardStep.TITLE_CHOSEN


@pytest.mark.parametrize("factory", [WizardState, titles_ready])
def test_back_is_noop_before_selection(factory):
    state = factory()
    transition = reduce(state, BackOneStep())
    assert transition.state == state
    assert transition.effects == ()


@pytest.mark.parametrize(
    "factory",
    [WizardState, titles_ready, title_chosen, metadata_ready, thumbnail_editing],
)
def test_restart_from_any_state(factory):
    state = factory()
    transition = reduce(state, Restart())
    assert transition.state.step is WizardStep.AWAITING_TOPIC
    assert transition.state.topic == ""
    assert transition.state.titles == ()
    assert transition.state.selected_title == ""
    assert transition.state.error is None
    assert transition.state.loading is False
    assert DiscardMetadata() in transition.effects
    assert DiscardThumbnail() in transition.effects


def test_restart_clears_error():
    state = run(WizardState(), TopicSubmitted(""), Restart())
    assert state.error is None


def test_retry_metadata_only_after_partial_failure():
    partial = run(title_chosen(), MetadataSettled(False))
    transition = reduce(partial, RetryMetadata())
    assert transition.state.metadata_pending is True
    assert transition.effects == (GenerateMetadata("python", "First"),)

    ready = metadata_ready()
    assert reduce(ready, RetryMetadata()).state == ready


def test_unknown_event_is_noop():
    state = titles_ready()
    assert reduce(state, object()).state == state
