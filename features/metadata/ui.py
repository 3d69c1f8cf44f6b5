"""Metadata step UI - keywords and description for the selected title."""

import streamlit as st

from core.controller import WizardController
from core.models import MetadataResult
from core.state import BackOneStep, ProceedToThumbnail, RetryMetadata

STATUS_LABELS = {
    "pending": "Waiting",
    "in_progress": "Generating...",
    "completed": "Ready",
    "failed": "Failed",
}


def _render_part_status(slot, label: str, status: str):
    text = f"{label}: {STATUS_LABELS.get(status, status)}"
    if status == "in_progress":
        slot.info(f"⏳ {text}")
    elif status == "completed":
        slot.success(text)
    elif status == "failed":
        slot.error(text)
    else:
        slot.caption(text)


def metadata_progress():
    """Per-part status placeholders, updated while keywords/description generate."""
    col1, col2 = st.columns(2)
    keywords_slot, description_slot = col1.empty(), col2.empty()

    def _update(result: MetadataResult):
        _render_part_status(keywords_slot, "Keywords", result.keywords_status)
        _render_part_status(description_slot, "Description", result.description_status)

    return _update


def _render_keywords(result: MetadataResult):
    st.markdown(f"### Generated Keywords ({STATUS_LABELS.get(result.keywords_status, '')})")
    if result.keywords_status == "completed":
        st.markdown(" ".join(f"`{kw}`" for kw in result.keywords))
        st.caption(f"{len(result.keywords)} keywords - copy as a comma-separated list:")
        st.code(result.keywords_text, language=None)
    elif result.keywords_status == "failed":
        st.warning("Keyword generation failed.")
    else:
        st.caption("Keywords will appear here.")


def _render_description(result: MetadataResult):
    st.markdown(f"### Generated Description ({STATUS_LABELS.get(result.description_status, '')})")
    if result.description_status == "completed":
        st.code(result.description, language=None, wrap_lines=True)
        st.caption(f"Word count: {len(result.description.split())}")
    elif result.description_status == "failed":
        st.warning("Description generation failed.")
    elif result.keywords_status == "failed":
        st.caption("The description is written from the keywords; retry once keywords are generated.")
    else:
        st.caption("The description will appear here.")


def render_metadata_step(controller: WizardController):
    """Step 3: show keywords/description with copy, retry and navigation."""
    state = controller.state

    if st.button("← Back to Titles", key="metadata_back"):
        controller.dispatch(BackOneStep())
        st.rerun()

    st.markdown("## Step 3: Optimize SEO Metadata")
    st.caption("Keywords and a description to help your video get discovered.")
    st.markdown(f'**Selected Title:** "{state.selected_title}"')

    result = controller.metadata or MetadataResult()

    if result.error:
        st.error(result.error)
        if not result.is_complete and not state.metadata_pending:
            if st.button("Retry", key="metadata_retry"):
                controller.dispatch(RetryMetadata(), on_metadata_update=metadata_progress())
                st.rerun()

    col1, col2 = st.columns(2)
    with col1:
        _render_keywords(result)
    with col2:
        _render_description(result)

    st.markdown("---")
    if st.button(
        "Proceed to Thumbnail Creation",
        type="primary",
        disabled=state.metadata_pending,
        key="metadata_proceed",
    ):
        controller.dispatch(ProceedToThumbnail())
        st.rerun()
