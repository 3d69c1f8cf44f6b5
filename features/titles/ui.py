"""Topic input and title selection steps."""

import streamlit as st

from core.controller import WizardController
from core.state import TitleSelected, TopicSubmitted
from features.metadata.ui import metadata_progress


def render_topic_step(controller: WizardController):
    """Step 1: collect the topic and request title candidates."""
    st.markdown("## Step 1: Describe Your Video")
    st.caption("Enter the topic of your video and we'll generate 20 engaging titles for it.")

    with st.form("topic_form"):
        topic = st.text_input(
            "Video topic",
            placeholder="e.g., 'How to learn React in 2024'",
        )
        submitted = st.form_submit_button(
            "Generate Titles",
            type="primary",
            disabled=controller.state.loading,
        )

    if submitted:
        with st.spinner("Generating awesome titles..."):
            controller.dispatch(TopicSubmitted(topic))
        st.rerun()

    if controller.state.error:
        st.error(controller.state.error)


def render_title_selection_step(controller: WizardController):
    """Step 2: list title candidates; selecting one moves on to metadata."""
    state = controller.state
    st.markdown("## Step 2: Choose Your Title")
    st.caption(f'Titles generated for: "{state.topic}"')

    if not state.titles:
        st.info("The model returned no titles for this topic. Start over to try a different topic.")
        return

    # Keyword/description status appears here while the selected title is processed
    progress_area = st.container()

    for i, candidate in enumerate(state.titles):
        col1, col2 = st.columns([5, 1])
        with col1:
            st.code(candidate.text, language=None)
            st.caption(f"{len(candidate.text)} chars")
        with col2:
            if st.button("Select", key=f"select_title_{i}", use_container_width=True):
                with progress_area:
                    progress = metadata_progress()
                controller.dispatch(TitleSelected(candidate.text), on_metadata_update=progress)
                st.rerun()
