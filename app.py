"""
Streamlit Frontend - YouTube Content Optimizer

Steps:
1. Topic -> 20 title candidates
2. Title selection
3. SEO keywords + description
4. Thumbnail generation with style copy, text edits and undo/redo

Run with: uv run streamlit run app.py
"""

import streamlit as st
from dotenv import load_dotenv

from core.controller import WizardController
from core.errors import ConfigurationError
from core.state import METADATA_STEPS, Restart, WizardStep
from features.metadata.ui import render_metadata_step
from features.thumbnail_editor.ui import render_thumbnail_step
from features.titles.ui import render_title_selection_step, render_topic_step
from integrations.model_gateway import ModelGateway
from utils.logging_config import setup_logging

# Load environment variables
load_dotenv()
logger = setup_logging()

# Page configuration
st.set_page_config(
    page_title="YouTube Content Optimizer",
    page_icon="▶️",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .stApp {
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
    }

    h1, h2, h3 {
        font-weight: 600;
        letter-spacing: -0.02em;
    }

    .stButton > button {
        border-radius: 6px;
        font-weight: 500;
        transition: all 0.2s ease;
    }

    .stButton > button:hover {
        transform: translateY(-1px);
    }

    .stAlert {
        border-radius: 8px;
    }
</style>
""", unsafe_allow_html=True)


def _get_controller() -> WizardController:
    """Session-scoped wizard controller. Stops the app if the API key is missing."""
    if "wizard" not in st.session_state:
        try:
            gateway = ModelGateway.from_env()
        except ConfigurationError as e:
            logger.error(e.message)
            st.error("OpenAI API key not found!")
            st.info(e.message)
            st.stop()
        st.session_state.wizard = WizardController(gateway)
    return st.session_state.wizard


def main():
    """Main Streamlit application with the step-by-step wizard."""
    controller = _get_controller()
    step = controller.state.step

    col1, col2 = st.columns([5, 1])
    with col1:
        st.title("YouTube Content Optimizer")
    with col2:
        if step is not WizardStep.AWAITING_TOPIC:
            if st.button("Start Over", type="primary", use_container_width=True):
                controller.dispatch(Restart())
                st.rerun()

    with st.sidebar:
        st.header("Workflow Stages")
        st.markdown("""
        1. **Topic** - Describe your video
        2. **Titles** - Pick one of 20 candidates
        3. **SEO Metadata** - Keywords and description
        4. **Thumbnail** - Generate, copy a style, edit with text
        """)
        st.caption(f"Current step: {step.value.replace('_', ' ')}")

    if step is WizardStep.AWAITING_TOPIC:
        render_topic_step(controller)
    elif step is WizardStep.TITLES_READY:
        render_title_selection_step(controller)
    elif step in METADATA_STEPS:
        render_metadata_step(controller)
    elif step is WizardStep.THUMBNAIL_EDITING:
        render_thumbnail_step(controller)


if __name__ == "__main__":
    main()
