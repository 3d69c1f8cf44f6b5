"""Thumbnail editor step UI."""

import streamlit as st

from core.controller import WizardController
from core.state import BackOneStep
from features.thumbnail_downloader.ui import render_thumbnail_downloader
from features.thumbnail_editor.session import ThumbnailEditorSession
from ui.components.image_uploader import render_image_uploader
from ui.components.youtube_preview import render_youtube_preview


def _render_controls(controller: WizardController, session: ThumbnailEditorSession):
    state = controller.state
    key = f"thumb_{session.session_id}"

    st.markdown("### 1. Upload Your Photo")
    faces = render_image_uploader("Upload Face Photo", key=f"{key}_face", multiple=False)
    session.set_face_image(faces[0] if faces else None)

    col1, col2 = st.columns([3, 1])
    with col1:
        st.markdown("### 2. (Optional) Copy a Thumbnail's Style")
    with col2:
        if st.button("Download Thumbnail", key=f"{key}_downloader"):
            render_thumbnail_downloader()
    session.set_style_images(
        render_image_uploader("Upload Thumbnails to Copy Style", key=f"{key}_style", multiple=True)
    )
    if session.style_images:
        if st.button("Analyze Style", disabled=session.is_loading, use_container_width=True, key=f"{key}_analyze"):
            with st.spinner("Analyzing styles..."):
                session.analyze_style(controller.gateway)
            st.rerun()

    if session.style is not None:
        with st.container(border=True):
            st.markdown("**Detected Style:**")
            st.markdown(f"**Palette:** {', '.join(session.style.palette)}")
            st.markdown(f"**Typography:** {session.style.typography}")
            st.markdown(f"**Layout:** {session.style.layout}")
            st.markdown(f"**Effects:** {session.style.effects}")

    if st.button("Generate Thumbnail", type="primary", disabled=session.is_loading, use_container_width=True, key=f"{key}_generate"):
        with st.spinner("Generating thumbnail..."):
            session.generate(controller.gateway, state.selected_title, state.topic)
        st.rerun()

    if session.current is not None:
        st.markdown("### 3. Edit with Text")
        with st.form(f"{key}_edit_form", clear_on_submit=True):
            command = st.text_input("Edit command", placeholder="e.g., 'Make the text bigger'")
            apply = st.form_submit_button("Apply", disabled=session.is_loading)
        if apply:
            with st.spinner("Applying edit..."):
                session.edit(controller.gateway, command, state.selected_title)
            st.rerun()


def _render_preview(controller: WizardController, session: ThumbnailEditorSession):
    title = controller.state.selected_title
    current = session.current

    if current is not None:
        st.image(current.to_bytes(), caption="Generated Thumbnail", use_container_width=True)
    else:
        st.info("Your thumbnail will appear here")

    if session.error:
        st.error(session.error)

    if current is not None:
        col1, col2, col3 = st.columns(3)
        with col1:
            if st.button("↶ Undo", disabled=not session.history.can_undo, use_container_width=True):
                session.undo()
                st.rerun()
        with col2:
            if st.button("↷ Redo", disabled=not session.history.can_redo, use_container_width=True):
                session.redo()
                st.rerun()
        with col3:
            filename, data = session.download(title)
            st.download_button("Download", data=data, file_name=filename, mime="image/png", use_container_width=True)
        st.caption(f"Version {session.history.cursor + 1} of {len(session.history)}")

    st.markdown("### YouTube Search Preview")
    render_youtube_preview(title, current)


def render_thumbnail_step(controller: WizardController):
    """Step 4: copy a style, generate and refine the thumbnail."""
    if st.button("← Back to SEO Optimization", key="thumbnail_back"):
        controller.dispatch(BackOneStep())
        st.rerun()

    st.markdown("## Step 4: Copy a Style & Create Your Thumbnail")
    st.caption("Upload your photo, add style references, and use natural language to perfect your design.")
    st.markdown(f'**Selected Title:** "{controller.state.selected_title}"')

    session = controller.thumbnail_session()
    col1, col2 = st.columns(2)
    with col1:
        _render_controls(controller, session)
    with col2:
        _render_preview(controller, session)
