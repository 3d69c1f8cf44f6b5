"""Dialog for grabbing an existing video's thumbnail as a style reference."""

import streamlit as st

from core.errors import ValidationError
from features.thumbnail_downloader.urls import thumbnail_links


@st.dialog("Download YouTube Thumbnail")
def render_thumbnail_downloader():
    st.caption("Paste the URL of any YouTube video below to get its thumbnail.")
    with st.form("thumbnail_downloader_form"):
        url = st.text_input("Video URL", placeholder="https://www.youtube.com/watch?v=...")
        fetch = st.form_submit_button("Fetch", type="primary")

    if not fetch:
        return
    try:
        links = thumbnail_links(url)
    except ValidationError as e:
        st.error(e.message)
        return

    st.markdown("### Result")
    for link in links:
        st.image(link.url, caption=link.quality, use_container_width=True)
        st.link_button("Download", link.url)
