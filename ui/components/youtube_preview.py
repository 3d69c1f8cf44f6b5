"""YouTube search-result mockup for the selected title and thumbnail."""

import html

import streamlit as st

from core.models import ThumbnailArtifact


def render_youtube_preview(title: str, thumbnail: ThumbnailArtifact | None):
    """Render one search result row as it would appear on YouTube."""
    if thumbnail is not None:
        media = f"<img src='{thumbnail.data_url}' style='width:100%;aspect-ratio:16/9;object-fit:cover;border-radius:12px;'/>"
    else:
        media = (
            "<div style='width:100%;aspect-ratio:16/9;border-radius:12px;background:#272727;"
            "display:flex;align-items:center;justify-content:center;color:#888;'>Thumbnail preview</div>"
        )
    st.markdown(
        f"""
        <div style='display:flex;gap:16px;padding:12px;background:#0f0f0f;border-radius:12px;'>
            <div style='flex:0 0 45%;'>{media}</div>
            <div style='flex:1;color:#f1f1f1;'>
                <div style='font-size:1.1rem;font-weight:600;line-height:1.4;'>{html.escape(title)}</div>
                <div style='color:#aaa;font-size:0.8rem;margin-top:6px;'>Your Channel &middot; 1.2M views &middot; 2 hours ago</div>
            </div>
        </div>
        """,
        unsafe_allow_html=True,
    )
