"""Tests for video URL -> thumbnail URL derivation."""

import pytest

from core.errors import ValidationError
from features.thumbnail_downloader.urls import INVALID_URL_MESSAGE, extract_video_id, thumbnail_links


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ",
        "youtu.be/dQw4w9WgXcQ?t=42",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/v/dQw4w9WgXcQ",
        "https://www.youtube.com/shorts/dQw4w9WgXcQ",
        "https://m.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        "  https://www.youtube.com/watch?v=dQw4w9WgXcQ&list=PL123  ",
    ],
)
def test_extracts_video_id(url):
    assert extract_video_id(url.strip()) == "dQw4w9WgXcQ"


@pytest.mark.parametrize("url", ["not a url", "", "https://vimeo.com/123456789", "https://youtu.be/short"])
def test_invalid_url_is_validation_error(url):
    assert extract_video_id(url) is None
    with pytest.raises(ValidationError) as exc:
        thumbnail_links(url)
    assert exc.value.message == INVALID_URL_MESSAGE


def test_thumbnail_links_use_max_resolution():
    links = thumbnail_links("https://youtu.be/dQw4w9WgXcQ")
    assert [link.url for link in links] == ["https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg"]
    assert links[0].quality == "Maximum (1280x720)"
