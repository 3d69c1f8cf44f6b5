"""Centralized configuration for YouTube Content Optimizer."""

from __future__ import annotations

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent

# -----------------------------------------------------------------------------
# LLM Models (per task)
# Override via env: YT_TITLE_MODEL, YT_METADATA_MODEL, etc.
# -----------------------------------------------------------------------------
TITLE_MODEL = os.getenv("YT_TITLE_MODEL", "gpt-4.1")
METADATA_MODEL = os.getenv("YT_METADATA_MODEL", "gpt-4.1")
STYLE_MODEL = os.getenv("YT_STYLE_MODEL", "gpt-4.1")
IMAGE_MODEL = os.getenv("YT_IMAGE_MODEL", "gpt-image-1")

TITLE_MODEL_TEMPERATURE = 0.9
METADATA_MODEL_TEMPERATURE = 0.7
STYLE_MODEL_TEMPERATURE = 0.2

# Images API only renders a few fixed sizes; results are fitted to THUMBNAIL_SIZE
IMAGE_SIZE = os.getenv("YT_IMAGE_SIZE", "1536x1024")
IMAGE_QUALITY = os.getenv("YT_IMAGE_QUALITY", "high")
THUMBNAIL_SIZE = (1280, 720)

# -----------------------------------------------------------------------------
# Generation targets
# -----------------------------------------------------------------------------
TITLE_COUNT = 20
TITLE_LENGTH_RANGE = (60, 70)
KEYWORD_RANGE = (15, 20)
DESCRIPTION_MIN_WORDS = 200
HASHTAG_RANGE = (3, 5)

# Thumbnail edit history bound (0 disables the bound)
HISTORY_LIMIT = int(os.getenv("YT_HISTORY_LIMIT", "50"))

# Regexes for conversational preambles the model sometimes echoes before the
# description. Matched at the start of the text only.
DESCRIPTION_PREAMBLE_PATTERNS: list[str] = [
    r"بالتأكيد! إليك وصف فيديو يوتيوب احترافي ومُحسّن لمحركات البحث \(SEO\) حول مدينة كلميم، مصمم لجذب المشاهدين وتحقيق ترتيب عالٍ في نتائج البحث\.",
    r"(?:Sure|Certainly|Of course)[!,.]? Here(?:'s| is) (?:a|an|your) [^\n]*?description[^\n]*?:",
]

# -----------------------------------------------------------------------------
# Thumbnail downloader
# -----------------------------------------------------------------------------
THUMBNAIL_URL_TEMPLATE = "https://img.youtube.com/vi/{video_id}/{name}.jpg"
THUMBNAIL_QUALITIES: list[tuple[str, str]] = [
    ("Maximum (1280x720)", "maxresdefault"),
]
