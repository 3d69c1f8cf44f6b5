"""Prompt templates for every model call the wizard makes.

All functions are pure: they only format their arguments into text.
"""

from __future__ import annotations

from config import (
    DESCRIPTION_MIN_WORDS,
    HASHTAG_RANGE,
    KEYWORD_RANGE,
    THUMBNAIL_SIZE,
    TITLE_COUNT,
    TITLE_LENGTH_RANGE,
)

_WIDTH, _HEIGHT = THUMBNAIL_SIZE

JSON_ONLY = "Return ONLY the raw JSON object without any markdown formatting, code blocks, or additional text."


def build_titles_prompt(topic: str, count: int = TITLE_COUNT) -> str:
    low, high = TITLE_LENGTH_RANGE
    return f"""Generate {count} engaging, click-worthy YouTube titles for a video about "{topic}". The titles should:
- Use proven engagement patterns (curiosity gaps, numbers, power words, emotional triggers).
- Maintain authenticity and accurately represent the content.
- Vary in style (listicles, questions, bold statements, how-tos).
- Stay within the optimal {low}-{high} character count.
- Be creative and unique.

Respond with a JSON object of this shape:
{{"titles": [{{"title": "An engaging YouTube title"}}, ...]}}

{JSON_ONLY}"""


def build_keywords_prompt(topic: str, title: str) -> str:
    low, high = KEYWORD_RANGE
    return f"""You are a YouTube SEO expert. For a video about "{topic}" titled "{title}", generate {low}-{high} highly relevant and targeted keywords. Include a mix of short-tail (1-2 words) and long-tail (3+ words) keywords that viewers would use to find this video. Focus on search volume and relevance.

Respond with a JSON object of this shape:
{{"keywords": ["keyword one", "keyword two", ...]}}

{JSON_ONLY}"""


def build_description_prompt(topic: str, title: str, keywords: list[str]) -> str:
    low, high = HASHTAG_RANGE
    return f"""You are a YouTube SEO expert. Write a compelling and SEO-optimized YouTube video description for a video titled "{title}" about "{topic}".

The description must:
- Be at least {DESCRIPTION_MIN_WORDS} words long.
- Start with a strong, engaging hook to capture viewer interest immediately.
- Clearly explain what the video is about and what viewers will learn.
- Naturally incorporate the following keywords throughout the text: {", ".join(keywords)}.
- Include {low}-{high} relevant hashtags at the end (e.g., #React #WebDevelopment).
- Have a clear structure with paragraphs for readability.
- Optionally include a call-to-action (e.g., "Subscribe for more content!").
- IMPORTANT: Do not include any introductory phrases or conversational filler. The output should be only the description itself, starting directly with the hook."""


def build_thumbnail_prompt(title: str, topic: str, has_face: bool, style_prompt: str = "") -> str:
    lines = [
        f'Create a professional, high-contrast {_WIDTH}x{_HEIGHT} YouTube thumbnail for a video titled "{title}".',
        f'The video is about: "{topic}".',
    ]
    if has_face:
        lines.append(
            "Incorporate the person's face from the provided image naturally as the main subject. "
            "The expression on the face should be engaging and relevant to the title."
        )
    lines.append(f'The title text "{title}" should be a bold, readable overlay on the thumbnail.')
    lines.append("Use attention-grabbing colors and a dynamic composition that stands out in YouTube search results.")
    if style_prompt.strip():
        lines.append(style_prompt.strip())
    lines.append(f"Ensure the final image is a {_WIDTH}x{_HEIGHT} landscape frame with extremely high detail and quality.")
    return "\n".join(lines)


def build_edit_prompt(command: str, title: str, has_face: bool) -> str:
    lines = [
        f'Take the existing YouTube thumbnail provided and apply the following edit: "{command}".',
        f'The original title for context is "{title}".',
    ]
    if has_face:
        lines.append(
            "The original subject's face is also provided for reference, ensure the person's likeness is preserved."
        )
    lines.append(
        f"The output must be a new, high-quality {_WIDTH}x{_HEIGHT} YouTube thumbnail incorporating the change, "
        "with extremely high detail and quality."
    )
    return "\n".join(lines)


STYLE_ANALYSIS_PROMPT = f"""Analyze the style of the provided YouTube thumbnails. Extract the key style elements:
1.  **Color Palette:** Identify the dominant and accent colors. Provide hex codes.
2.  **Typography:** Describe the font style (e.g., bold sans-serif, handwritten), size, and positioning.
3.  **Layout Composition:** Describe the layout (e.g., rule of thirds, centered subject).
4.  **Visual Effects:** Note any prominent effects like shadows, glows, borders, or background patterns.

Respond with a JSON object of this shape:
{{"palette": ["#RRGGBB description", ...], "typography": "...", "layout": "...", "effects": "..."}}

{JSON_ONLY}"""
