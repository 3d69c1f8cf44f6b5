"""Text clean-up for raw model output."""

from __future__ import annotations

import json
import re
from typing import Iterable


def parse_json_response(response: str) -> dict:
    """Parse JSON from LLM response, handling markdown code blocks."""
    response = response.strip()
    if response.startswith("```json"):
        response = response[7:]
    if response.startswith("```"):
        response = response[3:]
    if response.endswith("```"):
        response = response[:-3]
    data = json.loads(response.strip())
    if not isinstance(data, dict):
        raise json.JSONDecodeError("Expected a JSON object", response, 0)
    return data


def strip_preambles(text: str, patterns: Iterable[str]) -> str:
    """Remove known echoed preambles from the start of ``text``.

    Each pattern is tried once, in order, anchored at the start of the
    (stripped) text. Text without a matching preamble is returned stripped
    but otherwise unchanged.
    """
    text = text.strip()
    for pattern in patterns:
        match = re.match(pattern, text)
        if match and match.end() > 0:
            text = text[match.end():].strip()
    return text
