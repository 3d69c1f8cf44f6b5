"""Shared fixtures: a stub model gateway and real PNG payloads."""

import base64
import io

import pytest
from PIL import Image

from core.errors import GenerationError
from core.models import ImageData, StyleAttributes, ThumbnailArtifact, TitleCandidate


def make_png(size=(64, 36), color=(200, 30, 30), mode="RGB") -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, size, color).save(buffer, format="PNG")
    return buffer.getvalue()


class StubGateway:
    """In-memory gateway. Operations listed in ``fail`` raise GenerationError."""

    def __init__(self):
        self.calls = []
        self.fail = set()
        self.titles = [TitleCandidate(f"Title {i}") for i in range(1, 4)]
        self.keywords = ["python", "python tutorial for beginners"]
        self.description = "A great video. #python #coding #tutorial"
        self.style = StyleAttributes(
            palette=("#FF0000 red", "#FFFFFF white"),
            typography="bold sans-serif",
            layout="subject left, text right",
            effects="drop shadow",
        )
        self._images = 0

    def _call(self, name, *args):
        self.calls.append((name, args))
        if name in self.fail:
            raise GenerationError(f"Failed to {name.replace('_', ' ')}. Please try again.")

    def _artifact(self):
        self._images += 1
        return ThumbnailArtifact(base64=base64.b64encode(f"image-{self._images}".encode()).decode())

    def names(self):
        return [name for name, _ in self.calls]

    def generate_titles(self, topic):
        self._call("generate_titles", topic)
        return list(self.titles)

    def generate_keywords(self, topic, title):
        self._call("generate_keywords", topic, title)
        return list(self.keywords)

    def generate_description(self, topic, title, keywords):
        self._call("generate_description", topic, title, tuple(keywords))
        return self.description

    def generate_thumbnail(self, title, topic, face_image, style_prompt):
        self._call("generate_thumbnail", title, topic, face_image, style_prompt)
        return self._artifact()

    def edit_thumbnail(self, current, command, title, face_image):
        self._call("edit_thumbnail", current, command, title, face_image)
        return self._artifact()

    def analyze_style(self, images):
        self._call("analyze_style", tuple(images))
        return self.style


@pytest.fixture
def gateway():
    return StubGateway()


@pytest.fixture
def png_bytes():
    return make_png()


@pytest.fixture
def face_image():
    return ImageData.from_bytes(make_png(color=(240, 200, 170)), "face.png")
