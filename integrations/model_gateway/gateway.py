"""Model gateway - one request/response round trip per operation.

Text and structured requests go through a LangChain chat model, image
generation and edits through the OpenAI Images API. Every failure
(transport error, unparseable JSON, schema mismatch, missing image payload)
is converted into ``GenerationError``. The gateway holds no state between
calls, so any object with the same methods can stand in for it.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Any, Sequence, TypeVar

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI
from openai import OpenAI
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

import config
from core import prompts
from core.errors import GenerationError, ValidationError
from core.models import ImageData, StyleAttributes, ThumbnailArtifact, TitleCandidate
from integrations.model_gateway.config import GatewaySettings, load_settings
from integrations.model_gateway.parsing import parse_json_response, strip_preambles
from integrations.model_gateway.schemas import KeywordsResponse, StyleResponse, TitlesResponse
from utils.image_utils import fit_thumbnail

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _image_part(image: ImageData) -> dict:
    return {
        "type": "image_url",
        "image_url": {"url": f"data:{image.mime_type};base64,{image.base64}"},
    }


def _upload(image: ImageData) -> tuple[str, bytes, str]:
    return (image.name or "image", image.to_bytes(), image.mime_type)


def _response_text(response: Any) -> str:
    content = response.content if hasattr(response, "content") else response
    return content if isinstance(content, str) else str(content)


def _extract_image_b64(result: Any) -> str | None:
    data = getattr(result, "data", None) or []
    if not data:
        return None
    return getattr(data[0], "b64_json", None)


class ModelGateway:
    """Client for the hosted generative model.

    Args:
        settings: Credential and model selection.
        chat_model: Optional chat model used for all text/vision calls
            instead of per-task ``ChatOpenAI`` instances.
        image_client: Optional OpenAI client for the Images API.
    """

    def __init__(
        self,
        settings: GatewaySettings,
        chat_model: BaseChatModel | None = None,
        image_client: OpenAI | None = None,
    ):
        self.settings = settings
        self._chat_model = chat_model
        self._image_client = image_client

    @classmethod
    def from_env(cls) -> "ModelGateway":
        """Build a gateway from OPENAI_API_KEY / .env. Raises ConfigurationError if absent."""
        return cls(load_settings())

    # -------------------------------------------------------------------------
    # Plumbing
    # -------------------------------------------------------------------------

    def _llm(self, model: str, temperature: float) -> BaseChatModel:
        if self._chat_model is not None:
            return self._chat_model
        return ChatOpenAI(
            model=model,
            temperature=temperature,
            api_key=self.settings.openai_api_key,
        )

    @property
    def images(self) -> OpenAI:
        if self._image_client is None:
            self._image_client = OpenAI(api_key=self.settings.openai_api_key)
        return self._image_client

    def _invoke(self, model: str, temperature: float, message: HumanMessage, failure: str) -> str:
        try:
            response = self._llm(model, temperature).invoke([message])
        except Exception as e:
            logger.error(f"Model call failed ({failure}): {e}")
            raise GenerationError(f"Failed to {failure}. Please try again.") from e
        return _response_text(response)

    def _invoke_json(
        self,
        model: str,
        temperature: float,
        message: HumanMessage,
        schema: type[SchemaT],
        failure: str,
    ) -> SchemaT:
        text = self._invoke(model, temperature, message, failure)
        try:
            return schema.model_validate(parse_json_response(text))
        except (json.JSONDecodeError, SchemaError) as e:
            logger.error(f"Unexpected response shape ({failure}): {e}")
            logger.debug(f"Raw response: {text}")
            raise GenerationError(f"Failed to {failure}. Please try again.") from e

    def _request_image(self, failure: str, call) -> ThumbnailArtifact:
        try:
            result = call()
        except Exception as e:
            logger.error(f"Image request failed ({failure}): {e}")
            raise GenerationError(f"Failed to {failure}. Please try again.") from e

        b64 = _extract_image_b64(result)
        if not b64:
            logger.error(f"No image data returned from API ({failure})")
            raise GenerationError(f"Failed to {failure}: no image data returned. Please try again.")

        try:
            png = fit_thumbnail(base64.b64decode(b64), config.THUMBNAIL_SIZE)
        except Exception as e:
            logger.error(f"Unreadable image payload ({failure}): {e}")
            raise GenerationError(f"Failed to {failure}: the returned image could not be read.") from e
        return ThumbnailArtifact(base64=base64.b64encode(png).decode("utf-8"))

    # -------------------------------------------------------------------------
    # Text operations
    # -------------------------------------------------------------------------

    def generate_titles(self, topic: str) -> list[TitleCandidate]:
        model, temperature = self.settings.title_model, config.TITLE_MODEL_TEMPERATURE
        message = HumanMessage(content=prompts.build_titles_prompt(topic, self.settings.title_count))
        parsed = self._invoke_json(model, temperature, message, TitlesResponse, "generate titles")
        titles = [TitleCandidate(item.title.strip()) for item in parsed.titles if item.title.strip()]
        logger.info(f"Generated {len(titles)} titles for topic {topic!r}")
        return titles

    def generate_keywords(self, topic: str, title: str) -> list[str]:
        model, temperature = self.settings.metadata_model, config.METADATA_MODEL_TEMPERATURE
        message = HumanMessage(content=prompts.build_keywords_prompt(topic, title))
        parsed = self._invoke_json(model, temperature, message, KeywordsResponse, "generate keywords")
        keywords = [kw.strip() for kw in parsed.keywords if kw.strip()]
        logger.info(f"Generated {len(keywords)} keywords")
        return keywords

    def generate_description(self, topic: str, title: str, keywords: Sequence[str]) -> str:
        model, temperature = self.settings.metadata_model, config.METADATA_MODEL_TEMPERATURE
        message = HumanMessage(content=prompts.build_description_prompt(topic, title, list(keywords)))
        text = self._invoke(model, temperature, message, "generate description")
        description = strip_preambles(text, self.settings.description_preamble_patterns)
        if not description:
            logger.error("Model returned an empty description")
            raise GenerationError("Failed to generate description. Please try again.")
        return description

    # -------------------------------------------------------------------------
    # Image operations
    # -------------------------------------------------------------------------

    def generate_thumbnail(
        self,
        title: str,
        topic: str,
        face_image: ImageData | None,
        style_prompt: str = "",
    ) -> ThumbnailArtifact:
        prompt = prompts.build_thumbnail_prompt(title, topic, face_image is not None, style_prompt)
        options = {
            "model": self.settings.image_model,
            "prompt": prompt,
            "size": self.settings.image_size,
            "quality": self.settings.image_quality,
        }
        if face_image is not None:
            call = lambda: self.images.images.edit(image=[_upload(face_image)], **options)
        else:
            call = lambda: self.images.images.generate(n=1, **options)
        return self._request_image("generate thumbnail", call)

    def edit_thumbnail(
        self,
        current: ThumbnailArtifact,
        command: str,
        title: str,
        face_image: ImageData | None,
    ) -> ThumbnailArtifact:
        prompt = prompts.build_edit_prompt(command, title, face_image is not None)
        uploads = [("thumbnail.png", current.to_bytes(), current.mime_type)]
        if face_image is not None:
            uploads.append(_upload(face_image))
        call = lambda: self.images.images.edit(
            model=self.settings.image_model,
            image=uploads,
            prompt=prompt,
            size=self.settings.image_size,
            quality=self.settings.image_quality,
        )
        return self._request_image("edit thumbnail", call)

    def analyze_style(self, images: Sequence[ImageData]) -> StyleAttributes:
        if not images:
            raise ValidationError("Upload at least one thumbnail to analyze.")
        model, temperature = self.settings.style_model, config.STYLE_MODEL_TEMPERATURE
        content = [{"type": "text", "text": prompts.STYLE_ANALYSIS_PROMPT}]
        content.extend(_image_part(img) for img in images)
        parsed = self._invoke_json(model, temperature, HumanMessage(content=content), StyleResponse, "analyze thumbnail styles")
        return StyleAttributes(
            palette=tuple(c.strip() for c in parsed.palette if c.strip()),
            typography=parsed.typography,
            layout=parsed.layout,
            effects=parsed.effects,
        )
