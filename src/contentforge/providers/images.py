"""Image generation backends, dispatched by provider."""

from __future__ import annotations

import base64
import logging
from abc import ABC, abstractmethod

import openai
from openai import OpenAI

from contentforge._errors import ProviderError
from contentforge._types import ImageGenerationRequest, ImageGenerationResponse, ImageSize
from contentforge.providers.base import envelope_message
from contentforge.registry.providers import ProviderName

logger = logging.getLogger(__name__)


class ImageBackend(ABC):
    """Base class for image backends. One instance serves one request."""

    name: str

    @abstractmethod
    def generate(self, request: ImageGenerationRequest) -> ImageGenerationResponse:
        """Generate one image.

        Raises:
            ProviderError: If the provider returns a non-success status.
        """


class OpenAIImageBackend(ImageBackend):
    """DALL-E through the OpenAI images endpoint."""

    name = "openai"

    SIZES: dict[tuple[int, int], str] = {
        (1024, 1024): "1024x1024",
        (1792, 1024): "1792x1024",
        (1024, 1792): "1024x1792",
    }
    DEFAULT_SIZE = "1024x1024"
    CONTENT_TYPE = "image/png"

    @classmethod
    def map_size(cls, size: ImageSize) -> str:
        """Map a pixel size onto a supported canvas; unknown sizes get 1024x1024."""
        return cls.SIZES.get((size.width, size.height), cls.DEFAULT_SIZE)

    @staticmethod
    def map_style(style: str | None) -> str:
        return "vivid" if style == "vivid" else "natural"

    def generate(self, request: ImageGenerationRequest) -> ImageGenerationResponse:
        client = OpenAI(api_key=request.api_key, max_retries=0)
        try:
            response = client.images.generate(
                model=request.model,
                prompt=request.prompt,
                n=1,
                size=self.map_size(request.size),
                response_format="b64_json",
                style=self.map_style(request.style),
            )
        except openai.APIStatusError as e:
            raise ProviderError(
                self.name,
                e.status_code,
                envelope_message(e.response, f"OpenAI Image API returned {e.status_code}"),
            ) from e

        if not response.data or not response.data[0].b64_json:
            raise ProviderError(self.name, 502, "OpenAI Image API returned no image data")

        image = response.data[0]
        return ImageGenerationResponse(
            image_data=base64.b64decode(image.b64_json),
            content_type=self.CONTENT_TYPE,
            revised_prompt=image.revised_prompt,
        )


_IMAGE_BACKENDS: dict[ProviderName, type[ImageBackend]] = {
    ProviderName.OPENAI: OpenAIImageBackend,
}


def generate_image(request: ImageGenerationRequest) -> ImageGenerationResponse:
    """Generate an image with the provider named in the request.

    Raises:
        ProviderError: With status 400 if the provider has no image backend,
            or with the provider's status if the call fails.
    """
    try:
        backend_cls = _IMAGE_BACKENDS[ProviderName(request.provider)]
    except (ValueError, KeyError):
        raise ProviderError(
            request.provider,
            400,
            f"Image generation not supported for provider: {request.provider}. "
            "Currently only OpenAI (DALL-E) is supported.",
        ) from None

    logger.debug("Generating image with %s/%s", request.provider, request.model)
    return backend_cls().generate(request)
