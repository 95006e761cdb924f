"""Tests for providers/images.py."""

import base64
from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from contentforge._errors import ProviderError
from contentforge._types import ImageGenerationRequest, ImageSize
from contentforge.providers.images import OpenAIImageBackend, generate_image

_URL = "https://api.openai.com/v1/images/generations"


def _request(provider="openai", size=ImageSize(), style=None):
    return ImageGenerationRequest(
        prompt="A lighthouse at dusk",
        provider=provider,
        model="dall-e-3",
        api_key="sk-test",
        size=size,
        style=style,
    )


def _status_error(status, **kwargs):
    response = httpx.Response(status, request=httpx.Request("POST", _URL), **kwargs)
    return openai.APIStatusError(f"Error code: {status}", response=response, body=None)


@pytest.fixture
def mock_client():
    with patch("contentforge.providers.images.OpenAI") as mock_cls:
        client = MagicMock()
        mock_cls.return_value = client
        image = MagicMock()
        image.b64_json = base64.b64encode(b"\x89PNG-bytes").decode()
        image.revised_prompt = "A red lighthouse at dusk"
        client.images.generate.return_value = MagicMock(data=[image])
        yield mock_cls, client


class TestSizeMapping:
    @pytest.mark.parametrize(
        "width,height,expected",
        [
            (1024, 1024, "1024x1024"),
            (1792, 1024, "1792x1024"),
            (1024, 1792, "1024x1792"),
            (512, 512, "1024x1024"),
            (1024, 1024 * 2, "1024x1024"),
        ],
    )
    def test_maps_to_supported_canvas(self, width, height, expected):
        assert OpenAIImageBackend.map_size(ImageSize(width, height)) == expected


class TestStyleMapping:
    def test_vivid_passes_through(self):
        assert OpenAIImageBackend.map_style("vivid") == "vivid"

    @pytest.mark.parametrize("style", [None, "", "natural", "photographic", "VIVID"])
    def test_everything_else_is_natural(self, style):
        assert OpenAIImageBackend.map_style(style) == "natural"


class TestGenerateImage:
    def test_decodes_image(self, mock_client):
        response = generate_image(_request())
        assert response.image_data == b"\x89PNG-bytes"
        assert response.content_type == "image/png"
        assert response.revised_prompt == "A red lighthouse at dusk"

    def test_wire_request(self, mock_client):
        mock_cls, client = mock_client
        generate_image(_request(size=ImageSize(1792, 1024), style="vivid"))
        mock_cls.assert_called_once_with(api_key="sk-test", max_retries=0)
        client.images.generate.assert_called_once_with(
            model="dall-e-3",
            prompt="A lighthouse at dusk",
            n=1,
            size="1792x1024",
            response_format="b64_json",
            style="vivid",
        )

    def test_missing_revised_prompt(self, mock_client):
        _, client = mock_client
        client.images.generate.return_value.data[0].revised_prompt = None
        assert generate_image(_request()).revised_prompt is None

    def test_empty_data_raises(self, mock_client):
        _, client = mock_client
        client.images.generate.return_value = MagicMock(data=[])
        with pytest.raises(ProviderError) as exc:
            generate_image(_request())
        assert exc.value.status_code == 502


class TestErrors:
    def test_unsupported_provider(self):
        with pytest.raises(ProviderError) as exc:
            generate_image(_request(provider="anthropic"))
        assert exc.value.provider == "anthropic"
        assert exc.value.status_code == 400
        assert "not supported for provider: anthropic" in exc.value.message

    def test_unknown_provider_name(self):
        with pytest.raises(ProviderError) as exc:
            generate_image(_request(provider="midjourney"))
        assert exc.value.status_code == 400

    def test_error_envelope_message(self, mock_client):
        _, client = mock_client
        client.images.generate.side_effect = _status_error(
            400, json={"error": {"message": "Your prompt was rejected", "type": "invalid_request_error"}}
        )
        with pytest.raises(ProviderError) as exc:
            generate_image(_request())
        assert exc.value.provider == "openai"
        assert exc.value.status_code == 400
        assert exc.value.message == "Your prompt was rejected"

    def test_non_json_body_uses_generic_message(self, mock_client):
        _, client = mock_client
        client.images.generate.side_effect = _status_error(502, content=b"<html>Bad gateway</html>")
        with pytest.raises(ProviderError) as exc:
            generate_image(_request())
        assert exc.value.status_code == 502
        assert exc.value.message == "Request failed"

    def test_json_without_message_uses_status(self, mock_client):
        _, client = mock_client
        client.images.generate.side_effect = _status_error(429, json={"detail": "slow down"})
        with pytest.raises(ProviderError) as exc:
            generate_image(_request())
        assert exc.value.message == "OpenAI Image API returned 429"

    def test_connection_errors_propagate(self, mock_client):
        _, client = mock_client
        client.images.generate.side_effect = openai.APIConnectionError(
            request=httpx.Request("POST", _URL)
        )
        with pytest.raises(openai.APIConnectionError):
            generate_image(_request())
