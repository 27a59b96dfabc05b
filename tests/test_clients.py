"""Tests for the text and image API clients with a mocked SDK."""
import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from openai import OpenAIError

from medquiz.exceptions import GenerationError, ImageGenerationError, InvalidResponseError
from medquiz.llm.client import TextGenerator
from medquiz.llm.images import ImageGenerator


def _chat_response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def sdk_client():
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=_chat_response("Hello"))
    client.images.generate = AsyncMock(
        return_value=SimpleNamespace(data=[SimpleNamespace(url="https://img.example/1.png")])
    )
    return client


class TestTextGenerator:

    async def test_returns_content(self, sdk_client):
        generator = TextGenerator(client=sdk_client, model="test-model", temperature=0.2, max_tokens=100)

        assert await generator.generate("Prompt") == "Hello"
        sdk_client.chat.completions.create.assert_awaited_once_with(
            model="test-model",
            messages=[{"role": "user", "content": "Prompt"}],
            temperature=0.2,
            max_tokens=100,
        )

    async def test_sdk_error_raises_generation_error(self, sdk_client):
        sdk_client.chat.completions.create.side_effect = OpenAIError("connection refused")
        generator = TextGenerator(client=sdk_client)

        with pytest.raises(GenerationError, match="connection refused"):
            await generator.generate("Prompt")

    @pytest.mark.parametrize("response", [_chat_response(None), _chat_response(""), SimpleNamespace(choices=[])])
    async def test_empty_response(self, sdk_client, response):
        sdk_client.chat.completions.create.return_value = response
        generator = TextGenerator(client=sdk_client)

        with pytest.raises(InvalidResponseError):
            await generator.generate("Prompt")


class TestImageGenerator:

    async def test_returns_url(self, sdk_client):
        generator = ImageGenerator(client=sdk_client, model="img", size="512x512", enabled=True)

        assert await generator.fetch_image("A heart") == "https://img.example/1.png"
        sdk_client.images.generate.assert_awaited_once_with(
            model="img", prompt="A heart", size="512x512", n=1
        )

    async def test_disabled_skips_call(self, sdk_client):
        generator = ImageGenerator(client=sdk_client, enabled=False)

        assert await generator.fetch_image("A heart") is None
        sdk_client.images.generate.assert_not_awaited()

    async def test_blank_description_skips_call(self, sdk_client):
        generator = ImageGenerator(client=sdk_client, enabled=True)

        assert await generator.fetch_image("   ") is None
        sdk_client.images.generate.assert_not_awaited()

    async def test_no_data_returns_none(self, sdk_client):
        sdk_client.images.generate.return_value = SimpleNamespace(data=[])
        generator = ImageGenerator(client=sdk_client, enabled=True)

        assert await generator.fetch_image("A heart") is None

    async def test_sdk_error_raises(self, sdk_client):
        sdk_client.images.generate.side_effect = OpenAIError("quota")
        generator = ImageGenerator(client=sdk_client, enabled=True)

        with pytest.raises(ImageGenerationError):
            await generator.fetch_image("A heart")
