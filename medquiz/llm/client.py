import logging
from openai import AsyncOpenAI, OpenAIError

from medquiz.config import settings
from medquiz.exceptions import GenerationError, InvalidResponseError

logger = logging.getLogger(__name__)


def make_client() -> AsyncOpenAI:
    return AsyncOpenAI(base_url=settings.LLM_BASE_URL, api_key=settings.LLM_API_KEY)


class TextGenerator:
    """Async client for an OpenAI-compatible chat completions API."""

    def __init__(
        self,
        client: AsyncOpenAI | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ):
        self.client = client or make_client()
        self.model = model or settings.LLM_MODEL
        self.temperature = settings.LLM_TEMPERATURE if temperature is None else temperature
        self.max_tokens = max_tokens or settings.LLM_MAX_TOKENS

    async def generate(self, prompt: str) -> str:
        """Send a prompt and return the full response text."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except OpenAIError as e:
            logger.error("LLM request failed: %s", e)
            raise GenerationError(f"LLM request failed: {e}") from e

        if not response.choices or not response.choices[0].message.content:
            raise InvalidResponseError("LLM returned an empty response")
        return response.choices[0].message.content
