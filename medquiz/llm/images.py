import logging
from openai import AsyncOpenAI, OpenAIError

from medquiz.config import settings
from medquiz.exceptions import ImageGenerationError
from medquiz.llm.client import make_client

logger = logging.getLogger(__name__)


class ImageGenerator:
    """Turns an image description into an image URL via the images API."""

    def __init__(
        self,
        client: AsyncOpenAI | None = None,
        model: str | None = None,
        size: str | None = None,
        enabled: bool | None = None,
    ):
        self.enabled = settings.IMAGES_ENABLED if enabled is None else enabled
        self.client = client or (make_client() if self.enabled else None)
        self.model = model or settings.IMAGE_MODEL
        self.size = size or settings.IMAGE_SIZE

    async def fetch_image(self, description: str) -> str | None:
        """Return the URL of an image for the description, or None."""
        if not self.enabled or not description.strip():
            return None

        try:
            response = await self.client.images.generate(
                model=self.model,
                prompt=description,
                size=self.size,
                n=1,
            )
        except OpenAIError as e:
            logger.error("Image request failed: %s", e)
            raise ImageGenerationError(f"Image request failed: {e}") from e

        if not response.data:
            return None
        return response.data[0].url
