"""Configuration settings using pydantic-settings."""
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Telegram Bot
    BOT_TOKEN: str = Field(default="", description="Telegram Bot API token")

    # Text generation (any OpenAI-compatible endpoint)
    LLM_BASE_URL: str = Field(
        default="http://localhost:1234/v1",
        description="Base URL of the chat completions API"
    )
    LLM_API_KEY: str = Field(default="not-needed", description="API key for the LLM endpoint")
    LLM_MODEL: str = Field(default="qwen2.5-7b-instruct", description="Chat model name")
    LLM_TEMPERATURE: float = Field(default=0.7, description="Sampling temperature")
    LLM_MAX_TOKENS: int = Field(default=4096, description="Max tokens per completion")

    # Image generation
    IMAGES_ENABLED: bool = Field(
        default=False,
        description="Request explanatory images from the images API"
    )
    IMAGE_MODEL: str = Field(default="dall-e-3", description="Image model name")
    IMAGE_SIZE: str = Field(default="1024x1024", description="Generated image size")

    # Question generation
    QUESTION_HISTORY_SIZE: int = Field(
        default=20,
        description="How many recent questions per subject to ask the model not to repeat"
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    class Config:
        """Pydantic config."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


# Global settings instance
settings = Settings()

SUBJECTS = [
    "Anatomy",
    "Physiology",
    "Biochemistry",
    "Pharmacology",
    "Pathology",
    "Microbiology",
]

DIFFICULTIES = ["Easy", "Medium", "Hard"]

# 0 means no limit
QUESTION_LIMITS = [5, 10, 20, 0]
