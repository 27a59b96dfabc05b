"""Custom exceptions for the text and image generation APIs."""


class QuizAPIError(Exception):
    """Base exception for generation API errors."""
    pass


class GenerationError(QuizAPIError):
    """Text generation request failed."""
    pass


class ImageGenerationError(QuizAPIError):
    """Image generation request failed."""
    pass


class InvalidResponseError(QuizAPIError):
    """API returned unexpected response format."""
    pass
