"""Shared fixtures for the quiz tests."""
import pytest
from unittest.mock import AsyncMock, MagicMock

from medquiz.models import Question
from medquiz.services.quiz_session import QuizSession


@pytest.fixture
def sample_question():
    """Question with four options, the second one correct."""
    return Question(
        question="Which nerve innervates the diaphragm?",
        options=["Vagus nerve", "Phrenic nerve", "Intercostal nerve", "Accessory nerve"],
        correct_index=1,
        subject="Anatomy",
        difficulty="Medium",
    )


@pytest.fixture
def text_generator():
    generator = MagicMock()
    generator.generate = AsyncMock(return_value="Body text")
    return generator


@pytest.fixture
def image_generator():
    generator = MagicMock()
    generator.fetch_image = AsyncMock(return_value="https://img.example/diagram.png")
    return generator


@pytest.fixture
def question_source(sample_question):
    source = MagicMock()
    source.next_question = AsyncMock(return_value=sample_question)
    return source


@pytest.fixture
def session(text_generator, image_generator, question_source):
    return QuizSession(text_generator, image_generator, question_source, difficulty="Medium")
