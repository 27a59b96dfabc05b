"""Quiz session controller.

Holds the score counters of one quiz run and turns questions into prompts for
the text generator. Counters are updated by the caller; the controller only
reads them.
"""
import logging
import math

from medquiz.llm.parser import split_image_description
from medquiz.llm.prompts import (
    build_doubt_prompt,
    build_explanation_prompt,
    build_learning_objectives_prompt,
)
from medquiz.models import (
    DoubtAnswer,
    ExplanationResult,
    LearningObjectivesResult,
    Question,
    QuizResults,
)

logger = logging.getLogger(__name__)

EXPLANATION_FALLBACK = "Failed to load explanation."
LEARNING_OBJECTIVES_FALLBACK = "<p>Failed to load learning objectives.</p>"
DOUBT_FALLBACK = "Failed to get answer. Please try again."


class QuizSession:
    """One quiz run for one student.

    Args:
        text_generator: object with ``async generate(prompt) -> str``
        image_generator: object with ``async fetch_image(description) -> str | None``
        question_source: object with ``async next_question(subject, difficulty) -> Question | None``
        difficulty: free-text difficulty label
        question_limit: maximum questions in the session, 0 for unlimited
        time_limit: reserved, not enforced
    """

    def __init__(
        self,
        text_generator,
        image_generator,
        question_source,
        difficulty: str = "",
        question_limit: int = 0,
        time_limit: int = 0,
    ):
        self.text_generator = text_generator
        self.image_generator = image_generator
        self.question_source = question_source

        self.difficulty = difficulty
        self.question_limit = question_limit
        self.time_limit = time_limit

        self.current_question: Question | None = None
        self.score = 0
        self.questions_answered = 0
        self.wrong_answers = 0

    async def next_question(self, subject: str) -> Question | None:
        """Return the next question, or None once the question limit is reached."""
        if self.question_limit and self.questions_answered >= self.question_limit:
            return None

        return await self.question_source.next_question(subject, self.difficulty)

    async def get_explanation(self, question: str, options: list[str], correct_index: int) -> ExplanationResult:
        _check_correct_index(options, correct_index)
        prompt = build_explanation_prompt(self.difficulty, question, options, correct_index)

        try:
            text, image_url = await self._generate_with_image(prompt)
        except Exception as e:
            logger.warning("Explanation failed: %s", e)
            return ExplanationResult(text=EXPLANATION_FALLBACK, image_url=None)

        return ExplanationResult(text=text, image_url=image_url)

    async def get_learning_objectives(
        self, question: str, options: list[str], correct_index: int
    ) -> LearningObjectivesResult:
        _check_correct_index(options, correct_index)
        prompt = build_learning_objectives_prompt(self.difficulty, question, options, correct_index)

        try:
            content, image_url = await self._generate_with_image(prompt)
        except Exception as e:
            logger.warning("Learning objectives failed: %s", e)
            return LearningObjectivesResult(content=LEARNING_OBJECTIVES_FALLBACK, image_url=None)

        return LearningObjectivesResult(content=content, image_url=image_url)

    async def ask_doubt(self, doubt: str, question: str) -> DoubtAnswer:
        prompt = build_doubt_prompt(self.difficulty, doubt, question)

        try:
            text, image_url = await self._generate_with_image(prompt)
        except Exception as e:
            logger.warning("Doubt answer failed: %s", e)
            return DoubtAnswer(text=DOUBT_FALLBACK, image_url=None)

        return DoubtAnswer(text=text, image_url=image_url)

    def get_results(self) -> QuizResults:
        total = self.questions_answered
        return QuizResults(
            total=total,
            correct=self.score,
            wrong=self.wrong_answers,
            percentage=_percent(self.score, total),
        )

    async def _generate_with_image(self, prompt: str) -> tuple[str, str | None]:
        """Ask for text, then for an image if the response describes one."""
        raw = await self.text_generator.generate(prompt)
        text, description = split_image_description(raw)

        image_url = None
        if description:
            image_url = await self.image_generator.fetch_image(description)

        return text, image_url


def _check_correct_index(options: list[str], correct_index: int):
    if not 0 <= correct_index < len(options):
        raise ValueError(
            f"correct_index {correct_index} is out of range for {len(options)} options"
        )


def _percent(correct: int, total: int) -> int:
    """Whole percent of correct answers, halves rounded up."""
    if total <= 0:
        return 0
    return math.floor(correct * 100 / total + 0.5)
