import logging
from collections import defaultdict, deque

from medquiz.config import settings
from medquiz.llm.parser import parse_question
from medquiz.llm.prompts import build_question_prompt
from medquiz.models import Question

logger = logging.getLogger(__name__)


class QuestionGenerator:
    """Question source that asks the LLM for one multiple-choice question at a time."""

    def __init__(self, text_generator, history_size: int | None = None):
        self.text_generator = text_generator
        self.history_size = history_size or settings.QUESTION_HISTORY_SIZE
        self._history: dict[str, deque[str]] = defaultdict(lambda: deque(maxlen=self.history_size))

    async def next_question(self, subject: str, difficulty: str) -> Question | None:
        """Generate a question. Returns None if the answer could not be parsed."""
        previous = list(self._history[subject])
        prompt = build_question_prompt(subject, difficulty, previous_questions=previous or None)

        raw = await self.text_generator.generate(prompt)
        question = parse_question(raw, subject=subject, difficulty=difficulty)

        if question is None:
            logger.error("Could not get a question for subject %r", subject)
            return None

        self._history[subject].append(question.question)
        return question

    def recent_questions(self, subject: str) -> list[str]:
        return list(self._history[subject])
