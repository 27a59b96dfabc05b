import logging

from medquiz.services.quiz_session import QuizSession

logger = logging.getLogger(__name__)


class SessionStore:
    """In-memory quiz sessions keyed by Telegram user id."""

    def __init__(self, text_generator, image_generator, question_source):
        self.text_generator = text_generator
        self.image_generator = image_generator
        self.question_source = question_source
        self._sessions: dict[int, QuizSession] = {}

    def start(self, user_id: int, difficulty: str, question_limit: int = 0, time_limit: int = 0) -> QuizSession:
        """Create a fresh session for the user, replacing any existing one."""
        session = QuizSession(
            self.text_generator,
            self.image_generator,
            self.question_source,
            difficulty=difficulty,
            question_limit=question_limit,
            time_limit=time_limit,
        )
        self._sessions[user_id] = session
        logger.info("Started session for user %d (%s, limit=%d)", user_id, difficulty, question_limit)
        return session

    def get(self, user_id: int) -> QuizSession | None:
        return self._sessions.get(user_id)

    def drop(self, user_id: int):
        self._sessions.pop(user_id, None)
