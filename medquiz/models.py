"""Data models for quiz questions and generated content."""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Question:
    """Single multiple-choice question."""
    question: str
    options: List[str] = field(default_factory=list)
    correct_index: int = 0
    subject: str = ""
    difficulty: str = ""

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]


@dataclass
class ExplanationResult:
    """Why the correct answer is right and the others are wrong."""
    text: str
    image_url: Optional[str] = None


@dataclass
class LearningObjectivesResult:
    """Key points for a question, formatted as HTML."""
    content: str
    image_url: Optional[str] = None


@dataclass
class DoubtAnswer:
    """Answer to a student's follow-up question."""
    text: str
    image_url: Optional[str] = None


@dataclass
class QuizResults:
    """Session summary."""
    total: int
    correct: int
    wrong: int
    percentage: int
