import json
import logging
import re

from medquiz.models import Question

logger = logging.getLogger(__name__)

IMAGE_MARKER = "IMAGE DESCRIPTION:"

_LETTER_RE = re.compile(r"^[A-Da-d][).:]\s*")


def split_image_description(raw_text: str) -> tuple[str, str | None]:
    """Split a response into (text, image description) on the first marker.

    The description is None when the marker is missing or nothing but
    whitespace follows it.
    """
    text, marker, description = raw_text.partition(IMAGE_MARKER)
    if not marker:
        return text.strip(), None
    return text.strip(), description.strip() or None


def parse_question(raw_text: str, subject: str = "", difficulty: str = "") -> Question | None:
    """Parse LLM output into a Question. Returns None on failure."""
    if not raw_text:
        return None

    data = _try_parse_json(raw_text)

    # Try extracting from markdown code block
    if data is None:
        match = re.search(r"```(?:json)?\s*(\{.+?})\s*```", raw_text, re.DOTALL)
        if match:
            data = _try_parse_json(match.group(1))

    # Try finding an object in the text
    if data is None:
        match = re.search(r"(\{.+})", raw_text, re.DOTALL)
        if match:
            data = _try_parse_json(match.group(1))

    if data is None:
        logger.error("Failed to parse LLM response as JSON")
        return None

    question = data.get("question")
    options = data.get("options")
    if not isinstance(question, str) or not isinstance(options, list):
        logger.warning(f"Skipping invalid question: {data}")
        return None

    question = question.strip()
    options = [_LETTER_RE.sub("", str(opt)).strip() for opt in options]
    options = [opt for opt in options if opt]
    correct_index = _resolve_correct(data.get("correct"), options)

    if not question or len(options) < 2 or correct_index is None:
        logger.warning(f"Skipping invalid question: {data}")
        return None

    return Question(
        question=question,
        options=options,
        correct_index=correct_index,
        subject=subject,
        difficulty=difficulty,
    )


def _try_parse_json(text: str) -> dict | None:
    try:
        data = json.loads(text)
        if isinstance(data, dict):
            return data
    except (json.JSONDecodeError, TypeError):
        pass
    return None


def _resolve_correct(correct, options: list[str]) -> int | None:
    """Find the index of the correct option given as a letter, an index or option text."""
    if isinstance(correct, int) and not isinstance(correct, bool):
        return correct if 0 <= correct < len(options) else None

    correct = str(correct or "").strip()
    if not correct:
        return None

    lowered = [opt.lower() for opt in options]
    if correct.lower() in lowered:
        return lowered.index(correct.lower())

    # A single letter (A/B/C/D) that is not itself an option refers to one by position
    if re.match(r"^[A-Da-d]$", correct):
        idx = ord(correct.upper()) - ord("A")
        return idx if idx < len(options) else None

    correct = _LETTER_RE.sub("", correct).strip().lower()
    if correct in lowered:
        return lowered.index(correct)
    return None
