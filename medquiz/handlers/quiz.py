import html
import logging
import re

from aiogram import Router, F
from aiogram.exceptions import TelegramBadRequest
from aiogram.types import Message, CallbackQuery
from aiogram.fsm.context import FSMContext

from medquiz.exceptions import QuizAPIError
from medquiz.handlers.results import show_results
from medquiz.keyboards.main_menu import main_menu_keyboard
from medquiz.keyboards.quiz_kb import options_keyboard, follow_up_keyboard, retry_keyboard, doubt_keyboard
from medquiz.services.quiz_session import QuizSession
from medquiz.services.session_store import SessionStore
from medquiz.states.quiz_states import QuizFlow

logger = logging.getLogger(__name__)

router = Router()

# Telegram rejects messages longer than 4096 characters
MAX_MESSAGE_LENGTH = 4000

NO_SESSION_TEXT = "There is no active quiz. Start a new one from the main menu."
EMPTY_CONTENT_TEXT = "(no text was generated)"

_LIST_ITEM_RE = re.compile(r"<\s*li\b[^>]*>", re.IGNORECASE)
_CELL_END_RE = re.compile(r"<\s*/t[dh]\s*>", re.IGNORECASE)
_LINE_BREAK_RE = re.compile(r"<\s*(?:br\s*/?|/p|/li|/tr|/h[1-6]|/ul|/ol|/table|/div)\s*>", re.IGNORECASE)
_TAG_RE = re.compile(r"</?[a-zA-Z][^>]*>")


async def send_next_question(
    message: Message, state: FSMContext, session: QuizSession, sessions: SessionStore, user_id: int
):
    """Fetch the next question and send it, or show the results when the quiz is over."""
    data = await state.get_data()
    subject = data.get("subject", "")

    try:
        question = await session.next_question(subject)
    except QuizAPIError as e:
        logger.error("Question generation failed for user %d: %s", user_id, e)
        await state.set_state(QuizFlow.reviewing_answer)
        await message.answer(
            "😞 Could not generate a question. Check that the LLM server is running and try again.",
            reply_markup=retry_keyboard(),
        )
        return

    if question is None:
        await show_results(message, state, sessions, user_id)
        return

    session.current_question = question
    await state.set_state(QuizFlow.answering_question)

    header = f"❓ Question {session.questions_answered + 1}"
    if session.question_limit:
        header += f" of {session.question_limit}"
    await message.answer(
        f"{header}\n\n{question.question}",
        reply_markup=options_keyboard(question.options),
    )


@router.callback_query(QuizFlow.answering_question, F.data.startswith("ans:"))
async def answer_selected(callback: CallbackQuery, state: FSMContext, sessions: SessionStore):
    """Score the chosen option and offer follow-ups."""
    session = await _active_session(callback, state, sessions)
    if session is None:
        return

    question = session.current_question
    chosen = int(callback.data.split(":")[1])
    await callback.answer()

    session.questions_answered += 1
    if chosen == question.correct_index:
        session.score += 1
        feedback = "✅ Correct!"
    else:
        session.wrong_answers += 1
        feedback = f"❌ Wrong.\n\n📝 Correct answer: {question.correct_option}"

    await state.set_state(QuizFlow.reviewing_answer)
    await callback.message.answer(feedback, reply_markup=follow_up_keyboard())


@router.callback_query(QuizFlow.reviewing_answer, F.data == "explain")
async def show_explanation(callback: CallbackQuery, state: FSMContext, sessions: SessionStore):
    session = await _active_session(callback, state, sessions)
    if session is None:
        return
    await callback.answer()

    question = session.current_question
    await callback.message.answer("⏳ Preparing the explanation...")
    result = await session.get_explanation(question.question, question.options, question.correct_index)

    await send_content(callback.message, result.text, result.image_url)
    await callback.message.answer("What next?", reply_markup=follow_up_keyboard())


@router.callback_query(QuizFlow.reviewing_answer, F.data == "objectives")
async def show_learning_objectives(callback: CallbackQuery, state: FSMContext, sessions: SessionStore):
    session = await _active_session(callback, state, sessions)
    if session is None:
        return
    await callback.answer()

    question = session.current_question
    await callback.message.answer("⏳ Preparing the learning objectives...")
    result = await session.get_learning_objectives(question.question, question.options, question.correct_index)

    await send_content(callback.message, html_to_text(result.content), result.image_url)
    await callback.message.answer("What next?", reply_markup=follow_up_keyboard())


@router.callback_query(QuizFlow.reviewing_answer, F.data == "doubt")
async def start_doubt(callback: CallbackQuery, state: FSMContext):
    await state.set_state(QuizFlow.asking_doubt)
    await callback.message.answer(
        "✏️ Type your question about this problem:",
        reply_markup=doubt_keyboard(),
    )
    await callback.answer()


@router.callback_query(QuizFlow.asking_doubt, F.data == "back_to_review")
async def back_to_review(callback: CallbackQuery, state: FSMContext):
    await state.set_state(QuizFlow.reviewing_answer)
    await callback.message.answer("What next?", reply_markup=follow_up_keyboard())
    await callback.answer()


@router.message(QuizFlow.asking_doubt)
async def doubt_entered(message: Message, state: FSMContext, sessions: SessionStore):
    """Answer a doubt typed as text."""
    doubt = message.text.strip() if message.text else ""
    if not doubt:
        await message.answer("Please type your question as text:")
        return

    session = sessions.get(message.from_user.id)
    if session is None or session.current_question is None:
        await state.clear()
        await message.answer(NO_SESSION_TEXT, reply_markup=main_menu_keyboard())
        return

    await message.answer("⏳ Thinking...")
    answer = await session.ask_doubt(doubt, session.current_question.question)

    await send_content(message, answer.text, answer.image_url)
    await state.set_state(QuizFlow.reviewing_answer)
    await message.answer("What next?", reply_markup=follow_up_keyboard())


@router.callback_query(QuizFlow.reviewing_answer, F.data == "next_question")
async def next_question(callback: CallbackQuery, state: FSMContext, sessions: SessionStore):
    session = sessions.get(callback.from_user.id)
    await callback.answer()
    if session is None:
        await state.clear()
        await callback.message.answer(NO_SESSION_TEXT, reply_markup=main_menu_keyboard())
        return
    await send_next_question(callback.message, state, session, sessions, callback.from_user.id)


@router.callback_query(F.data == "cancel_quiz")
async def cancel_quiz(callback: CallbackQuery, state: FSMContext, sessions: SessionStore):
    """Cancel the current quiz and go home."""
    sessions.drop(callback.from_user.id)
    await state.clear()
    await callback.message.answer(
        "Quiz cancelled. Back to the main menu.",
        reply_markup=main_menu_keyboard(),
    )
    await callback.answer()


async def send_content(message: Message, text: str, image_url: str | None):
    """Send generated text in Telegram-sized chunks, then the image if there is one."""
    for chunk in split_message(text or EMPTY_CONTENT_TEXT):
        await message.answer(chunk)
    if image_url:
        try:
            await message.answer_photo(image_url)
        except TelegramBadRequest as e:
            logger.error("Failed to send image %s: %s", image_url, e)


def html_to_text(content: str) -> str:
    """Turn generated HTML into plain text.

    List items become bullets and table cells are joined with " | ".
    """
    text = _LIST_ITEM_RE.sub("• ", content)
    text = _CELL_END_RE.sub(" | ", text)
    text = _LINE_BREAK_RE.sub("\n", text)
    text = _TAG_RE.sub("", text)
    text = html.unescape(text)

    lines = [line.strip().removesuffix("|").strip() for line in text.splitlines()]
    return "\n".join(line for line in lines if line)


def split_message(text: str, limit: int = MAX_MESSAGE_LENGTH) -> list[str]:
    """Split text into chunks no longer than limit, preferring line breaks."""
    chunks = []
    while len(text) > limit:
        cut = text.rfind("\n", 0, limit)
        if cut <= 0:
            cut = limit
        chunks.append(text[:cut])
        text = text[cut:].lstrip("\n")
    if text:
        chunks.append(text)
    return chunks


async def _active_session(callback: CallbackQuery, state: FSMContext, sessions: SessionStore) -> QuizSession | None:
    session = sessions.get(callback.from_user.id)
    if session is None or session.current_question is None:
        await state.clear()
        await callback.message.answer(NO_SESSION_TEXT, reply_markup=main_menu_keyboard())
        await callback.answer()
        return None
    return session
