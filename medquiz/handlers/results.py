from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.fsm.context import FSMContext

from medquiz.keyboards.main_menu import main_menu_keyboard
from medquiz.models import QuizResults
from medquiz.services.session_store import SessionStore

router = Router()


def format_results(results: QuizResults) -> str:
    """Format the session summary as a readable text."""
    percent = results.percentage

    # Pick an emoji based on score
    if percent >= 90:
        emoji = "🏆"
        comment = "Excellent result!"
    elif percent >= 70:
        emoji = "👍"
        comment = "Good result!"
    elif percent >= 50:
        emoji = "📖"
        comment = "Not bad, but there is room to improve."
    else:
        emoji = "💪"
        comment = "Keep practising. You'll get there!"

    return (
        f"📊 Quiz results\n\n"
        f"❓ Answered: {results.total}\n"
        f"✅ Correct: {results.correct}\n"
        f"❌ Wrong: {results.wrong}\n\n"
        f"{emoji} Score: {percent}%\n\n"
        f"{comment}"
    )


async def show_results(message: Message, state: FSMContext, sessions: SessionStore, user_id: int):
    """Show the final quiz results and end the session."""
    session = sessions.get(user_id)
    if session is None:
        await state.clear()
        await message.answer("There is no active quiz.", reply_markup=main_menu_keyboard())
        return

    text = format_results(session.get_results())

    sessions.drop(user_id)
    await state.clear()
    await message.answer(text, reply_markup=main_menu_keyboard())


@router.callback_query(F.data == "finish_quiz")
async def finish_quiz(callback: CallbackQuery, state: FSMContext, sessions: SessionStore):
    await callback.answer()
    await show_results(callback.message, state, sessions, callback.from_user.id)
