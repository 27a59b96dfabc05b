from aiogram import Router, F
from aiogram.types import CallbackQuery
from aiogram.fsm.context import FSMContext

from medquiz.config import SUBJECTS
from medquiz.handlers.quiz import send_next_question
from medquiz.keyboards.quiz_kb import subject_keyboard, difficulty_keyboard, question_limit_keyboard
from medquiz.services.session_store import SessionStore
from medquiz.states.quiz_states import QuizFlow

router = Router()


@router.callback_query(F.data == "start_quiz")
async def choose_subject(callback: CallbackQuery, state: FSMContext):
    await state.set_state(QuizFlow.choosing_subject)
    await callback.message.edit_text("📚 Choose a subject:", reply_markup=subject_keyboard())
    await callback.answer()


@router.callback_query(QuizFlow.choosing_subject, F.data.startswith("subject:"))
async def subject_selected(callback: CallbackQuery, state: FSMContext):
    subject = SUBJECTS[int(callback.data.split(":")[1])]
    await state.update_data(subject=subject)
    await state.set_state(QuizFlow.choosing_difficulty)
    await callback.message.edit_text(
        f"📚 Subject: {subject}\n\nChoose a difficulty:",
        reply_markup=difficulty_keyboard(),
    )
    await callback.answer()


@router.callback_query(QuizFlow.choosing_difficulty, F.data.startswith("difficulty:"))
async def difficulty_selected(callback: CallbackQuery, state: FSMContext):
    difficulty = callback.data.split(":", 1)[1]
    await state.update_data(difficulty=difficulty)
    data = await state.get_data()

    await state.set_state(QuizFlow.choosing_question_limit)
    await callback.message.edit_text(
        f"📚 Subject: {data['subject']}\n"
        f"📈 Difficulty: {difficulty}\n\n"
        f"How many questions?",
        reply_markup=question_limit_keyboard(),
    )
    await callback.answer()


@router.callback_query(QuizFlow.choosing_question_limit, F.data.startswith("limit:"))
async def limit_selected(callback: CallbackQuery, state: FSMContext, sessions: SessionStore):
    limit = int(callback.data.split(":")[1])
    data = await state.get_data()

    session = sessions.start(callback.from_user.id, data["difficulty"], question_limit=limit)

    limit_text = str(limit) if limit else "no limit"
    await callback.message.edit_text(
        f"✅ Quiz started!\n\n"
        f"📚 Subject: {data['subject']}\n"
        f"📈 Difficulty: {data['difficulty']}\n"
        f"❓ Questions: {limit_text}"
    )
    await callback.answer()

    await send_next_question(callback.message, state, session, sessions, callback.from_user.id)
