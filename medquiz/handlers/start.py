from aiogram import Router, F
from aiogram.filters import CommandStart
from aiogram.types import Message, CallbackQuery
from aiogram.fsm.context import FSMContext

from medquiz.keyboards.main_menu import main_menu_keyboard
from medquiz.services.session_store import SessionStore

router = Router()

WELCOME_TEXT = (
    "👋 Hi! I'm MedQuiz, your medical exam practice partner.\n\n"
    "Answer questions, get explanations, and ask about anything that is unclear."
)


@router.message(CommandStart())
async def cmd_start(message: Message, state: FSMContext, sessions: SessionStore):
    await state.clear()
    sessions.drop(message.from_user.id)
    await message.answer(WELCOME_TEXT, reply_markup=main_menu_keyboard())


@router.callback_query(F.data == "go_home")
async def go_home(callback: CallbackQuery, state: FSMContext, sessions: SessionStore):
    await state.clear()
    sessions.drop(callback.from_user.id)
    await callback.message.edit_text(WELCOME_TEXT, reply_markup=main_menu_keyboard())
    await callback.answer()
