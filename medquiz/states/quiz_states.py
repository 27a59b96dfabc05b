from aiogram.fsm.state import StatesGroup, State


class QuizFlow(StatesGroup):
    choosing_subject = State()
    choosing_difficulty = State()
    choosing_question_limit = State()
    answering_question = State()
    reviewing_answer = State()
    asking_doubt = State()
