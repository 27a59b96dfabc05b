from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton

from medquiz.config import SUBJECTS, DIFFICULTIES, QUESTION_LIMITS


def subject_keyboard() -> InlineKeyboardMarkup:
    buttons = []
    for i, subject in enumerate(SUBJECTS):
        buttons.append([InlineKeyboardButton(text=subject, callback_data=f"subject:{i}")])
    buttons.append([InlineKeyboardButton(text="🏠 Back", callback_data="go_home")])
    return InlineKeyboardMarkup(inline_keyboard=buttons)


def difficulty_keyboard() -> InlineKeyboardMarkup:
    buttons = [
        [InlineKeyboardButton(text=level, callback_data=f"difficulty:{level}")]
        for level in DIFFICULTIES
    ]
    buttons.append([InlineKeyboardButton(text="🔙 Back to subjects", callback_data="start_quiz")])
    return InlineKeyboardMarkup(inline_keyboard=buttons)


def question_limit_keyboard() -> InlineKeyboardMarkup:
    buttons = []
    for limit in QUESTION_LIMITS:
        text = f"{limit} questions" if limit else "♾ No limit"
        buttons.append([InlineKeyboardButton(text=text, callback_data=f"limit:{limit}")])
    return InlineKeyboardMarkup(inline_keyboard=buttons)


def options_keyboard(options: list[str]) -> InlineKeyboardMarkup:
    labels = ["A", "B", "C", "D", "E", "F"]
    buttons = []
    for i, option in enumerate(options):
        label = labels[i] if i < len(labels) else str(i + 1)
        buttons.append([InlineKeyboardButton(
            text=f"{label}) {option}",
            callback_data=f"ans:{i}",
        )])
    buttons.append([InlineKeyboardButton(text="❌ Cancel quiz", callback_data="cancel_quiz")])
    return InlineKeyboardMarkup(inline_keyboard=buttons)


def follow_up_keyboard() -> InlineKeyboardMarkup:
    """Keyboard shown after an answer."""
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(text="💡 Explanation", callback_data="explain")],
        [InlineKeyboardButton(text="🎯 Learning objectives", callback_data="objectives")],
        [InlineKeyboardButton(text="❓ Ask a doubt", callback_data="doubt")],
        [
            InlineKeyboardButton(text="➡️ Next question", callback_data="next_question"),
            InlineKeyboardButton(text="🏁 Finish", callback_data="finish_quiz"),
        ],
    ])


def retry_keyboard() -> InlineKeyboardMarkup:
    """Keyboard shown when a question could not be generated."""
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(text="🔄 Try again", callback_data="next_question")],
        [InlineKeyboardButton(text="🏁 Finish", callback_data="finish_quiz")],
    ])


def doubt_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(text="🔙 Back", callback_data="back_to_review")],
    ])
