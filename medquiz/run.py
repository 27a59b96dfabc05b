"""Main entry point for the MedQuiz bot."""
import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.types import BotCommand

from medquiz.config import settings
from medquiz.handlers import start, subject, quiz, results
from medquiz.llm.client import TextGenerator
from medquiz.llm.images import ImageGenerator
from medquiz.services.question_generator import QuestionGenerator
from medquiz.services.session_store import SessionStore

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)


def build_session_store() -> SessionStore:
    text_generator = TextGenerator()
    return SessionStore(
        text_generator=text_generator,
        image_generator=ImageGenerator(),
        question_source=QuestionGenerator(text_generator),
    )


async def main():
    """Main function to start the bot."""
    if not settings.BOT_TOKEN:
        logger.error("BOT_TOKEN is not set. Create a .env file based on .env.example")
        sys.exit(1)

    logger.info("Starting MedQuiz bot (model=%s, images=%s)", settings.LLM_MODEL, settings.IMAGES_ENABLED)

    bot = Bot(token=settings.BOT_TOKEN)
    dp = Dispatcher(storage=MemoryStorage(), sessions=build_session_store())

    dp.include_router(start.router)
    dp.include_router(subject.router)
    dp.include_router(quiz.router)
    dp.include_router(results.router)

    await bot.set_my_commands([
        BotCommand(command="start", description="Main menu"),
    ])

    try:
        logger.info("Starting bot polling...")
        await dp.start_polling(
            bot,
            allowed_updates=dp.resolve_used_update_types()
        )
    finally:
        await bot.session.close()
        logger.info("Bot stopped")


def cli():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")


if __name__ == "__main__":
    cli()
