"""
main.py
-------
Entry point for the CoC Helper Telegram bot.

Responsibilities:
    - Load settings and configure logging.
    - Build the Clash of Clans API client and the services using it.
    - Configure and start the Telegram bot with all handlers.
"""

from telegram import BotCommand, Update
from telegram.ext import Application, CommandHandler, ContextTypes

from api.clash_api import ClashAPI
from config import Settings, load_settings
from handlers.start_handler import help_command
from handlers.stats_handler import stats_command
from handlers.verify_handler import verify_command
from services.stats_service import StatsService
from services.verify_service import VerifyService
from utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

BOT_COMMANDS = [
    BotCommand("help", "Show basic intro"),
]


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    await application.bot.set_my_commands(BOT_COMMANDS)
    logger.info("Bot commands menu registered successfully.")


async def close_api(application: Application) -> None:
    """Release the Clash of Clans HTTP connections on shutdown."""
    api: ClashAPI = application.bot_data["clash_api"]
    await api.close()
    logger.info("Clash of Clans API client closed.")


async def log_unhandled_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Last-resort handler for errors escaping a command handler."""
    logger.error(f"Unhandled error while processing {update!r}", exc_info=context.error)


def build_application(settings: Settings) -> Application:
    """
    Wire settings, API client, services and handlers into an Application.

    Updates are processed concurrently; handlers share no mutable state.
    """
    app = (
        Application.builder()
        .token(settings.bot_token)
        .concurrent_updates(True)
        .post_init(set_bot_commands)
        .post_shutdown(close_api)
        .build()
    )

    api = ClashAPI(settings.clash)
    app.bot_data.update(
        clash_api=api,
        stats_service=StatsService(api),
        verify_service=VerifyService(api),
        intro_video_id=settings.intro_video_id,
        stats_sticker_id=settings.stats_sticker_id,
    )

    app.add_handler(CommandHandler(["start", "help"], help_command))
    app.add_handler(CommandHandler("stats", stats_command))
    app.add_handler(CommandHandler("verify", verify_command))
    app.add_error_handler(log_unhandled_error)
    return app


def main() -> None:
    """Initialize and run the bot."""
    settings = load_settings()
    configure_logging(settings.log_level)

    if settings.clash.timeout_seconds is None:
        logger.warning("COC_TIMEOUT_SECONDS is not set; Clash of Clans API calls have no timeout.")

    app = build_application(settings)

    logger.info("🚀 CoC Helper Bot is running! Press Ctrl+C to stop.")
    app.run_polling(allowed_updates=[Update.MESSAGE])
    logger.info("CoC Helper Bot stopped.")


if __name__ == "__main__":
    main()
