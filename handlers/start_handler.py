"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
Sends the intro video followed by the list of available commands.
"""

from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import ContextTypes

from config import DEFAULT_INTRO_VIDEO_ID
from handlers.common import best_effort
from utils.logger import get_logger

logger = get_logger(__name__)

HELP_TEXT = "\n".join([
    "<b>Welcome to CoC Helper Bot</b>",
    "You can use the following commands\n",
    "/stats - Shows a brief stats for a player",
    "/stats #playerTag\n",
    "/verify - Verifies account ownership",
    "/verify #playerTag apiToken",
])


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start and /help - show the intro video and usage."""
    message = update.effective_message
    if not message:
        return

    video_id = context.bot_data.get("intro_video_id", DEFAULT_INTRO_VIDEO_ID)
    logger.info(f"Showing help in chat {message.chat_id}")

    await best_effort(message.reply_video(video=video_id), "send intro video")
    await message.reply_text(HELP_TEXT, parse_mode=ParseMode.HTML)
