"""
handlers/stats_handler.py
--------------------------
Handles the /stats #tag command.
Delegates lookup and formatting to StatsService.
"""

from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import ContextTypes

from config import DEFAULT_STATS_STICKER_ID
from handlers.common import best_effort, delete_command_message, reply_error
from services.stats_service import StatsService
from utils.logger import get_logger

logger = get_logger(__name__)


async def stats_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /stats - reply with a player's profile summary.

    Usage:
        /stats #2PP

    A sticker is sent ahead of the summary. The command message is
    deleted afterwards whatever the outcome.
    """
    message = update.effective_message
    if not message:
        return

    stats_service: StatsService = context.bot_data["stats_service"]
    sticker_id = context.bot_data.get("stats_sticker_id", DEFAULT_STATS_STICKER_ID)

    try:
        reply = await stats_service.get_stats(message)
        await best_effort(message.reply_sticker(sticker=sticker_id), "send stats sticker")
        await message.reply_text(reply, parse_mode=ParseMode.HTML)
    except Exception as e:
        await reply_error(message, e)
    finally:
        await delete_command_message(message)
