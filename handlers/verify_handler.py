"""
handlers/verify_handler.py
---------------------------
Handles the /verify #tag code command.
"""

from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import ContextTypes

from handlers.common import delete_command_message, reply_error
from services.verify_service import VerifyService


async def verify_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /verify - confirm ownership of a player account.

    Usage:
        /verify #2PP abc123

    The command message carries the player's API token, so it is
    deleted afterwards whatever the outcome.
    """
    message = update.effective_message
    if not message:
        return

    verify_service: VerifyService = context.bot_data["verify_service"]

    try:
        reply = await verify_service.verify(message.text or "")
        await message.reply_text(reply, parse_mode=ParseMode.HTML)
    except Exception as e:
        await reply_error(message, e)
    finally:
        await delete_command_message(message)
