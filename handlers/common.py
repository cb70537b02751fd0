"""
handlers/common.py
------------------
Pieces shared by all command handlers:
    - Mapping errors to the text the user sees.
    - Best-effort side effects (stickers, deleting the command message)
      whose failures are logged and otherwise ignored.
"""

from typing import Awaitable

from telegram import Message
from telegram.error import TelegramError

from services.errors import BotError
from utils.logger import get_logger

logger = get_logger(__name__)

GENERIC_FAILURE = "❌ Something went wrong. Please try again later"


def error_text(error: Exception) -> str:
    """
    Text to reply with when a command fails.

    User-input errors are shown verbatim; everything else is masked.
    """
    if isinstance(error, BotError) and error.is_user_facing:
        return f"❌ {error.message}"
    return GENERIC_FAILURE


async def reply_error(message: Message, error: Exception) -> None:
    """Log ``error`` and tell the user about it."""
    if isinstance(error, BotError) and error.is_user_facing:
        logger.info(f"Rejected command from chat {message.chat_id}: {error.message}")
    else:
        logger.exception(f"Command failed in chat {message.chat_id}", exc_info=error)
    await message.reply_text(error_text(error))


async def best_effort(action: Awaitable, description: str) -> None:
    """
    Await a side effect that the reply does not depend on.

    Telegram failures are logged and dropped.
    """
    try:
        await action
    except TelegramError as e:
        logger.warning(f"Could not {description}: {e}")


async def delete_command_message(message: Message) -> None:
    """Remove the triggering command message from the chat."""
    await best_effort(message.delete(), f"delete message {message.message_id}")
