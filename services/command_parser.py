"""
services/command_parser.py
--------------------------
Extracts player tags and verification codes from command messages.

/stats relies on Telegram's own hashtag detection (message entities),
while /verify matches the raw text. A tag typed in a way Telegram does not
mark as a hashtag is therefore accepted by /verify but rejected by /stats.
"""

import re
from typing import Tuple

from telegram import Message, MessageEntity

from services.errors import BotError

STATS_USAGE = "Enter the player's tag after the command, starting with the #"
VERIFY_USAGE = "Enter the player's tag and the verification code after the command"

# /verify[@BotName] #TAG CODE
_TAG_AND_CODE_RE = re.compile(r"^/\w+(?:@\w+)?\s+(#\w+)\s*(\w+)?")


def parse_tag_from_message(message: Message) -> str:
    """
    Return the first hashtag in ``message`` as a player tag.

    Raises:
        BotError: USAGE if the message has no text or no hashtag entity.
    """
    if not message.text:
        raise BotError.usage(STATS_USAGE)

    # parse_entities resolves Telegram's UTF-16 offsets
    hashtags = message.parse_entities([MessageEntity.HASHTAG])
    if not hashtags:
        raise BotError.usage(STATS_USAGE)

    first = min(hashtags, key=lambda entity: entity.offset)
    return hashtags[first]


def parse_tag_and_code(text: str) -> Tuple[str, str]:
    """
    Split ``/verify #TAG CODE`` into its tag and code.

    Raises:
        BotError: USAGE if either the tag or the code is missing.
    """
    match = _TAG_AND_CODE_RE.match((text or "").strip())
    if not match:
        raise BotError.usage(VERIFY_USAGE)

    tag, code = match.groups()
    if not tag or not code:
        raise BotError.usage(VERIFY_USAGE)
    return tag, code
