"""
services/verify_service.py
--------------------------
Business logic for the /verify command.
"""

from api.clash_api import ClashAPI
from services.command_parser import parse_tag_and_code
from utils.logger import get_logger

logger = get_logger(__name__)

OWNERSHIP_CONFIRMED = "✅ Ownership confirmed!"
OWNERSHIP_REJECTED = "❌ Verification code is invalid"


class VerifyService:
    """Checks that a user owns a player account via its in-game API token."""

    def __init__(self, api: ClashAPI):
        self.api = api

    async def verify(self, text: str) -> str:
        """
        Verify ``/verify #TAG CODE`` and return the reply text.

        Raises:
            BotError: USAGE when the tag or code is missing, UPSTREAM for
                provider failures.
        """
        tag, code = parse_tag_and_code(text)
        result = await self.api.verify_token(tag, code)
        logger.info(f"Verification for {result.tag}: status={result.status!r}")
        return OWNERSHIP_CONFIRMED if result.ok else OWNERSHIP_REJECTED
