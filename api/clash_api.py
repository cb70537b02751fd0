"""
api/clash_api.py
----------------
Client for the Clash of Clans public API.

Responsibilities:
    - Authenticate every request with the bearer token.
    - Look up player profiles.
    - Verify player ownership via the in-game API token.

There is no retry policy: every failure is surfaced immediately.
"""

import json
from typing import Optional
from urllib.parse import quote

import httpx

from config import ClashAPIConfig
from models.player import PlayerStats, VerificationResult
from services.errors import BotError
from utils.logger import get_logger

logger = get_logger(__name__)


class ClashAPI:
    """
    Clash of Clans API client.

    Usage:
        api = ClashAPI(settings.clash)
        stats = await api.lookup_player("#2PP")
        result = await api.verify_token("#2PP", "abc123")
        await api.close()
    """

    def __init__(self, config: ClashAPIConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = config.base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {config.token}",
                "Content-Type": "application/json",
            },
            timeout=config.timeout_seconds,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    def _player_url(self, tag: str) -> str:
        return f"{self.base_url}/players/{quote(tag, safe='')}"

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            return await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise BotError.upstream(f"{method} {url} failed: {e!r}") from e

    @staticmethod
    def _parse_json(response: httpx.Response) -> dict:
        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise BotError.upstream(f"Malformed JSON from {response.request.url}", response.status_code) from e
        if not isinstance(data, dict):
            raise BotError.upstream(f"Unexpected JSON body from {response.request.url}", response.status_code)
        return data

    # ==================== Players ====================

    async def lookup_player(self, tag: str) -> PlayerStats:
        """
        Fetch a player's profile.

        Args:
            tag: Player tag including the leading '#'.

        Raises:
            BotError: NOT_FOUND on HTTP 404, UPSTREAM on any other
                non-200 status, network failure or malformed body.
        """
        response = await self._send("GET", self._player_url(tag))

        if response.status_code == 404:
            raise BotError.not_found(tag)
        if response.status_code != 200:
            raise BotError.upstream(f"Player lookup returned HTTP {response.status_code}", response.status_code)

        data = self._parse_json(response)
        try:
            return PlayerStats.from_api(data, tag)
        except (KeyError, TypeError) as e:
            raise BotError.upstream(f"Player body is missing {e}", response.status_code) from e

    async def verify_token(self, tag: str, code: str) -> VerificationResult:
        """
        Check that ``code`` is the in-game API token of the player ``tag``.

        Raises:
            BotError: UPSTREAM on any non-200 status, network failure
                or malformed body.
        """
        response = await self._send("POST", f"{self._player_url(tag)}/verifytoken", json={"token": code})

        if response.status_code != 200:
            raise BotError.upstream(f"Token verification returned HTTP {response.status_code}", response.status_code)

        return VerificationResult.from_api(self._parse_json(response), tag)
