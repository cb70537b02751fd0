"""
Shared test fixtures for CoC Helper Bot tests.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from telegram import Chat, Message, MessageEntity

from config import ClashAPIConfig


def make_message(text, entities=()):
    """Build a real Telegram Message (no bot attached)."""
    return Message(
        message_id=1,
        date=datetime.now(timezone.utc),
        chat=Chat(id=42, type=Chat.PRIVATE),
        text=text,
        entities=list(entities),
    )


def hashtag(offset, length):
    return MessageEntity(type=MessageEntity.HASHTAG, offset=offset, length=length)


def bot_command(length):
    return MessageEntity(type=MessageEntity.BOT_COMMAND, offset=0, length=length)


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set up mock environment variables for testing"""
    monkeypatch.setenv("BOT_TOKEN", "123456:test-bot-token")
    monkeypatch.setenv("COC_TOKEN", "test-coc-token")
    monkeypatch.setenv("COC_API_URL", "https://api.test/v1/")
    for key in ("COC_TIMEOUT_SECONDS", "LOG_LEVEL", "INTRO_VIDEO_ID", "STATS_STICKER_ID"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def clash_config():
    return ClashAPIConfig(token="test-coc-token", base_url="https://api.test/v1")


@pytest.fixture
def player_json():
    """Provider body for a clanless player"""
    return {
        "tag": "#2PP",
        "name": "Ash",
        "clan": None,
        "townHallLevel": 14,
        "trophies": 5000,
        "bestTrophies": 5200,
        "warStars": 900,
    }


@pytest.fixture
def clan_player_json(player_json):
    return {**player_json, "clan": {"tag": "#999", "name": "Elite", "clanLevel": 10}}


@pytest.fixture
def chat_message():
    """Telegram message double whose reply methods are awaitable"""
    message = AsyncMock()
    message.chat_id = 42
    message.message_id = 7
    message.text = ""
    return message


@pytest.fixture
def update(chat_message):
    return MagicMock(effective_message=chat_message)


@pytest.fixture
def context():
    ctx = MagicMock()
    ctx.bot_data = {
        "stats_service": AsyncMock(),
        "verify_service": AsyncMock(),
        "intro_video_id": "intro-video",
        "stats_sticker_id": "ack-sticker",
    }
    return ctx
