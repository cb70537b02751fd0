"""
Unit tests for the /verify workflow.
"""

from unittest.mock import AsyncMock

import pytest

from models.player import VerificationResult
from services.errors import BotError, ErrorKind
from services.verify_service import OWNERSHIP_CONFIRMED, OWNERSHIP_REJECTED, VerifyService


@pytest.mark.asyncio
async def test_ok_status_confirms_ownership():
    api = AsyncMock()
    api.verify_token.return_value = VerificationResult(tag="#ABC123", status="ok")

    reply = await VerifyService(api).verify("/verify #ABC123 xyz789")

    api.verify_token.assert_awaited_once_with("#ABC123", "xyz789")
    assert reply == OWNERSHIP_CONFIRMED


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["invalid", "", "OK"])
async def test_other_status_rejects(status):
    api = AsyncMock()
    api.verify_token.return_value = VerificationResult(tag="#ABC123", status=status)

    reply = await VerifyService(api).verify("/verify #ABC123 xyz789")

    assert reply == OWNERSHIP_REJECTED


@pytest.mark.asyncio
async def test_missing_code_skips_call():
    api = AsyncMock()

    with pytest.raises(BotError) as exc_info:
        await VerifyService(api).verify("/verify #ABC123")

    assert exc_info.value.kind is ErrorKind.USAGE
    api.verify_token.assert_not_awaited()


@pytest.mark.asyncio
async def test_logs_tag_reported_by_provider(caplog):
    import logging
    caplog.set_level(logging.INFO)
    api = AsyncMock()
    api.verify_token.return_value = VerificationResult(tag="#ABC123", status="ok")

    await VerifyService(api).verify("/verify #abc123 xyz789")

    assert "Verification for #ABC123: status='ok'" in caplog.text
