"""Tests for Slack webhook delivery.

deliver must be fire-and-forget: it logs failures and returns False, never
letting a delivery failure propagate.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from aiohttp import ClientConnectionError

from gke_notifier.models.slack import WebhookMessage
from gke_notifier.slack.notifier import deliver

MESSAGE = WebhookMessage(
    text="test-cluster control plane is upgrading to version 1.22.6-gke.300",
    blocks=[
        {
            "type": "section",
            "text": {"type": "mrkdwn", "text": "*`test-cluster`* control plane is upgrading"},
        }
    ],
)


@pytest.fixture()
def mock_client():
    """Patch get_webhook_client to return an AsyncMock webhook client."""
    client = AsyncMock()
    client.send_dict.return_value = MagicMock(status_code=200, body="ok")
    with patch("gke_notifier.slack.notifier.get_webhook_client", new_callable=AsyncMock) as m:
        m.return_value = client
        yield client


async def test_deliver_posts_message(mock_client: AsyncMock):
    """deliver posts the message body without unset fields."""
    assert await deliver(MESSAGE) is True

    mock_client.send_dict.assert_called_once()
    body = mock_client.send_dict.call_args.args[0]
    assert body["text"] == MESSAGE.text
    assert body["blocks"] == MESSAGE.blocks
    assert "channel" not in body


async def test_deliver_includes_channel(mock_client: AsyncMock):
    """A configured channel is sent."""
    await deliver(MESSAGE.model_copy(update={"channel": "#gke-alerts"}))

    assert mock_client.send_dict.call_args.args[0]["channel"] == "#gke-alerts"


async def test_deliver_rejected_by_slack(mock_client: AsyncMock, caplog):
    """A non-200 response is logged and reported as False."""
    mock_client.send_dict.return_value = MagicMock(status_code=404, body="no_service")

    assert await deliver(MESSAGE) is False
    assert "no_service" in caplog.text


async def test_deliver_connection_error(mock_client: AsyncMock):
    """Transport errors do not propagate."""
    mock_client.send_dict.side_effect = ClientConnectionError("connection refused")

    assert await deliver(MESSAGE) is False


async def test_deliver_timeout(mock_client: AsyncMock):
    """Timeouts do not propagate."""
    mock_client.send_dict.side_effect = asyncio.TimeoutError()

    assert await deliver(MESSAGE) is False
