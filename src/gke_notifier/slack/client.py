"""Async Slack Incoming Webhook client singleton.

Creates a cached AsyncWebhookClient for the webhook URL from application
settings on first use.
"""

from slack_sdk.webhook.async_client import AsyncWebhookClient

from gke_notifier.config import get_settings

_client: AsyncWebhookClient | None = None


async def get_webhook_client() -> AsyncWebhookClient:
    """Return a cached async webhook client instance.

    Creates the client on first call using slack_webhook from settings.
    Subsequent calls return the cached instance.
    """
    global _client
    if _client is None:
        settings = get_settings()
        _client = AsyncWebhookClient(url=settings.slack_webhook)
    return _client


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None
