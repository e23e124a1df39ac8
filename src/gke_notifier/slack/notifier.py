"""Deliver webhook messages to Slack.

Delivery is fire-and-forget: failures are logged and reported to the caller as
False but never raised, so a Slack outage cannot fail the push request. Pub/Sub
redelivery is not triggered and no retry is attempted.
"""

import asyncio
import logging

from aiohttp import ClientError

from gke_notifier.models.slack import WebhookMessage
from gke_notifier.slack.client import get_webhook_client

logger = logging.getLogger(__name__)


async def deliver(message: WebhookMessage) -> bool:
    """Post a message to the configured Slack Incoming Webhook.

    Args:
        message: The webhook body built by ``to_webhook_payload``.

    Returns:
        True when Slack accepted the message, False otherwise.
    """
    try:
        client = await get_webhook_client()
        response = await client.send_dict(message.model_dump(exclude_none=True))
    except (ClientError, asyncio.TimeoutError):
        logger.warning("Failed to post webhook message: %s", message.text, exc_info=True)
        return False

    if response.status_code != 200:
        logger.warning(
            "Slack webhook rejected message (%s %s): %s",
            response.status_code,
            response.body,
            message.text,
        )
        return False
    return True
