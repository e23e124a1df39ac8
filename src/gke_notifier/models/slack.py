"""Slack Incoming Webhook message model."""

from pydantic import BaseModel


class WebhookMessage(BaseModel):
    """JSON body posted to a Slack Incoming Webhook."""

    text: str  # Plain-text fallback shown in notifications
    blocks: list[dict] = []  # Block Kit blocks, already serialised
    channel: str | None = None  # Overrides the webhook's default channel
