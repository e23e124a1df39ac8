"""Slack egress: webhook message building and delivery."""

from gke_notifier.slack.blocks import to_webhook_payload
from gke_notifier.slack.client import get_webhook_client, reset_client
from gke_notifier.slack.notifier import deliver

__all__ = [
    "deliver",
    "get_webhook_client",
    "reset_client",
    "to_webhook_payload",
]
