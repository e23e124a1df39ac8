"""Data models for GKE cluster notifications and Slack webhook messages."""

from gke_notifier.models.events import (
    EventKind,
    ReleaseChannel,
    ResourceType,
    SecurityBulletin,
    Upgrade,
    UpgradeAvailable,
)
from gke_notifier.models.pubsub import Attributes, PubSubEnvelope, PubSubMessage
from gke_notifier.models.slack import WebhookMessage

__all__ = [
    "Attributes",
    "PubSubEnvelope",
    "PubSubMessage",
    "EventKind",
    "ResourceType",
    "ReleaseChannel",
    "SecurityBulletin",
    "Upgrade",
    "UpgradeAvailable",
    "WebhookMessage",
]
