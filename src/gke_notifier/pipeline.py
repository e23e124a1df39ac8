"""Turn a decoded envelope into a log line and an optional Slack message.

Everything here is pure: ambient configuration is passed in by the caller, and
delivery of the webhook message is left to ``gke_notifier.slack.notifier``.
"""

from pydantic import BaseModel

from gke_notifier.messages.classifier import is_node_pool_upgrade_available_event
from gke_notifier.messages.enrich import with_project_name
from gke_notifier.messages.events import parse_event
from gke_notifier.messages.formatter import format_message
from gke_notifier.models.pubsub import PubSubEnvelope, PubSubMessage
from gke_notifier.models.slack import WebhookMessage
from gke_notifier.slack.blocks import to_webhook_payload


class ProcessedNotification(BaseModel):
    """Outputs for one push request."""

    message: PubSubMessage  # Enriched message
    formatted: str
    webhook_message: WebhookMessage | None = None


def is_suppressed(message: PubSubMessage) -> bool:
    """True when the message must not be sent to Slack.

    Checks the ``payload`` attribute and the payload the renderers actually
    use, which may come from ``data``.
    """
    return (
        is_node_pool_upgrade_available_event(message.attributes)
        or parse_event(message).is_node_pool_upgrade_available
    )


def process_envelope(
    envelope: PubSubEnvelope,
    *,
    project: str | None = None,
    webhook_configured: bool = False,
    channel: str | None = None,
) -> ProcessedNotification:
    """Enrich, format, and (when wanted) build the Slack message for an envelope.

    Args:
        envelope: A decoded push envelope.
        project: Project name for resource paths and console links.
        webhook_configured: Whether a Slack webhook URL is configured.
        channel: Slack channel override for the webhook message.

    Returns:
        The formatted line, plus a webhook message unless Slack is not
        configured or the event is a node pool UpgradeAvailableEvent.
    """
    message = with_project_name(envelope.message, project)
    formatted = format_message(message)

    webhook_message = None
    # Node pool UpgradeAvailableEvents arrive once per node pool and would
    # flood the channel, so they are only logged.
    if webhook_configured and not is_suppressed(message):
        webhook_message = to_webhook_payload(message, channel=channel)

    return ProcessedNotification(
        message=message,
        formatted=formatted,
        webhook_message=webhook_message,
    )
