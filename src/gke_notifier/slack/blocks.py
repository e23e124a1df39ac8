"""Build Slack Incoming Webhook messages from cluster notifications.

Slack formatting differs from the log line: the cluster is named by its short
name, mrkdwn code spans highlight identifiers, and the console link becomes a
button. Both renderers share ``parse_event`` so they never disagree about the
event kind or the affected resource.
"""

from slack_sdk.models.blocks import (
    Block,
    ButtonElement,
    ContextBlock,
    MarkdownTextObject,
    SectionBlock,
)

from gke_notifier.messages.console import cluster_console_url, node_pool_console_url
from gke_notifier.messages.events import ParsedEvent, parse_event
from gke_notifier.messages.formatter import has_unknown_resource_type
from gke_notifier.models.events import (
    EventKind,
    ResourceType,
    SecurityBulletin,
    Upgrade,
    UpgradeAvailable,
)
from gke_notifier.models.pubsub import PubSubMessage
from gke_notifier.models.slack import WebhookMessage

CONSOLE_BUTTON_TEXT = "Open in Console"
EMPTY_OR_INVALID = "empty or invalid payload"


def _cluster_name(message: PubSubMessage) -> str:
    return message.attributes.cluster_name or "unknown"


def _context_block(lines: list[str]) -> ContextBlock | None:
    if not lines:
        return None
    return ContextBlock(elements=[MarkdownTextObject(text=line) for line in lines])


def _security_bulletin_text(cluster: str, bulletin: SecurityBulletin) -> tuple[str, str]:
    plain = f"Security bulletin {bulletin.bulletin_id} affecting {cluster} has been issued"
    markdown = f"Security bulletin `{bulletin.bulletin_id}` affecting `{cluster}` has been issued"
    return plain, markdown


def _security_bulletin_details(bulletin: SecurityBulletin) -> list[str]:
    lines = []
    if bulletin.severity:
        lines.append(f"*Severity:* {bulletin.severity}")
    if bulletin.cve_ids:
        lines.append(f"*CVEs:* {', '.join(bulletin.cve_ids)}")
    if bulletin.suggested_upgrade_target:
        lines.append(f"*Suggested upgrade target:* `{bulletin.suggested_upgrade_target}`")
    if bulletin.manual_steps_required:
        lines.append("*Manual steps required*")
    if bulletin.bulletin_uri:
        lines.append(f"<{bulletin.bulletin_uri}|{bulletin.bulletin_id}>")
    return lines


def _upgrade_available_text(
    cluster: str, payload: UpgradeAvailable, node_pool: str | None
) -> tuple[str, str]:
    if payload.resource_type == ResourceType.MASTER.value:
        plain = f"{cluster} control plane has new version available {payload.version}"
        markdown = f"*`{cluster}`* control plane has new version available"
    else:
        plain = f"{cluster} node pool {node_pool} has new version available {payload.version}"
        markdown = f"*`{cluster}`* node pool `{node_pool}` has new version available"
    return plain, markdown


def _upgrade_available_details(payload: UpgradeAvailable) -> list[str]:
    lines = [f"*Version:* `{payload.version}`"]
    if payload.release_channel is not None:
        lines.append(f"*Release channel:* {payload.release_channel.channel}")
    return lines


def _upgrade_text(cluster: str, payload: Upgrade, node_pool: str | None) -> tuple[str, str]:
    if payload.resource_type == ResourceType.MASTER.value:
        plain = f"{cluster} control plane is upgrading to version {payload.target_version}"
        markdown = f"*`{cluster}`* control plane is upgrading"
    else:
        plain = f"{cluster} node pool {node_pool} is upgrading to version {payload.target_version}"
        markdown = f"*`{cluster}`* node pool `{node_pool}` is upgrading"
    return plain, markdown


def _upgrade_details(payload: Upgrade) -> list[str]:
    if payload.current_version is None:
        return [f"*Target version:* `{payload.target_version}`"]
    return [f"*Version:* `{payload.current_version}` to `{payload.target_version}`"]


def _render(message: PubSubMessage, event: ParsedEvent) -> tuple[str, str, list[str]]:
    """Return plain text, mrkdwn text, and context lines for a parsed event."""
    cluster = _cluster_name(message)

    if event.kind is EventKind.UNKNOWN:
        text = f"{cluster} received event of unknown type"
        return text, f"`{cluster}` received event of unknown type", []

    if event.raw is None:
        return EMPTY_OR_INVALID, EMPTY_OR_INVALID, []

    if has_unknown_resource_type(event):
        plain = f"{cluster} unknown resource type {event.resource_type}"
        markdown = (
            f"*`{cluster}`* unknown resource type `{event.resource_type}` "
            f"encountered on `{event.kind.value}`"
        )
        return plain, markdown, []

    if event.payload is None:
        plain = f"{cluster} sent an incomplete {event.kind.value} payload"
        return plain, f"`{cluster}` sent an incomplete `{event.kind.value}` payload", []

    if isinstance(event.payload, SecurityBulletin):
        plain, markdown = _security_bulletin_text(cluster, event.payload)
        return plain, markdown, _security_bulletin_details(event.payload)
    if isinstance(event.payload, UpgradeAvailable):
        plain, markdown = _upgrade_available_text(cluster, event.payload, event.node_pool)
        return plain, markdown, _upgrade_available_details(event.payload)
    plain, markdown = _upgrade_text(cluster, event.payload, event.node_pool)
    return plain, markdown, _upgrade_details(event.payload)


def _console_button(message: PubSubMessage, event: ParsedEvent) -> ButtonElement | None:
    if event.kind is EventKind.UNKNOWN or event.raw is None:
        return None
    if event.node_pool is not None:
        url = node_pool_console_url(message, event.node_pool)
    else:
        url = cluster_console_url(message)
    if url is None:
        return None
    return ButtonElement(text=CONSOLE_BUTTON_TEXT, url=url)


def to_webhook_payload(message: PubSubMessage, channel: str | None = None) -> WebhookMessage:
    """Build the Slack Incoming Webhook message for a notification.

    Args:
        message: A decoded (and optionally enriched) message.
        channel: Channel override; the webhook's default channel is used when None.

    Returns:
        A WebhookMessage with a plain-text fallback and Block Kit blocks.
    """
    event = parse_event(message)
    plain, markdown, details = _render(message, event)

    blocks: list[Block] = [
        SectionBlock(
            text=MarkdownTextObject(text=markdown),
            accessory=_console_button(message, event),
        )
    ]
    context = _context_block(details)
    if context is not None:
        blocks.append(context)

    return WebhookMessage(
        text=plain,
        blocks=[block.to_dict() for block in blocks],
        channel=channel,
    )
