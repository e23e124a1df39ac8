"""Render a notification as a single log line.

Formatting never fails: unknown event kinds, unknown resource types, and
missing or partial payloads all fall back to generic lines that still carry
the raw ``type_url`` or message data.
"""

from gke_notifier.messages.console import cluster_path
from gke_notifier.messages.events import ParsedEvent, parse_event
from gke_notifier.models.events import (
    EventKind,
    ResourceType,
    SecurityBulletin,
    Upgrade,
    UpgradeAvailable,
)
from gke_notifier.models.pubsub import PubSubMessage

UPGRADE_KINDS = (EventKind.UPGRADE_AVAILABLE, EventKind.UPGRADE)
KNOWN_RESOURCE_TYPES = {resource_type.value for resource_type in ResourceType}


def has_unknown_resource_type(event: ParsedEvent) -> bool:
    """True for upgrade events reporting a resource type other than MASTER or NODE_POOL."""
    return (
        event.kind in UPGRADE_KINDS
        and event.resource_type is not None
        and event.resource_type not in KNOWN_RESOURCE_TYPES
    )


def _with_data(line: str, data: str) -> str:
    return f"{line}: {data}" if data else line


def _format_security_bulletin(message: PubSubMessage, bulletin: SecurityBulletin) -> str:
    return (
        f"Security bulletin {bulletin.bulletin_id} affecting {cluster_path(message)} "
        "has been issued"
    )


def _format_upgrade_available(message: PubSubMessage, payload: UpgradeAvailable) -> str:
    if payload.resource_type == ResourceType.MASTER.value:
        subject = f"Control plane {cluster_path(message)}"
    else:
        subject = f"Node pool {payload.resource}"
    line = f"{subject} has new version {payload.version} available for upgrade"
    if payload.release_channel is not None:
        line += f" in the {payload.release_channel.channel} channel"
    return line


def _format_upgrade(message: PubSubMessage, payload: Upgrade) -> str:
    if payload.resource_type == ResourceType.MASTER.value:
        subject = f"Control plane {cluster_path(message)} is upgrading"
        from_version = f"from version {payload.current_version} "
    else:
        subject = f"Node pool {payload.resource} is upgrading"
        from_version = f"from {payload.current_version} "
    if payload.current_version is None:
        return f"{subject} to version {payload.target_version}"
    return f"{subject} {from_version}to {payload.target_version}"


def format_message(message: PubSubMessage) -> str:
    """Render a message as a human-readable log line.

    Args:
        message: A decoded (and optionally enriched) message.

    Returns:
        A non-empty line. The same message always yields the same line.
    """
    event = parse_event(message)

    if event.kind is EventKind.UNKNOWN:
        return f"Unknown message type `{message.attributes.type_url}` encountered: {message.data}"

    if event.raw is None:
        return _with_data("Empty or invalid payload", message.data)

    if has_unknown_resource_type(event):
        return f"Unknown resource type `{event.resource_type}` encountered"

    if event.payload is None:
        line = f"Incomplete `{event.kind.value}` payload"
        if event.resource_type is not None:
            line += f" with resource type `{event.resource_type}`"
        return _with_data(f"{line} encountered", message.data)

    if isinstance(event.payload, SecurityBulletin):
        return _format_security_bulletin(message, event.payload)
    if isinstance(event.payload, UpgradeAvailable):
        return _format_upgrade_available(message, event.payload)
    return _format_upgrade(message, event.payload)
