"""Classify notifications by ``type_url`` and decide Slack noise suppression."""

import json

from gke_notifier.models.events import EventKind, ResourceType
from gke_notifier.models.pubsub import Attributes

_KNOWN_EVENTS = {kind.value: kind for kind in EventKind if kind is not EventKind.UNKNOWN}

NODE_POOL_SEGMENT = "/nodePools/"


def classify(attributes: Attributes) -> EventKind:
    """Map the event name at the end of ``type_url`` to an EventKind.

    Matching is exact and case-sensitive; anything else is ``UNKNOWN``.
    """
    event_name = attributes.type_url.rsplit(".", 1)[-1]
    return _KNOWN_EVENTS.get(event_name, EventKind.UNKNOWN)


def node_pool_from_resource(resource: str | None) -> str | None:
    """Extract the node pool name from a full node pool resource path."""
    if not resource or NODE_POOL_SEGMENT not in resource:
        return None
    return resource.rsplit(NODE_POOL_SEGMENT, 1)[1] or None


def node_pool_name(attributes: Attributes) -> str | None:
    """Return the node pool named by the ``payload`` attribute, if any.

    The payload must report a ``NODE_POOL`` resource type and a ``resource``
    path such as ``projects/p/locations/l/clusters/c/nodePools/<name>``.
    """
    try:
        payload = json.loads(attributes.payload or "")
    except ValueError:
        return None
    if not isinstance(payload, dict) or payload.get("resourceType") != ResourceType.NODE_POOL.value:
        return None
    resource = payload.get("resource")
    return node_pool_from_resource(resource) if isinstance(resource, str) else None


def is_node_pool_upgrade_available_event(attributes: Attributes) -> bool:
    """True for UpgradeAvailableEvents scoped to a node pool.

    GKE sends one of these for every node pool in a cluster, so they flood a
    chat channel. They are still logged.
    """
    return (
        classify(attributes) is EventKind.UPGRADE_AVAILABLE
        and node_pool_name(attributes) is not None
    )
