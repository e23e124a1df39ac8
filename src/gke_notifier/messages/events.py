"""Event payload loading and typed parsing shared by all renderers.

GKE puts the event details in the ``payload`` attribute as a JSON string. When
that attribute is missing, the decoded message ``data`` is tried instead.
"""

import json
from dataclasses import dataclass

from pydantic import BaseModel, ValidationError

from gke_notifier.messages.classifier import classify, node_pool_from_resource
from gke_notifier.models.events import (
    EventKind,
    ResourceType,
    SecurityBulletin,
    Upgrade,
    UpgradeAvailable,
)
from gke_notifier.models.pubsub import PubSubMessage

PAYLOAD_MODELS: dict[EventKind, type[BaseModel]] = {
    EventKind.SECURITY_BULLETIN: SecurityBulletin,
    EventKind.UPGRADE_AVAILABLE: UpgradeAvailable,
    EventKind.UPGRADE: Upgrade,
}


@dataclass(frozen=True)
class ParsedEvent:
    """A classified message with its payload, as far as it could be parsed."""

    kind: EventKind
    raw: dict | None  # None when there is no usable JSON object payload
    payload: SecurityBulletin | UpgradeAvailable | Upgrade | None  # None if unknown or incomplete

    @property
    def resource_type(self) -> str | None:
        """The reported ``resourceType``, read from the raw payload if necessary."""
        value = getattr(self.payload, "resource_type", None)
        if value is None and self.raw is not None:
            value = self.raw.get("resourceType")
        return value if isinstance(value, str) else None

    @property
    def node_pool(self) -> str | None:
        """Node pool name for NODE_POOL upgrade payloads, None for any other resource type."""
        if self.resource_type != ResourceType.NODE_POOL.value:
            return None
        return node_pool_from_resource(getattr(self.payload, "resource", None))

    @property
    def is_node_pool_upgrade_available(self) -> bool:
        """True for UpgradeAvailableEvents that name a node pool."""
        return self.kind is EventKind.UPGRADE_AVAILABLE and self.node_pool is not None


def _json_object(text: str | None) -> dict | None:
    if not text:
        return None
    try:
        value = json.loads(text)
    except ValueError:
        return None
    return value if isinstance(value, dict) else None


def load_payload(message: PubSubMessage) -> dict | None:
    """Return the event payload as a dict, or None when there is none usable."""
    if message.attributes.payload is not None:
        return _json_object(message.attributes.payload)
    return _json_object(message.data)


def parse_event(message: PubSubMessage) -> ParsedEvent:
    """Classify a message and validate its payload into the matching model."""
    kind = classify(message.attributes)
    raw = load_payload(message)
    payload = None
    model = PAYLOAD_MODELS.get(kind)
    if model is not None and raw is not None:
        try:
            payload = model.model_validate(raw)
        except ValidationError:
            payload = None
    # NODE_POOL payloads are only usable when they name the node pool
    if (
        payload is not None
        and getattr(payload, "resource_type", None) == ResourceType.NODE_POOL.value
        and node_pool_from_resource(payload.resource) is None
    ):
        payload = None
    return ParsedEvent(kind=kind, raw=raw, payload=payload)
