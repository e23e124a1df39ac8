"""Event kinds and the payload models of known GKE cluster notifications."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EventKind(str, Enum):
    """Notification kinds derived from the ``type_url`` attribute."""

    SECURITY_BULLETIN = "SecurityBulletinEvent"
    UPGRADE_AVAILABLE = "UpgradeAvailableEvent"
    UPGRADE = "UpgradeEvent"
    UNKNOWN = "Unknown"


class ResourceType(str, Enum):
    """Resource types reported by upgrade notifications."""

    MASTER = "MASTER"
    NODE_POOL = "NODE_POOL"


class _EventPayload(BaseModel):
    """Base for payloads: camelCase on the wire, unknown fields ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReleaseChannel(_EventPayload):
    channel: str


class SecurityBulletin(_EventPayload):
    """Payload of a SecurityBulletinEvent."""

    bulletin_id: str
    bulletin_uri: str | None = None
    brief_description: str | None = None
    severity: str | None = None
    resource_type_affected: str | None = None  # e.g., "RESOURCE_TYPE_CONTROLPLANE"
    cve_ids: list[str] = []
    affected_supported_minors: list[str] = []
    patched_versions: list[str] = []
    suggested_upgrade_target: str | None = None
    manual_steps_required: bool = False


class UpgradeAvailable(_EventPayload):
    """Payload of an UpgradeAvailableEvent."""

    resource_type: str
    version: str
    resource: str | None = None  # Full node pool path, NODE_POOL only
    release_channel: ReleaseChannel | None = None


class Upgrade(_EventPayload):
    """Payload of an UpgradeEvent."""

    resource_type: str
    target_version: str
    current_version: str | None = None
    resource: str | None = None  # Full node pool path, NODE_POOL only
    operation: str | None = None
    operation_start_time: str | None = None
