"""Resource paths and Google Cloud console links for cluster notifications."""

from urllib.parse import quote, urlencode

from gke_notifier.models.pubsub import PubSubMessage

CONSOLE_BASE_URL = "https://console.cloud.google.com/kubernetes"
MISSING = "unknown"


def cluster_path(message: PubSubMessage) -> str:
    """Full cluster resource name, preferring the enriched project name."""
    attributes = message.attributes
    project = message.project_name or attributes.project_id or MISSING
    location = attributes.cluster_location or MISSING
    cluster = attributes.cluster_name or MISSING
    return f"projects/{project}/locations/{location}/clusters/{cluster}"


def _console_url(message: PubSubMessage, *segments: str) -> str | None:
    attributes = message.attributes
    if not (message.project_name and attributes.cluster_location and attributes.cluster_name):
        return None
    path = "/".join(quote(segment, safe="") for segment in segments)
    return f"{CONSOLE_BASE_URL}/{path}?{urlencode({'project': message.project_name})}"


def cluster_console_url(message: PubSubMessage) -> str | None:
    """Console URL of the cluster details page, or None without a project name."""
    attributes = message.attributes
    return _console_url(
        message,
        "clusters",
        "details",
        attributes.cluster_location or "",
        attributes.cluster_name or "",
        "details",
    )


def node_pool_console_url(message: PubSubMessage, node_pool: str) -> str | None:
    """Console URL of a node pool page, or None without a project name."""
    attributes = message.attributes
    return _console_url(
        message,
        "nodepool",
        attributes.cluster_location or "",
        attributes.cluster_name or "",
        node_pool,
    )
