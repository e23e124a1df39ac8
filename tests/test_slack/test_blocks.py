"""Tests for Slack webhook message building."""

import json

from gke_notifier.models.pubsub import Attributes, PubSubMessage
from gke_notifier.slack.blocks import to_webhook_payload

PREFIX = "type.googleapis.com/google.container.v1beta1."
NODE_POOL_RESOURCE = (
    "projects/test-project/locations/us-central1/clusters/test-cluster/nodePools/default-pool"
)


def _make_message(
    event_name: str, payload: dict | None = None, project_name: str | None = "test-project"
) -> PubSubMessage:
    """Helper to build an enriched message for test-cluster in us-central1."""
    return PubSubMessage(
        attributes=Attributes(
            type_url=PREFIX + event_name,
            project_id="0123456789",
            cluster_location="us-central1",
            cluster_name="test-cluster",
            payload=json.dumps(payload) if payload is not None else None,
        ),
        message_id="1",
        publish_time="2023-01-13T19:51:24.884Z",
        data="lorem ipsum",
        project_name=project_name,
    )


def test_control_plane_event_links_to_cluster():
    """The section carries a console button for the cluster."""
    message = _make_message(
        "UpgradeEvent",
        {"resourceType": "MASTER", "currentVersion": "1.0", "targetVersion": "1.1"},
    )

    webhook = to_webhook_payload(message)

    accessory = webhook.blocks[0]["accessory"]
    assert accessory["type"] == "button"
    assert accessory["text"]["text"] == "Open in Console"
    assert accessory["url"] == (
        "https://console.cloud.google.com/kubernetes/clusters/details/"
        "us-central1/test-cluster/details?project=test-project"
    )


def test_node_pool_event_links_to_node_pool():
    """Node pool events link to the node pool page."""
    message = _make_message(
        "UpgradeEvent",
        {"resourceType": "NODE_POOL", "resource": NODE_POOL_RESOURCE, "targetVersion": "1.1"},
    )

    webhook = to_webhook_payload(message)

    assert webhook.blocks[0]["accessory"]["url"].startswith(
        "https://console.cloud.google.com/kubernetes/nodepool/us-central1/test-cluster/default-pool"
    )


def test_no_button_without_project_name():
    """Without enrichment the message has no console link."""
    message = _make_message(
        "UpgradeEvent", {"resourceType": "MASTER", "targetVersion": "1.1"}, project_name=None
    )

    webhook = to_webhook_payload(message)

    assert "accessory" not in webhook.blocks[0]


def test_no_button_for_unknown_event():
    """Unknown events are not linked."""
    webhook = to_webhook_payload(_make_message("UnknownEvent", {}))

    assert "accessory" not in webhook.blocks[0]
    assert len(webhook.blocks) == 1


def test_security_bulletin_context():
    """Security bulletins list severity, CVEs, upgrade target, and the bulletin link."""
    message = _make_message(
        "SecurityBulletinEvent",
        {
            "bulletinId": "GCP-2022-005",
            "bulletinUri": "https://cloud.google.com/kubernetes-engine/docs/security-bulletins#gcp-2022-005",
            "cveIds": ["CVE-2021-43527", "CVE-2021-43528"],
            "severity": "Medium",
            "suggestedUpgradeTarget": "1.22.6-gke.1000",
        },
    )

    webhook = to_webhook_payload(message)

    context = webhook.blocks[1]
    assert context["type"] == "context"
    texts = [element["text"] for element in context["elements"]]
    assert texts == [
        "*Severity:* Medium",
        "*CVEs:* CVE-2021-43527, CVE-2021-43528",
        "*Suggested upgrade target:* `1.22.6-gke.1000`",
        "<https://cloud.google.com/kubernetes-engine/docs/security-bulletins#gcp-2022-005|GCP-2022-005>",
    ]


def test_upgrade_available_context_names_channel():
    """Upgrade-available messages show the version and release channel."""
    message = _make_message(
        "UpgradeAvailableEvent",
        {"resourceType": "MASTER", "version": "1.22.6-gke.300", "releaseChannel": {"channel": "RAPID"}},
    )

    webhook = to_webhook_payload(message)

    texts = [element["text"] for element in webhook.blocks[1]["elements"]]
    assert texts == ["*Version:* `1.22.6-gke.300`", "*Release channel:* RAPID"]


def test_upgrade_context_shows_versions():
    """Upgrade messages show the current and target version."""
    message = _make_message(
        "UpgradeEvent",
        {"resourceType": "MASTER", "currentVersion": "1.22.4-gke.1501", "targetVersion": "1.22.6-gke.300"},
    )

    webhook = to_webhook_payload(message)

    texts = [element["text"] for element in webhook.blocks[1]["elements"]]
    assert texts == ["*Version:* `1.22.4-gke.1501` to `1.22.6-gke.300`"]


def test_channel_override():
    """The channel is only set when given."""
    message = _make_message("UnknownEvent", {})

    assert to_webhook_payload(message).channel is None
    assert to_webhook_payload(message, channel="#gke-alerts").channel == "#gke-alerts"


def test_dump_excludes_unset_channel():
    """The posted body omits channel when it is not configured."""
    webhook = to_webhook_payload(_make_message("UnknownEvent", {}))
    assert "channel" not in webhook.model_dump(exclude_none=True)


def test_control_plane_event_with_node_pool_path_links_to_cluster():
    """A MASTER payload that carries a node pool path still links to the cluster."""
    message = _make_message(
        "UpgradeEvent",
        {"resourceType": "MASTER", "resource": NODE_POOL_RESOURCE, "targetVersion": "1.1"},
    )

    webhook = to_webhook_payload(message)

    assert webhook.text == "test-cluster control plane is upgrading to version 1.1"
    assert webhook.blocks[0]["accessory"]["url"] == (
        "https://console.cloud.google.com/kubernetes/clusters/details/"
        "us-central1/test-cluster/details?project=test-project"
    )
