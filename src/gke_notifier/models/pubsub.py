"""Pub/Sub push envelope, message, and attribute models."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Attributes(BaseModel):
    """Message attributes set by GKE cluster notifications.

    Only ``type_url`` is guaranteed. Keys not declared here are kept as extra
    attributes and are available through ``model_extra``.
    """

    model_config = ConfigDict(extra="allow")
    # Pub/Sub attributes are a string-to-string map
    __pydantic_extra__: dict[str, str] = Field(init=False)

    type_url: str  # e.g., "type.googleapis.com/google.container.v1beta1.UpgradeEvent"
    project_id: str | None = None  # Project number, e.g., "0123456789"
    cluster_name: str | None = None
    cluster_location: str | None = None
    payload: str | None = None  # JSON-encoded, event-specific


class PubSubMessage(BaseModel):
    """A single Pub/Sub message carrying one cluster notification."""

    attributes: Attributes
    message_id: str = Field(validation_alias=AliasChoices("message_id", "messageId"))
    publish_time: str = Field(validation_alias=AliasChoices("publish_time", "publishTime"))
    data: str  # Decoded UTF-8 text once produced by the decoder
    project_name: str | None = None  # Set by enrichment, never present on the wire


class PubSubEnvelope(BaseModel):
    """The push request body: one message and the subscription it came from."""

    message: PubSubMessage
    subscription: str
