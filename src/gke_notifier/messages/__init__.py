"""Decoding, classification, enrichment, and log formatting of cluster notifications."""

from gke_notifier.messages.classifier import (
    classify,
    is_node_pool_upgrade_available_event,
    node_pool_name,
)
from gke_notifier.messages.decoder import decode_data, decode_envelope, encode_envelope
from gke_notifier.messages.enrich import with_project_name
from gke_notifier.messages.errors import (
    EnvelopeDecodeError,
    NotificationDecodeError,
    PayloadEncodingError,
)
from gke_notifier.messages.events import ParsedEvent, load_payload, parse_event
from gke_notifier.messages.formatter import format_message

__all__ = [
    "classify",
    "decode_data",
    "decode_envelope",
    "encode_envelope",
    "format_message",
    "is_node_pool_upgrade_available_event",
    "load_payload",
    "node_pool_name",
    "parse_event",
    "with_project_name",
    "EnvelopeDecodeError",
    "NotificationDecodeError",
    "ParsedEvent",
    "PayloadEncodingError",
]
