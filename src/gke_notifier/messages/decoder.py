"""Decode Pub/Sub push request bodies into envelopes.

The push body is JSON with the message ``data`` field base64-encoded. Decoding
is all-or-nothing: any failure raises and no partial envelope is returned.
"""

import base64
import binascii
import json

from pydantic import ValidationError

from gke_notifier.messages.errors import EnvelopeDecodeError, PayloadEncodingError
from gke_notifier.models.pubsub import PubSubEnvelope


def decode_data(encoded: str) -> str:
    """Decode a standard base64 string into UTF-8 text.

    Raises:
        PayloadEncodingError: invalid base64 alphabet or padding, or the decoded
            bytes are not UTF-8.
    """
    try:
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise PayloadEncodingError(f"Message data is not valid base64: {exc}") from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PayloadEncodingError(f"Message data is not valid UTF-8: {exc}") from exc


def decode_envelope(body: bytes | str) -> PubSubEnvelope:
    """Parse a push request body and decode its message data.

    Args:
        body: Raw request body.

    Returns:
        The envelope with ``message.data`` holding the decoded text.

    Raises:
        EnvelopeDecodeError: malformed JSON, wrong shape, or a missing field.
        PayloadEncodingError: ``data`` is not base64-encoded UTF-8.
    """
    try:
        envelope = PubSubEnvelope.model_validate_json(body)
    except ValidationError as exc:
        raise EnvelopeDecodeError(
            f"Invalid push envelope: {exc.error_count()} validation error(s)"
        ) from exc

    data = decode_data(envelope.message.data)
    message = envelope.message.model_copy(update={"data": data})
    return envelope.model_copy(update={"message": message})


def encode_envelope(envelope: PubSubEnvelope) -> bytes:
    """Serialise an envelope to a push request body, base64-encoding ``data``.

    The inverse of ``decode_envelope``. ``project_name`` is never written.
    """
    body = envelope.model_dump(exclude_none=True, exclude={"message": {"project_name"}})
    body["message"]["data"] = base64.b64encode(envelope.message.data.encode("utf-8")).decode("ascii")
    return json.dumps(body).encode("utf-8")
