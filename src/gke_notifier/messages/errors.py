"""Errors raised while decoding inbound notifications."""


class NotificationDecodeError(Exception):
    """Base class: the request body cannot be turned into a notification."""


class EnvelopeDecodeError(NotificationDecodeError):
    """The body is not valid JSON or does not have the push envelope shape."""


class PayloadEncodingError(NotificationDecodeError):
    """The message ``data`` field is not valid base64 or not valid UTF-8."""
