"""
Errors raised while building or reading ZATCA QR payloads.

Every error is a ValueError so callers that only care about "bad input"
can catch that, while the invoice layer can tell the cases apart.
"""

from __future__ import annotations


class EncodingError(ValueError):
    """Base class for QR payload errors."""

    code = "encoding_error"

    def to_dict(self) -> dict:
        """Describe the error as JSON-friendly data."""
        return {"code": self.code, "message": str(self)}


class FieldTooLong(EncodingError):
    """A field value does not fit in a one-byte TLV length."""

    code = "field_too_long"

    def __init__(self, tag: int, actual_length: int):
        self.tag = tag
        self.actual_length = actual_length
        super().__init__(
            f"Tag {tag} value too long: {actual_length} bytes (max 255)"
        )

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(tag=self.tag, actual_length=self.actual_length)
        return data


class InvalidTimestamp(EncodingError):
    """An invoice instant could not be parsed or converted to UTC."""

    code = "invalid_timestamp"

    def __init__(self, value: object, reason: str = ""):
        self.value = value
        message = f"Invalid invoice timestamp: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidAmount(EncodingError):
    """An amount is not a finite decimal number."""

    code = "invalid_amount"

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid amount: {value!r}")


class MalformedPayload(EncodingError):
    """A Base64/TLV payload could not be decoded."""

    code = "malformed_payload"
