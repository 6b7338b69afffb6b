"""Base64 transport encoding for TLV payloads."""

from __future__ import annotations

import base64
import binascii

from zatca_qr.errors import MalformedPayload


def encode(data: bytes) -> str:
    """Standard padded Base64, no line breaks."""
    return base64.b64encode(data).decode("ascii")


def decode(text: str) -> bytes:
    """Strictly decode standard Base64 text."""
    try:
        return base64.b64decode(text.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedPayload(f"Invalid Base64 payload: {e}") from None
