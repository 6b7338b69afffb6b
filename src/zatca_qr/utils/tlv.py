"""
TLV (Tag-Length-Value) packing for ZATCA QR codes.

ZATCA Phase 1 QR codes carry five TLV records:
  - Tag:    1 byte (0x01 to 0x05)
  - Length: 1 byte (length of value in bytes)
  - Value:  UTF-8 encoded bytes

Records always appear in tag order 1-5 with nothing between them.
"""

from __future__ import annotations

from zatca_qr.errors import FieldTooLong, MalformedPayload
from zatca_qr.models import InvoiceQRFields, TLVRecord

MAX_VALUE_LENGTH = 255

FIELD_ORDER = (
    (1, "seller_name"),
    (2, "vat_number"),
    (3, "timestamp"),
    (4, "total_amount"),
    (5, "vat_amount"),
)

TAG_NAMES = dict(FIELD_ORDER)


def records(fields: InvoiceQRFields) -> list[TLVRecord]:
    """
    Build the ordered TLV records for a set of invoice fields.

    Every field is length-checked before any record is built, so an
    oversized field never leaves partial output behind.

    Raises:
        FieldTooLong: a value is over 255 UTF-8 bytes
    """
    encoded = []
    for tag, name in FIELD_ORDER:
        value_bytes = getattr(fields, name).encode("utf-8")
        if len(value_bytes) > MAX_VALUE_LENGTH:
            raise FieldTooLong(tag, len(value_bytes))
        encoded.append((tag, value_bytes))
    return [TLVRecord(tag=tag, value=value) for tag, value in encoded]


def pack(fields: InvoiceQRFields) -> bytes:
    """Serialize invoice fields as concatenated TLV records."""
    return b"".join(record.encode() for record in records(fields))


def unpack(data: bytes) -> list[TLVRecord]:
    """
    Parse a TLV byte stream into records, in the order they appear.

    Args:
        data: Raw TLV bytes

    Returns:
        List of TLVRecord

    Raises:
        MalformedPayload: header or value runs past the end of the data
    """
    result = []
    i = 0
    while i < len(data):
        if i + 1 >= len(data):
            raise MalformedPayload(f"Truncated TLV data at position {i}")
        tag = data[i]
        length = data[i + 1]
        if i + 2 + length > len(data):
            raise MalformedPayload(
                f"Tag {tag} claims length {length} but only "
                f"{len(data) - i - 2} bytes remain"
            )
        result.append(TLVRecord(tag=tag, value=data[i + 2 : i + 2 + length]))
        i += 2 + length
    return result
