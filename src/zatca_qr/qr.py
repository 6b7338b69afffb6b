"""
ZATCA Phase 1 QR payload generation.

Invoice values flow through three stages:
  format (amounts, timestamp) -> pack (TLV records) -> encode (Base64)

Nothing here keeps state between calls, and a failure in any stage
raises before a payload exists.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from zatca_qr.errors import MalformedPayload
from zatca_qr.models import DecodedInvoiceQR, InvoiceQRFields
from zatca_qr.utils import transport
from zatca_qr.utils.formatting import format_amount, get_timestamp
from zatca_qr.utils.tlv import FIELD_ORDER, pack, unpack

Amount = int | float | Decimal | str


def encode_fields(fields: InvoiceQRFields) -> str:
    """Encode already-canonical fields as a Base64 TLV string."""
    return transport.encode(pack(fields))


def generate_invoice_qr(
    seller_name: str,
    vat_number: str,
    total_amount: Amount,
    vat_amount: Amount,
    timestamp: datetime | date | str | None = None,
) -> str:
    """
    Generate the Base64 payload for an invoice QR code.

    Args:
        seller_name: Business name (Arabic or English)
        vat_number: VAT registration number, passed through as-is
        total_amount: Total including VAT (e.g., 1150 or "1150.00")
        vat_amount: Total VAT (e.g., 150 or "150.00")
        timestamp: Invoice instant; defaults to the current time

    Returns:
        Base64-encoded TLV string for the QR code

    Raises:
        FieldTooLong: a field is over 255 UTF-8 bytes
        InvalidTimestamp: timestamp cannot be read as an instant
        InvalidAmount: an amount is not a finite number
    """
    fields = InvoiceQRFields(
        seller_name=seller_name,
        vat_number=vat_number,
        timestamp=get_timestamp(timestamp),
        total_amount=format_amount(total_amount),
        vat_amount=format_amount(vat_amount),
    )
    return encode_fields(fields)


def decode_invoice_qr(qr_base64: str) -> DecodedInvoiceQR:
    """
    Decode a Phase 1 QR payload back into its five fields.

    Raises:
        MalformedPayload: the payload is not valid Base64, not valid TLV,
            or does not hold exactly tags 1-5 in order
    """
    found = unpack(transport.decode(qr_base64))
    tags = [record.tag for record in found]
    expected = [tag for tag, _ in FIELD_ORDER]
    if tags != expected:
        raise MalformedPayload(f"Expected tags {expected}, got {tags}")
    try:
        values = {name: record.text for (_, name), record in zip(FIELD_ORDER, found)}
    except UnicodeDecodeError as e:
        raise MalformedPayload(f"Field is not valid UTF-8: {e}") from None
    return DecodedInvoiceQR(qr_base64=qr_base64, **values)
