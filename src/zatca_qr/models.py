"""
Pydantic v2 models for ZATCA QR payload fields and records.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class InvoiceQRFields(BaseModel):
    """The five canonical Phase 1 QR fields, already formatted."""

    model_config = ConfigDict(frozen=True)

    seller_name: str = Field(description="Seller name (Arabic or English)")
    vat_number: str = Field(description="Seller VAT registration number")
    timestamp: str = Field(description="Invoice instant, e.g. 2024-01-15T10:30:00Z")
    total_amount: str = Field(description="Total including VAT, e.g. 1150.00")
    vat_amount: str = Field(description="Total VAT, e.g. 150.00")


class TLVRecord(BaseModel):
    """A single tag-length-value record."""

    model_config = ConfigDict(frozen=True)

    tag: int = Field(ge=0, le=255)
    value: bytes = Field(max_length=255)

    @property
    def length(self) -> int:
        return len(self.value)

    @property
    def text(self) -> str:
        return self.value.decode("utf-8")

    def encode(self) -> bytes:
        """Encode this record as TLV bytes."""
        return bytes([self.tag, self.length]) + self.value


class DecodedInvoiceQR(InvoiceQRFields):
    """Field values recovered from an encoded QR payload."""

    qr_base64: str = Field(description="The payload the fields were read from")
