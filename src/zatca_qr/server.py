"""
ZATCA QR MCP Server - Phase 1 invoice QR payloads for AI agents.

An MCP (Model Context Protocol) server that lets AI agents generate and
inspect ZATCA-compliant TLV QR payloads for invoices.

Usage:
    # With MCP Inspector (development)
    mcp dev src/zatca_qr/server.py

    # With Claude Desktop
    Add to ~/.claude/claude_desktop_config.json:
    {
        "mcpServers": {
            "zatca-qr": {
                "command": "python",
                "args": ["-m", "zatca_qr.server"]
            }
        }
    }
"""

from __future__ import annotations

import json
import logging

from mcp.server.fastmcp import FastMCP

from zatca_qr.config import settings
from zatca_qr.errors import EncodingError
from zatca_qr.qr import decode_invoice_qr, generate_invoice_qr

logger = logging.getLogger(__name__)

mcp = FastMCP(
    settings.SERVER_NAME,
    instructions=(
        "ZATCA Phase 1 QR server for Saudi e-invoicing. "
        "Generate and decode TLV-encoded invoice QR payloads."
    ),
)


def _error(message: str, exc: EncodingError) -> str:
    return json.dumps(
        {"error": message, "details": exc.to_dict()},
        indent=2,
        ensure_ascii=False,
    )


# ═══════════════════════════════════════════════════
# TOOL 1: QR Payload Generation
# ═══════════════════════════════════════════════════

@mcp.tool()
async def generate_qr_code(
    seller_name: str,
    vat_number: str,
    total_amount: str,
    vat_amount: str,
    timestamp: str | None = None,
) -> str:
    """Generate a ZATCA Phase 1 TLV-encoded QR payload.

    Amounts are normalized to two decimal places and the timestamp to
    an ISO 8601 UTC instant before the five fields are packed as
    Tag-Length-Value records and Base64 encoded.

    Args:
        seller_name: Business/taxpayer name (Arabic or English)
        vat_number: Seller VAT registration number
        total_amount: Invoice total including VAT (e.g., "1150" or "1150.00")
        vat_amount: Total VAT charged (e.g., "150")
        timestamp: Invoice date/time in ISO 8601; defaults to now

    Returns:
        JSON with qr_base64 (the encoded string) and decoded verification data
    """
    try:
        qr_base64 = generate_invoice_qr(
            seller_name=seller_name,
            vat_number=vat_number,
            total_amount=total_amount,
            vat_amount=vat_amount,
            timestamp=timestamp,
        )
    except EncodingError as e:
        logger.warning("QR generation rejected for %r: %s", seller_name, e)
        return _error("Failed to generate QR", e)

    decoded = decode_invoice_qr(qr_base64)
    logger.info("Generated QR payload (%d chars)", len(qr_base64))
    return json.dumps(
        {
            "qr_base64": qr_base64,
            "decoded_verification": decoded.model_dump(exclude={"qr_base64"}),
        },
        indent=2,
        ensure_ascii=False,
    )


# ═══════════════════════════════════════════════════
# TOOL 2: QR Payload Decoder
# ═══════════════════════════════════════════════════

@mcp.tool()
async def decode_qr(qr_base64: str) -> str:
    """Decode a ZATCA Phase 1 TLV-encoded QR payload.

    Useful for verifying or inspecting QR codes printed on existing
    invoices.

    Args:
        qr_base64: Base64-encoded TLV string from a ZATCA QR code

    Returns:
        JSON with the five decoded field values
    """
    try:
        decoded = decode_invoice_qr(qr_base64)
    except EncodingError as e:
        logger.warning("QR decode failed: %s", e)
        return _error("Failed to decode QR", e)
    return json.dumps(
        decoded.model_dump(exclude={"qr_base64"}), indent=2, ensure_ascii=False
    )


def main():
    """Entry point for the ZATCA QR MCP server."""
    logging.basicConfig(level=settings.LOG_LEVEL)
    mcp.run()


if __name__ == "__main__":
    main()
