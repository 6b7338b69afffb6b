"""Tests for the MCP tool surface."""

import pytest
import sys
import os
import asyncio
import json

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

pytest.importorskip("mcp", reason="mcp not installed")

from zatca_qr.server import decode_qr, generate_qr_code


class TestGenerateTool:
    def test_success(self):
        result = json.loads(asyncio.run(generate_qr_code(
            seller_name="ABC",
            vat_number="123456789012345",
            total_amount="100",
            vat_amount="15",
            timestamp="2024-01-01T00:00:00Z",
        )))
        assert result["qr_base64"].startswith("AQNBQkM")
        assert result["decoded_verification"] == {
            "seller_name": "ABC",
            "vat_number": "123456789012345",
            "timestamp": "2024-01-01T00:00:00Z",
            "total_amount": "100.00",
            "vat_amount": "15.00",
        }

    def test_too_long(self):
        result = json.loads(asyncio.run(generate_qr_code(
            seller_name="x" * 256,
            vat_number="123456789012345",
            total_amount="100",
            vat_amount="15",
            timestamp="2024-01-01T00:00:00Z",
        )))
        assert result["error"] == "Failed to generate QR"
        assert result["details"]["code"] == "field_too_long"
        assert result["details"]["tag"] == 1
        assert "qr_base64" not in result

    def test_bad_timestamp(self):
        result = json.loads(asyncio.run(generate_qr_code(
            seller_name="ABC",
            vat_number="123456789012345",
            total_amount="100",
            vat_amount="15",
            timestamp="soon",
        )))
        assert result["details"]["code"] == "invalid_timestamp"


class TestDecodeTool:
    def test_roundtrip(self):
        generated = json.loads(asyncio.run(generate_qr_code(
            seller_name="شركة فكرة",
            vat_number="300000000000003",
            total_amount="1150",
            vat_amount="150",
            timestamp="2024-01-15T10:30:00Z",
        )))
        decoded = json.loads(asyncio.run(decode_qr(generated["qr_base64"])))
        assert decoded["seller_name"] == "شركة فكرة"
        assert decoded["total_amount"] == "1150.00"

    def test_malformed(self):
        result = json.loads(asyncio.run(decode_qr("not base64!")))
        assert result["error"] == "Failed to decode QR"
        assert result["details"]["code"] == "malformed_payload"
