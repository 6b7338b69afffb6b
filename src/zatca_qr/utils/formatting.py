"""
Canonical field formatting for ZATCA QR payloads.

Amounts are rendered with exactly two fractional digits using
ROUND_HALF_UP on the decimal value of the input, and timestamps as
UTC instants in the form YYYY-MM-DDTHH:MM:SSZ.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, time, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from zatca_qr.errors import InvalidAmount, InvalidTimestamp

TWO_PLACES = Decimal("0.01")
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_amount(amount: int | float | Decimal | str) -> str:
    """
    Render a monetary amount with two decimal places.

    Floats go through their shortest repr first, so 2.675 is treated
    as the decimal 2.675 and becomes "2.68" rather than following the
    binary approximation. Output never depends on the host locale.

    Args:
        amount: int, float, Decimal or numeric string (e.g., "1150")

    Returns:
        Amount string such as "1150.00"
    """
    if isinstance(amount, bool):
        raise InvalidAmount(amount)
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        raise InvalidAmount(amount) from None
    if not value.is_finite():
        raise InvalidAmount(amount)
    try:
        quantized = value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidAmount(amount) from None
    return f"{quantized:f}"


def _parse_instant(instant: str) -> datetime:
    text = instant.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise InvalidTimestamp(instant, str(e)) from None


def get_timestamp(
    instant: datetime | date | str | None = None,
    *,
    now: Callable[[], datetime] = _utc_now,
) -> str:
    """
    Render an invoice instant as an ISO 8601 UTC timestamp.

    Args:
        instant: datetime, date or ISO 8601 string; None means "now"
        now: Clock used when no instant is given

    Returns:
        Timestamp such as "2024-01-15T10:30:00Z" (no fractional seconds)
    """
    if instant is None:
        moment = now()
    elif isinstance(instant, datetime):
        moment = instant
    elif isinstance(instant, date):
        moment = datetime.combine(instant, time.min)
    elif isinstance(instant, str):
        moment = _parse_instant(instant)
    else:
        raise InvalidTimestamp(instant, "unsupported type")

    # Naive values are taken to be UTC already
    if moment.tzinfo is None or moment.utcoffset() is None:
        moment = moment.replace(tzinfo=timezone.utc)
    try:
        moment = moment.astimezone(timezone.utc)
    except (OverflowError, ValueError) as e:
        raise InvalidTimestamp(instant, str(e)) from None
    return moment.strftime(TIMESTAMP_FORMAT)
