"""Offer economics and lifecycle helpers.

Both helpers are pure: discount percentage is derived from the two current
prices and status from the date range and the ``is_active`` flag relative to
``now``. Neither value is ever persisted, so every read reflects the
current prices and the current day.
"""
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping, Optional


class OfferStatus(str, Enum):
    ACTIVE = "ACTIVE"
    UPCOMING = "UPCOMING"
    EXPIRED = "EXPIRED"
    INACTIVE = "INACTIVE"


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def calculate_discount(original_price: Any, discounted_price: Any) -> Optional[float]:
    """Percentage saved going from ``original_price`` to ``discounted_price``.

    Returns ``None`` instead of raising when either price is blank or not a
    number, or when the pair is not a real discount (original must be
    positive and greater than discounted).
    """
    original = _to_decimal(original_price)
    discounted = _to_decimal(discounted_price)
    if original is None or discounted is None:
        return None
    if original <= 0 or discounted <= 0 or original <= discounted:
        return None
    return round(float((original - discounted) / original * 100), 2)


def _to_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            return None
    return None


def today(now: Any = None) -> date:
    if now is None:
        return datetime.now(timezone.utc).date()
    return _to_date(now) or datetime.now(timezone.utc).date()


def offer_status(offer: Mapping[str, Any], now: Any = None) -> OfferStatus:
    """Lifecycle state of an offer on the day of ``now``.

    Start and end dates are inclusive calendar days. A missing start date
    never makes an offer upcoming and a missing end date never expires it.
    """
    if not offer.get("is_active"):
        return OfferStatus.INACTIVE
    current = today(now)
    start = _to_date(offer.get("start_date"))
    end = _to_date(offer.get("end_date"))
    if start is not None and current < start:
        return OfferStatus.UPCOMING
    if end is not None and current > end:
        return OfferStatus.EXPIRED
    return OfferStatus.ACTIVE


def annotate_offer(offer: Mapping[str, Any], now: Any = None) -> dict:
    """Copy of ``offer`` with the derived ``status`` and ``discount_percentage``."""
    record = dict(offer)
    record["status"] = offer_status(offer, now).value
    record["discount_percentage"] = calculate_discount(offer.get("original_price"), offer.get("discounted_price"))
    return record
