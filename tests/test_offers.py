"""
Tests for offer status derivation and discount calculation.
"""
from datetime import date, datetime

import pytest

from services.offers import OfferStatus, annotate_offer, calculate_discount, offer_status


def _offer(**overrides):
    offer = {"is_active": True, "start_date": "2024-06-10", "end_date": "2024-06-20"}
    offer.update(overrides)
    return offer


class TestOfferStatus:
    """Lifecycle state relative to the current day."""

    @pytest.mark.parametrize(
        "today, expected",
        [
            (date(2024, 6, 9), OfferStatus.UPCOMING),
            (date(2024, 6, 10), OfferStatus.ACTIVE),
            (date(2024, 6, 15), OfferStatus.ACTIVE),
            (date(2024, 6, 20), OfferStatus.ACTIVE),
            (date(2024, 6, 21), OfferStatus.EXPIRED),
        ],
    )
    def test_date_boundaries_are_inclusive(self, today, expected):
        assert offer_status(_offer(), today) == expected

    def test_inactive_wins_over_dates(self):
        assert offer_status(_offer(is_active=False), date(2024, 6, 15)) == OfferStatus.INACTIVE

    def test_missing_flag_is_inactive(self):
        offer = _offer()
        del offer["is_active"]
        assert offer_status(offer, date(2024, 6, 15)) == OfferStatus.INACTIVE

    def test_accepts_datetime_now(self):
        assert offer_status(_offer(), datetime(2024, 6, 20, 23, 59)) == OfferStatus.ACTIVE

    def test_accepts_date_objects(self):
        offer = _offer(start_date=date(2024, 6, 10), end_date=date(2024, 6, 20))
        assert offer_status(offer, date(2024, 6, 21)) == OfferStatus.EXPIRED

    def test_missing_dates_never_raise(self):
        assert offer_status(_offer(start_date=None, end_date="garbage"), date(2024, 1, 1)) == OfferStatus.ACTIVE


class TestCalculateDiscount:
    """Discount percentage from a price pair."""

    def test_quarter_off(self):
        assert calculate_discount(100, 75) == 25.0

    def test_three_quarters_off(self):
        assert calculate_discount(200, 50) == 75.0

    def test_rounds_to_two_places(self):
        assert calculate_discount(3, 2) == 33.33

    def test_accepts_numeric_strings(self):
        assert calculate_discount("999.00", "849.15") == 15.0

    @pytest.mark.parametrize(
        "original, discounted",
        [("", "75"), ("100", "  "), ("abc", "10"), (None, 10), (0, 0), (-10, -20), (50, 50), (50, 60)],
    )
    def test_invalid_pairs_return_none(self, original, discounted):
        assert calculate_discount(original, discounted) is None


class TestAnnotateOffer:
    def test_adds_derived_fields_without_touching_input(self):
        offer = _offer(original_price=100, discounted_price=75)
        annotated = annotate_offer(offer, date(2024, 6, 15))
        assert annotated["status"] == "ACTIVE"
        assert annotated["discount_percentage"] == 25.0
        assert "status" not in offer
