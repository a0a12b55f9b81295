"""Tests for ticket fare and discount arithmetic"""

import pytest

from terminal_ledger.bookings.fare_service import calculate_ticket_summary
from terminal_ledger.exceptions import InvalidArgument


class TestCalculateTicketSummary:
    def test_two_seats_with_lump_discount(self):
        summary = calculate_ticket_summary(1500, 2, 300)

        assert summary.total_base_fare == 3000
        assert summary.final_total == 2700
        assert summary.discount_per_seat == 150

    def test_no_discount(self):
        summary = calculate_ticket_summary(1200, 1, 0)

        assert summary.total_base_fare == 1200
        assert summary.final_total == 1200
        assert summary.discount_per_seat == 0

    def test_final_total_floors_at_zero(self):
        summary = calculate_ticket_summary(500, 2, 1500)

        assert summary.final_total == 0
        assert summary.discount_per_seat == 750

    def test_uneven_split_keeps_fraction(self):
        """A remainder is not corrected, seats carry fractional discounts"""
        summary = calculate_ticket_summary(1000, 3, 100)

        assert summary.discount_per_seat == pytest.approx(33.3333, rel=1e-4)
        assert summary.discount_per_seat * 3 == pytest.approx(100)

    @pytest.mark.parametrize("seat_count", [0, -1])
    def test_non_positive_seat_count_rejected(self, seat_count):
        with pytest.raises(InvalidArgument):
            calculate_ticket_summary(1500, seat_count, 0)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            calculate_ticket_summary(1500, 0, 0)
