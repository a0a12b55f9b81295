"""Tests for voucher financial summaries and tax/cargo input validation"""

from datetime import date, datetime

import pytest

from terminal_ledger.bookings.schemas import BookingTicket, Passenger
from terminal_ledger.exceptions import ValidationError
from terminal_ledger.vouchers.financial_service import (
    calculate_voucher_financial_summary,
    validate_financial_input,
)
from terminal_ledger.vouchers.schemas import Voucher


def ticket(ticket_id, seat_ids, fare, discount, destination):
    total = fare * len(seat_ids)
    return BookingTicket(
        id=ticket_id,
        voucher_id="voucher-1",
        seat_ids=seat_ids,
        passenger=Passenger(),
        destination=destination,
        base_fare_per_seat=fare,
        total_base_fare=total,
        total_discount=discount,
        final_total=total - discount,
        created_at=datetime.now()
    )


@pytest.fixture
def trip_voucher():
    return Voucher(
        id="voucher-1",
        vehicle_id="vehicle-1",
        date=date(2026, 1, 8),
        origin="Multan",
        departure_time="09:00",
        driver_name="Aslam",
        driver_mobile="0300-1234567",
        created_at=datetime.now(),
        tickets=[
            ticket("t-multan", [5], 1200, 0, "Multan"),
            ticket("t-lahore", [3, 7], 1500, 300, "Lahore"),
        ]
    )


class TestFinancialSummary:
    def test_revenue_grouped_and_sorted(self, trip_voucher):
        summary = calculate_voucher_financial_summary(trip_voucher, terminal_tax=100, cargo=50)

        lines = [(r.destination, r.ticket_count, r.total_revenue) for r in summary.revenue_by_destination]
        assert lines == [("Lahore", 2, 2700), ("Multan", 1, 1200)]
        assert summary.total_fare == 3900
        assert summary.terminal_tax == 100
        assert summary.cargo == 50
        assert summary.grand_total == 3850
        assert not summary.requires_confirmation

    def test_defaults_to_no_tax_or_cargo(self, trip_voucher):
        summary = calculate_voucher_financial_summary(trip_voucher)

        assert summary.grand_total == summary.total_fare == 3900

    def test_negative_grand_total_is_reported(self, trip_voucher):
        summary = calculate_voucher_financial_summary(trip_voucher, terminal_tax=5000, cargo=0)

        assert summary.grand_total == -1100
        assert summary.requires_confirmation

    def test_sort_ignores_case(self, trip_voucher):
        trip_voucher.tickets.append(ticket("t-bwp", [9], 900, 0, "bahawalpur"))

        summary = calculate_voucher_financial_summary(trip_voucher)

        assert [r.destination for r in summary.revenue_by_destination] == ["bahawalpur", "Lahore", "Multan"]

    def test_empty_voucher(self, trip_voucher):
        trip_voucher.tickets = []

        summary = calculate_voucher_financial_summary(trip_voucher, terminal_tax=200)

        assert summary.revenue_by_destination == []
        assert summary.total_fare == 0
        assert summary.grand_total == -200


class TestValidateFinancialInput:
    @pytest.mark.parametrize("value,expected", [
        ("250.7", 250),
        ("0", 0),
        ("100000", 100000),
        (" 42 ", 42),
        (99.99, 99),
        (7, 7),
    ])
    def test_valid_values_floored(self, value, expected):
        assert validate_financial_input(value, "Tax") == expected

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="Cargo cannot be negative"):
            validate_financial_input("-5", "Cargo")

    def test_above_maximum_rejected(self):
        with pytest.raises(ValidationError, match="exceeds maximum"):
            validate_financial_input("100001", "Tax")

    @pytest.mark.parametrize("value", ["", "abc", "nan", "inf", None])
    def test_not_a_number_rejected(self, value):
        with pytest.raises(ValidationError, match="must be a valid number"):
            validate_financial_input(value, "Terminal tax")
