"""Tests for the revenue report"""

from datetime import date, timedelta

import pytest

from terminal_ledger.bookings.booking_service import BookingService
from terminal_ledger.bookings.schemas import TicketCreate
from terminal_ledger.exceptions import ValidationError
from terminal_ledger.reports.service import ReportService
from terminal_ledger.vehicles.service import VehicleService
from terminal_ledger.vouchers.schemas import VoucherCreate
from terminal_ledger.vouchers.service import VoucherService


def make_voucher(ledger, vehicle, day):
    return VoucherService(ledger).create_voucher(VoucherCreate(
        vehicle_id=vehicle.id,
        date=day,
        departure_time="10:00",
        driver_name="Aslam",
        driver_mobile="0300-1234567"
    ))


@pytest.fixture
def today():
    return date(2026, 1, 8)


@pytest.fixture
def report_ledger(ledger, highroof, bus, today):
    bookings = BookingService(ledger)

    van_trip = make_voucher(ledger, highroof, today)
    bookings.book_seats(van_trip.id, TicketCreate(seat_ids=[3, 7], destination="Lahore", total_discount=300))
    bookings.book_seats(van_trip.id, TicketCreate(seat_ids=[1], destination="Faisalabad"))

    bus_trip = make_voucher(ledger, bus, today - timedelta(days=2))
    bookings.book_seats(bus_trip.id, TicketCreate(seat_ids=[1, 2], destination="Islamabad"))

    old_trip = make_voucher(ledger, highroof, today - timedelta(days=20))
    bookings.book_seats(old_trip.id, TicketCreate(seat_ids=[1], destination="Lahore"))
    return ledger


class TestRevenueReport:
    def test_weekly_totals(self, report_ledger, today):
        report = ReportService(report_ledger).revenue_report(days=7, today=today)

        assert report.start_date == today - timedelta(days=6)
        assert report.end_date == today
        assert report.total_trips == 2
        assert report.total_passengers == 5
        assert report.total_revenue == 2700 + 1200 + 6000
        assert report.total_discount == 300
        assert len(report.daily) == 7
        assert report.daily[-1].revenue == 3900
        assert report.daily[-3].passengers == 2

    def test_top_destinations_and_vehicles(self, report_ledger, today, bus):
        report = ReportService(report_ledger).revenue_report(days=7, today=today)

        assert [d.destination for d in report.top_destinations] == ["Islamabad", "Lahore", "Faisalabad"]
        assert report.vehicles[0].vehicle_id == bus.id
        assert report.vehicles[0].passengers == 2

    def test_monthly_window_includes_older_trips(self, report_ledger, today):
        report = ReportService(report_ledger).revenue_report(days=30, today=today)

        assert report.total_trips == 3
        assert report.total_revenue == 2700 + 1200 + 6000 + 1500
        assert report.avg_daily_revenue == pytest.approx(11400 / 30)

    def test_removed_vehicle_still_counts(self, report_ledger, today, bus):
        VehicleService(report_ledger).remove_vehicle(bus.id)

        report = ReportService(report_ledger).revenue_report(days=7, today=today)

        assert report.total_revenue == 9900
        assert bus.id not in [v.vehicle_id for v in report.vehicles]

    def test_unsupported_period(self, ledger):
        with pytest.raises(ValidationError):
            ReportService(ledger).revenue_report(days=14)
