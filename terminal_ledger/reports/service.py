from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Optional
from terminal_ledger.exceptions import ValidationError
from terminal_ledger.reports.schemas import DailyRevenue, DestinationShare, RevenueReport, VehicleRevenue
from terminal_ledger.storage.repository import Ledger

SUPPORTED_PERIODS = (7, 30)
TOP_DESTINATIONS = 5

class ReportService:
    """Revenue statistics over recent vouchers, computed from booked seats"""

    def __init__(self, ledger: Ledger):
        self.ledger = ledger

    def revenue_report(self, days: int = 7, today: Optional[date] = None) -> RevenueReport:
        if days not in SUPPORTED_PERIODS:
            raise ValidationError(f"Report period must be one of {SUPPORTED_PERIODS} days")

        end_date = today or date.today()
        start_date = end_date - timedelta(days=days - 1)

        daily: Dict[date, DailyRevenue] = {}
        for offset in range(days):
            day = start_date + timedelta(days=offset)
            daily[day] = DailyRevenue(date=day, revenue=0, passengers=0, discount=0)

        vehicles = {vehicle.id: vehicle for vehicle in self.ledger.state.vehicles}
        destination_revenue: Dict[str, float] = defaultdict(float)
        vehicle_revenue: Dict[str, VehicleRevenue] = {}

        total_revenue = 0.0
        total_discount = 0.0
        total_passengers = 0
        period_vouchers = [
            v for v in self.ledger.state.vouchers if start_date <= v.date <= end_date
        ]

        for voucher in period_vouchers:
            vehicle = vehicles.get(voucher.vehicle_id)

            for seat in voucher.booked_seats:
                total_revenue += seat.final_fare
                total_discount += seat.discount
                total_passengers += 1

                day = daily[voucher.date]
                day.revenue += seat.final_fare
                day.passengers += 1
                day.discount += seat.discount

                destination_revenue[seat.destination] += seat.final_fare

                # Vouchers whose vehicle was removed still count in the totals
                if vehicle:
                    entry = vehicle_revenue.setdefault(
                        vehicle.id,
                        VehicleRevenue(vehicle_id=vehicle.id, name=vehicle.name, revenue=0, passengers=0)
                    )
                    entry.revenue += seat.final_fare
                    entry.passengers += 1

        top_destinations = sorted(
            (DestinationShare(destination=name, revenue=revenue) for name, revenue in destination_revenue.items()),
            key=lambda d: d.revenue,
            reverse=True
        )[:TOP_DESTINATIONS]

        return RevenueReport(
            period_days=days,
            start_date=start_date,
            end_date=end_date,
            total_revenue=total_revenue,
            total_discount=total_discount,
            total_passengers=total_passengers,
            total_trips=len(period_vouchers),
            avg_daily_revenue=total_revenue / days,
            avg_passengers_per_day=total_passengers / days,
            daily=list(daily.values()),
            top_destinations=top_destinations,
            vehicles=sorted(vehicle_revenue.values(), key=lambda v: v.revenue, reverse=True)
        )
