from typing import List
import datetime as dt
from terminal_ledger.schemas import CamelModel

class DailyRevenue(CamelModel):
    date: dt.date
    revenue: float
    passengers: int
    discount: float

class DestinationShare(CamelModel):
    destination: str
    revenue: float

class VehicleRevenue(CamelModel):
    vehicle_id: str
    name: str
    revenue: float
    passengers: int

class RevenueReport(CamelModel):
    period_days: int
    start_date: dt.date
    end_date: dt.date
    total_revenue: float
    total_discount: float
    total_passengers: int
    total_trips: int
    avg_daily_revenue: float
    avg_passengers_per_day: float
    daily: List[DailyRevenue]
    top_destinations: List[DestinationShare]
    vehicles: List[VehicleRevenue]
