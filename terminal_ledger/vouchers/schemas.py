from pydantic import Field, computed_field, validator
from typing import List, Optional
import datetime as dt
from enum import Enum
from terminal_ledger.bookings.schemas import BookedSeat, BookingTicket
from terminal_ledger.bookings.ticket_mapper import derive_booked_seats_from_tickets
from terminal_ledger.schemas import CamelModel

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

class VoucherStatus(str, Enum):
    """Voucher lifecycle, one way: boarding -> departed -> closed"""
    BOARDING = "boarding"
    DEPARTED = "departed"
    CLOSED = "closed"

class Voucher(CamelModel):
    """One vehicle's trip on one date"""
    id: str
    vehicle_id: str
    date: dt.date
    origin: str
    departure_time: str  # HH:mm, 24-hour
    driver_name: str
    driver_mobile: str
    created_at: dt.datetime
    tickets: List[BookingTicket] = []
    # Absent on records written before the lifecycle existed
    status: Optional[VoucherStatus] = None
    terminal_tax: Optional[int] = None
    cargo: Optional[int] = None
    departed_at: Optional[dt.datetime] = None
    closed_at: Optional[dt.datetime] = None

    @computed_field(alias="bookedSeats")
    @property
    def booked_seats(self) -> List[BookedSeat]:
        return derive_booked_seats_from_tickets(self.tickets)

class VoucherCreate(CamelModel):
    vehicle_id: str
    date: dt.date
    departure_time: str = Field(..., pattern=TIME_PATTERN)
    driver_name: str = Field(..., min_length=1)
    driver_mobile: str = Field(..., min_length=1)

    @validator('driver_name', 'driver_mobile')
    def strip_required(cls, v):
        if not v.strip():
            raise ValueError('Value cannot be blank')
        return v.strip()

class VoucherUpdate(CamelModel):
    """Trip details; bookings and lifecycle have their own endpoints"""
    vehicle_id: Optional[str] = None
    date: Optional[dt.date] = None
    departure_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    driver_name: Optional[str] = None
    driver_mobile: Optional[str] = None

class DepartureRequest(CamelModel):
    """Raw form values, validated with validate_financial_input"""
    terminal_tax: str = "0"
    cargo: str = "0"
    acknowledge_negative_total: bool = False

    @validator('terminal_tax', 'cargo', pre=True)
    def coerce_to_text(cls, v):
        return str(v) if v is not None else "0"

# Financial Models
class DestinationRevenue(CamelModel):
    destination: str
    ticket_count: int
    total_revenue: float

class VoucherFinancialSummary(CamelModel):
    revenue_by_destination: List[DestinationRevenue]
    total_fare: float
    terminal_tax: float
    cargo: float
    grand_total: float

    @computed_field(alias="requiresConfirmation")
    @property
    def requires_confirmation(self) -> bool:
        """A negative grand total must be confirmed before departure"""
        return self.grand_total < 0

class VoucherStatusDisplay(CamelModel):
    status: VoucherStatus
    emoji: str
    label: str
    variant: str
    can_edit: bool
