from pydantic import Field, validator
from typing import List, Optional, Literal
from datetime import datetime
from terminal_ledger.schemas import CamelModel

# Passenger
class Passenger(CamelModel):
    """Walk-up bookings may leave every field empty"""
    name: Optional[str] = None
    cnic: Optional[str] = None  # XXXXX-XXXXXXX-X
    phone: Optional[str] = None
    gender: Optional[Literal["male", "female"]] = None

# Ticket Models
class BookingTicket(CamelModel):
    """One booking event: one passenger, one destination, one or more seats"""
    id: str
    voucher_id: str
    seat_ids: List[int] = Field(..., min_length=1)
    passenger: Passenger
    destination: str
    # Route fares are whole units; migrated records may carry fractions
    base_fare_per_seat: float
    total_base_fare: float
    total_discount: float = 0
    final_total: float
    created_at: datetime
    updated_at: Optional[datetime] = None

class BookedSeat(CamelModel):
    """Per-seat projection of a ticket, derived and never edited directly"""
    seat_id: int
    passenger: Passenger
    destination: str
    fare: float
    discount: float = 0
    final_fare: float

class TicketSummary(CamelModel):
    total_base_fare: float
    final_total: float
    discount_per_seat: float

# Request Models
class TicketCreate(CamelModel):
    """Book one or more seats for a single passenger and destination"""
    seat_ids: List[int] = Field(..., min_length=1)
    passenger: Passenger = Field(default_factory=Passenger)
    destination: str
    total_discount: float = 0

    @validator('seat_ids')
    def validate_seat_ids(cls, v):
        if len(set(v)) != len(v):
            raise ValueError('Seat IDs must be unique')
        return v

class TicketUpdate(CamelModel):
    """Edit passenger, destination or discount of an existing ticket"""
    passenger: Optional[Passenger] = None
    destination: Optional[str] = None
    total_discount: Optional[float] = None

class FareQuoteRequest(CamelModel):
    base_fare_per_seat: int = Field(..., ge=0)
    seat_count: int
    total_discount: float = 0
