from terminal_ledger.schemas import CamelModel
from typing import List, Optional

class ReceiptRoute(CamelModel):
    origin: str
    destination: Optional[str] = None

class ReceiptPassenger(CamelModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    cnic: Optional[str] = None
    gender: Optional[str] = None

class ReceiptFare(CamelModel):
    price: str
    discount: str
    total: str

class TicketReceipt(CamelModel):
    """Data for one printed ticket"""
    booking_id: str
    seats: List[str]
    company: str
    terminal_phone: Optional[str] = None
    route: ReceiptRoute
    departure: str
    vehicle_number: str
    passenger: ReceiptPassenger
    fare: ReceiptFare

class ReceiptDriver(CamelModel):
    name: str
    mobile: str

class ReceiptDestinationLine(CamelModel):
    destination: str
    tickets: int
    revenue: str

class ReceiptSummary(CamelModel):
    total_fare: str
    terminal_tax: str
    cargo: str
    grand_total: str

class VoucherReceipt(CamelModel):
    """Data for the printed trip summary handed to the driver"""
    company: str
    vehicle_number: str
    route: ReceiptRoute
    departure: str
    driver: ReceiptDriver
    revenue_by_destination: List[ReceiptDestinationLine]
    summary: ReceiptSummary
    total_seats: int
