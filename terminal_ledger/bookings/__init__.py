"""
Booking & Ticketing Module

Seat bookings on trip vouchers. A ticket is one booking event: one
passenger, one destination, one or more seats and a lump discount.

Key Components:
- fare_service.py: Ticket totals and even discount split
- ticket_mapper.py: Ticket <-> per-seat conversions and legacy seat migration
- validation.py: Passenger and ticket input checks
- booking_service.py: Book, edit and cancel tickets on boarding vouchers
- router.py: FastAPI endpoints for tickets, fare quotes and ticket receipts
- schemas.py: Pydantic models for tickets, seats and passengers
"""

from .schemas import (
    Passenger, BookingTicket, BookedSeat, TicketSummary, TicketCreate, TicketUpdate, FareQuoteRequest
)
from .fare_service import calculate_ticket_summary
from .ticket_mapper import (
    derive_booked_seats_from_tickets, find_ticket_by_seat_id, migrate_booked_seats_to_tickets
)

__all__ = [
    "Passenger",
    "BookingTicket",
    "BookedSeat",
    "TicketSummary",
    "TicketCreate",
    "TicketUpdate",
    "FareQuoteRequest",
    "calculate_ticket_summary",
    "derive_booked_seats_from_tickets",
    "find_ticket_by_seat_id",
    "migrate_booked_seats_to_tickets"
]
