from fastapi import APIRouter, Depends, status
from typing import List, Optional
from terminal_ledger.bookings.booking_service import BookingService
from terminal_ledger.bookings.fare_service import calculate_ticket_summary
from terminal_ledger.bookings.schemas import (
    BookingTicket, FareQuoteRequest, TicketCreate, TicketSummary, TicketUpdate
)
from terminal_ledger.dependencies import get_ledger
from terminal_ledger.exceptions import LedgerError, to_http_exception
from terminal_ledger.printing.receipt_service import ReceiptService
from terminal_ledger.printing.schemas import TicketReceipt
from terminal_ledger.storage.repository import Ledger
from terminal_ledger.vehicles.service import VehicleService

router = APIRouter()

@router.post("/fare-quote", response_model=TicketSummary)
def quote_fare(request: FareQuoteRequest):
    """Totals for the booking form before the ticket is created"""
    try:
        return calculate_ticket_summary(request.base_fare_per_seat, request.seat_count, request.total_discount)
    except LedgerError as e:
        raise to_http_exception(e)

@router.get("/{voucher_id}/tickets", response_model=List[BookingTicket])
def list_tickets(voucher_id: str, ledger: Ledger = Depends(get_ledger)):
    try:
        return BookingService(ledger).list_tickets(voucher_id)
    except LedgerError as e:
        raise to_http_exception(e)

@router.post("/{voucher_id}/tickets", response_model=BookingTicket, status_code=status.HTTP_201_CREATED)
def book_seats(voucher_id: str, request: TicketCreate, ledger: Ledger = Depends(get_ledger)):
    """Book one or more seats as a single ticket"""
    try:
        return BookingService(ledger).book_seats(voucher_id, request)
    except LedgerError as e:
        raise to_http_exception(e)

@router.get("/{voucher_id}/seats/{seat_id}/ticket", response_model=Optional[BookingTicket])
def find_ticket_for_seat(voucher_id: str, seat_id: int, ledger: Ledger = Depends(get_ledger)):
    """Ticket holding the seat, or null when the seat is free"""
    try:
        return BookingService(ledger).find_ticket_for_seat(voucher_id, seat_id)
    except LedgerError as e:
        raise to_http_exception(e)

@router.get("/{voucher_id}/tickets/{ticket_id}", response_model=BookingTicket)
def get_ticket(voucher_id: str, ticket_id: str, ledger: Ledger = Depends(get_ledger)):
    try:
        return BookingService(ledger).get_ticket(voucher_id, ticket_id)
    except LedgerError as e:
        raise to_http_exception(e)

@router.patch("/{voucher_id}/tickets/{ticket_id}", response_model=BookingTicket)
def update_ticket(
    voucher_id: str,
    ticket_id: str,
    updates: TicketUpdate,
    ledger: Ledger = Depends(get_ledger)
):
    """Edit passenger, destination or discount of a ticket"""
    try:
        return BookingService(ledger).update_ticket(voucher_id, ticket_id, updates)
    except LedgerError as e:
        raise to_http_exception(e)

@router.delete("/{voucher_id}/tickets/{ticket_id}")
def cancel_ticket(voucher_id: str, ticket_id: str, ledger: Ledger = Depends(get_ledger)):
    """Cancel a ticket and release its seats"""
    try:
        ticket = BookingService(ledger).cancel_ticket(voucher_id, ticket_id)
    except LedgerError as e:
        raise to_http_exception(e)
    return {
        "message": "Ticket cancelled successfully",
        "releasedSeatIds": ticket.seat_ids
    }

@router.get("/{voucher_id}/tickets/{ticket_id}/receipt", response_model=TicketReceipt)
def get_ticket_receipt(voucher_id: str, ticket_id: str, ledger: Ledger = Depends(get_ledger)):
    """Printable ticket payload"""
    booking_service = BookingService(ledger)
    try:
        voucher = booking_service.get_voucher(voucher_id)
        ticket = booking_service.get_ticket(voucher_id, ticket_id)
        vehicle = VehicleService(ledger).require_vehicle(voucher.vehicle_id)
    except LedgerError as e:
        raise to_http_exception(e)

    receipts = ReceiptService(ledger.terminal_info, ledger.settings.CURRENCY)
    return receipts.ticket_receipt(ticket, vehicle, voucher)
