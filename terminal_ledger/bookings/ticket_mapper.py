"""
Conversions between the ticket-centric booking model and the flat per-seat
view used for seat maps, reports and records written by older versions.
"""

import logging
import uuid
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from terminal_ledger.bookings.fare_service import calculate_ticket_summary
from terminal_ledger.bookings.schemas import BookedSeat, BookingTicket

logger = logging.getLogger(__name__)


def derive_booked_seats_from_tickets(tickets: List[BookingTicket]) -> List[BookedSeat]:
    """One BookedSeat per ticket seat, discount distributed evenly"""
    booked_seats = []

    for ticket in tickets:
        summary = calculate_ticket_summary(
            ticket.base_fare_per_seat, len(ticket.seat_ids), ticket.total_discount
        )
        for seat_id in ticket.seat_ids:
            booked_seats.append(BookedSeat(
                seat_id=seat_id,
                passenger=ticket.passenger,
                destination=ticket.destination,
                fare=ticket.base_fare_per_seat,
                discount=summary.discount_per_seat,
                final_fare=ticket.base_fare_per_seat - summary.discount_per_seat
            ))

    return booked_seats


def find_ticket_by_seat_id(tickets: List[BookingTicket], seat_id: int) -> Optional[BookingTicket]:
    for ticket in tickets:
        if seat_id in ticket.seat_ids:
            return ticket
    return None


def migrate_booked_seats_to_tickets(
    booked_seats: List[BookedSeat],
    voucher_id: str
) -> List[BookingTicket]:
    """Rebuild tickets from flat seat records.

    Seats sharing passenger CNIC and destination are assumed to come from
    the same multi-seat booking. Blank CNICs share one key, so anonymous
    bookings to the same destination end up on one ticket.
    """
    grouped: Dict[Tuple[Optional[str], str], List[BookedSeat]] = {}
    for seat in booked_seats:
        key = (seat.passenger.cnic, seat.destination)
        grouped.setdefault(key, []).append(seat)

    tickets = []
    for group in grouped.values():
        total_base_fare = sum(seat.fare for seat in group)
        total_discount = sum(seat.discount for seat in group)
        first = group[0]

        tickets.append(BookingTicket(
            id=str(uuid.uuid4()),
            voucher_id=voucher_id,
            seat_ids=sorted(seat.seat_id for seat in group),
            passenger=first.passenger,
            destination=first.destination,
            base_fare_per_seat=first.fare,
            total_base_fare=total_base_fare,
            total_discount=total_discount,
            final_total=total_base_fare - total_discount,
            created_at=datetime.now()
        ))

    logger.debug(
        "Rebuilt %d ticket(s) from %d booked seat(s) on voucher %s",
        len(tickets), len(booked_seats), voucher_id
    )
    return tickets
