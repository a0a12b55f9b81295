import logging
import uuid
from datetime import datetime
from typing import List, Optional, Tuple

from terminal_ledger.bookings.fare_service import calculate_ticket_summary
from terminal_ledger.bookings.schemas import BookingTicket, Passenger, TicketCreate, TicketUpdate
from terminal_ledger.bookings.ticket_mapper import find_ticket_by_seat_id
from terminal_ledger.bookings.validation import ensure_valid_ticket
from terminal_ledger.exceptions import (
    NotFoundError, SeatAlreadyBooked, ValidationError, VoucherNotEditable
)
from terminal_ledger.routes.service import RouteService
from terminal_ledger.storage.repository import Ledger
from terminal_ledger.vehicles.schemas import Vehicle
from terminal_ledger.vehicles.service import VehicleService
from terminal_ledger.vouchers.lifecycle import can_edit_voucher, get_voucher_status
from terminal_ledger.vouchers.schemas import Voucher

logger = logging.getLogger(__name__)


class BookingService:
    """Seat bookings on a voucher.

    Every mutation goes through ``_get_editable_voucher`` so tickets can only
    change while the voucher is boarding.
    """

    def __init__(self, ledger: Ledger):
        self.ledger = ledger
        self.route_service = RouteService(ledger)
        self.vehicle_service = VehicleService(ledger)

    # Queries

    def get_voucher(self, voucher_id: str) -> Voucher:
        for voucher in self.ledger.state.vouchers:
            if voucher.id == voucher_id:
                return voucher
        raise NotFoundError(f"Voucher {voucher_id} not found")

    def list_tickets(self, voucher_id: str) -> List[BookingTicket]:
        return list(self.get_voucher(voucher_id).tickets)

    def get_ticket(self, voucher_id: str, ticket_id: str) -> BookingTicket:
        voucher = self.get_voucher(voucher_id)
        return self._find_ticket(voucher, ticket_id)

    def find_ticket_for_seat(self, voucher_id: str, seat_id: int) -> Optional[BookingTicket]:
        """Ticket holding ``seat_id``, or None when the seat is free"""
        return find_ticket_by_seat_id(self.get_voucher(voucher_id).tickets, seat_id)

    # Mutations

    def book_seats(self, voucher_id: str, request: TicketCreate) -> BookingTicket:
        """Create one ticket covering all requested seats"""
        voucher, vehicle = self._get_editable_voucher(voucher_id)
        seat_ids = sorted(request.seat_ids)

        self._check_seats_exist(vehicle, seat_ids)
        taken = [seat_id for seat_id in seat_ids if find_ticket_by_seat_id(voucher.tickets, seat_id)]
        if taken:
            raise SeatAlreadyBooked(taken, voucher.id)

        passenger = self._clean_passenger(request.passenger)
        destination = (request.destination or "").strip()
        base_fare_per_seat = self._fare_for(voucher, vehicle, destination)
        summary = calculate_ticket_summary(base_fare_per_seat, len(seat_ids), request.total_discount)
        ensure_valid_ticket(
            passenger=passenger,
            destination=destination,
            seat_ids=seat_ids,
            total_base_fare=summary.total_base_fare,
            total_discount=request.total_discount
        )

        ticket = BookingTicket(
            id=str(uuid.uuid4()),
            voucher_id=voucher.id,
            seat_ids=seat_ids,
            passenger=passenger,
            destination=destination,
            base_fare_per_seat=base_fare_per_seat,
            total_base_fare=summary.total_base_fare,
            total_discount=request.total_discount,
            final_total=summary.final_total,
            created_at=datetime.now()
        )
        voucher.tickets.append(ticket)
        self.ledger.save()

        logger.info("Booked seats %s on voucher %s (ticket %s)", seat_ids, voucher.id, ticket.id)
        return ticket

    def update_ticket(self, voucher_id: str, ticket_id: str, updates: TicketUpdate) -> BookingTicket:
        """Edit passenger, destination or discount; totals are recomputed"""
        voucher, vehicle = self._get_editable_voucher(voucher_id)
        ticket = self._find_ticket(voucher, ticket_id)

        passenger = self._clean_passenger(updates.passenger if updates.passenger is not None else ticket.passenger)
        destination = (updates.destination if updates.destination is not None else ticket.destination).strip()
        total_discount = updates.total_discount if updates.total_discount is not None else ticket.total_discount

        if destination != ticket.destination:
            base_fare_per_seat = self._fare_for(voucher, vehicle, destination)
        else:
            base_fare_per_seat = ticket.base_fare_per_seat

        summary = calculate_ticket_summary(base_fare_per_seat, len(ticket.seat_ids), total_discount)
        ensure_valid_ticket(
            passenger=passenger,
            destination=destination,
            seat_ids=ticket.seat_ids,
            total_base_fare=summary.total_base_fare,
            total_discount=total_discount
        )

        ticket.passenger = passenger
        ticket.destination = destination
        ticket.base_fare_per_seat = base_fare_per_seat
        ticket.total_discount = total_discount
        ticket.total_base_fare = summary.total_base_fare
        ticket.final_total = summary.final_total
        ticket.updated_at = datetime.now()
        self.ledger.save()

        return ticket

    def cancel_ticket(self, voucher_id: str, ticket_id: str) -> BookingTicket:
        """Remove a ticket, releasing all of its seats"""
        voucher, _ = self._get_editable_voucher(voucher_id)
        ticket = self._find_ticket(voucher, ticket_id)

        voucher.tickets = [t for t in voucher.tickets if t.id != ticket.id]
        self.ledger.save()

        logger.info("Cancelled ticket %s on voucher %s, released seats %s", ticket.id, voucher.id, ticket.seat_ids)
        return ticket

    # Helpers

    def _get_editable_voucher(self, voucher_id: str) -> Tuple[Voucher, Vehicle]:
        voucher = self.get_voucher(voucher_id)
        if not can_edit_voucher(voucher):
            raise VoucherNotEditable(
                f"Voucher {voucher.id} is {get_voucher_status(voucher).value}; bookings can no longer change"
            )
        vehicle = self.vehicle_service.require_vehicle(voucher.vehicle_id)
        return voucher, vehicle

    def _find_ticket(self, voucher: Voucher, ticket_id: str) -> BookingTicket:
        for ticket in voucher.tickets:
            if ticket.id == ticket_id:
                return ticket
        raise NotFoundError(f"Ticket {ticket_id} not found on voucher {voucher.id}")

    def _fare_for(self, voucher: Voucher, vehicle: Vehicle, destination: str) -> int:
        if not destination:
            raise ValidationError("Destination is required")
        route = self.route_service.find_fare_route(voucher.origin, destination, vehicle.type)
        return route.fare

    def _check_seats_exist(self, vehicle: Vehicle, seat_ids: List[int]) -> None:
        for seat_id in seat_ids:
            seat = vehicle.get_seat(seat_id)
            if seat is None:
                raise ValidationError(f"Seat {seat_id} does not exist on vehicle {vehicle.registration_number}")
            if seat.is_driver:
                raise ValidationError(f"Seat {seat_id} is the driver's seat")

    @staticmethod
    def _clean_passenger(passenger: Passenger) -> Passenger:
        def clean(value):
            if value is None:
                return None
            return value.strip() or None

        return Passenger(
            name=clean(passenger.name),
            cnic=clean(passenger.cnic),
            phone=clean(passenger.phone),
            gender=passenger.gender
        )
