from typing import Optional
from terminal_ledger.bookings.schemas import BookingTicket
from terminal_ledger.printing.formatting import format_amount, format_departure
from terminal_ledger.printing.schemas import (
    ReceiptDestinationLine, ReceiptDriver, ReceiptFare, ReceiptPassenger, ReceiptRoute,
    ReceiptSummary, TicketReceipt, VoucherReceipt
)
from terminal_ledger.terminal.schemas import TerminalInfo
from terminal_ledger.vehicles.schemas import Vehicle
from terminal_ledger.vouchers.schemas import Voucher, VoucherFinancialSummary

class ReceiptService:
    """Builds printer payloads. Rendering and device I/O happen elsewhere."""

    def __init__(self, terminal: Optional[TerminalInfo], currency: str = "PKR"):
        self.terminal = terminal
        self.currency = currency

    @property
    def company(self) -> str:
        return self.terminal.name if self.terminal else ""

    def ticket_receipt(self, ticket: BookingTicket, vehicle: Vehicle, voucher: Voucher) -> TicketReceipt:
        gender = None
        if ticket.passenger.gender:
            gender = ticket.passenger.gender.capitalize()

        return TicketReceipt(
            booking_id=ticket.id[:10].upper(),
            seats=[str(seat_id) for seat_id in ticket.seat_ids],
            company=self.company,
            terminal_phone=self.terminal.contact_number if self.terminal else None,
            route=ReceiptRoute(origin=voucher.origin.upper(), destination=ticket.destination.upper()),
            departure=format_departure(voucher.date, voucher.departure_time),
            vehicle_number=vehicle.registration_number,
            passenger=ReceiptPassenger(
                name=ticket.passenger.name or None,
                phone=ticket.passenger.phone or None,
                cnic=ticket.passenger.cnic or None,
                gender=gender
            ),
            fare=ReceiptFare(
                price=format_amount(ticket.total_base_fare, self.currency),
                discount=format_amount(ticket.total_discount, self.currency),
                total=format_amount(ticket.final_total, self.currency)
            )
        )

    def voucher_receipt(
        self,
        voucher: Voucher,
        vehicle: Vehicle,
        summary: VoucherFinancialSummary
    ) -> VoucherReceipt:
        return VoucherReceipt(
            company=self.company,
            vehicle_number=vehicle.registration_number,
            route=ReceiptRoute(origin=voucher.origin.upper()),
            departure=format_departure(voucher.date, voucher.departure_time),
            driver=ReceiptDriver(name=voucher.driver_name, mobile=voucher.driver_mobile),
            revenue_by_destination=[
                ReceiptDestinationLine(
                    destination=line.destination,
                    tickets=line.ticket_count,
                    revenue=format_amount(line.total_revenue, self.currency)
                )
                for line in summary.revenue_by_destination
            ],
            summary=ReceiptSummary(
                total_fare=format_amount(summary.total_fare, self.currency),
                terminal_tax=format_amount(summary.terminal_tax, self.currency),
                cargo=format_amount(summary.cargo, self.currency),
                grand_total=format_amount(summary.grand_total, self.currency)
            ),
            total_seats=len(voucher.booked_seats)
        )
