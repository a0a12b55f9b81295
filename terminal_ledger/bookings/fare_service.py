from terminal_ledger.bookings.schemas import TicketSummary
from terminal_ledger.exceptions import InvalidArgument


def calculate_ticket_summary(
    base_fare_per_seat: float,
    seat_count: int,
    total_discount: float
) -> TicketSummary:
    """Calculate ticket totals and the per-seat share of a lump discount.

    The discount is split evenly and not rounded; a remainder leaves
    fractional per-seat amounts which callers display as currency.
    """
    if seat_count <= 0:
        raise InvalidArgument(f"Seat count must be positive, got {seat_count}")

    total_base_fare = base_fare_per_seat * seat_count
    final_total = max(0, total_base_fare - total_discount)
    discount_per_seat = total_discount / seat_count

    return TicketSummary(
        total_base_fare=total_base_fare,
        final_total=final_total,
        discount_per_seat=discount_per_seat
    )
