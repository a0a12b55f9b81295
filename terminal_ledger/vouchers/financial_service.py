import math
from typing import Dict, Union
from terminal_ledger.config import settings
from terminal_ledger.exceptions import ValidationError
from terminal_ledger.vouchers.schemas import DestinationRevenue, Voucher, VoucherFinancialSummary


def calculate_voucher_financial_summary(
    voucher: Voucher,
    terminal_tax: float = 0,
    cargo: float = 0
) -> VoucherFinancialSummary:
    """Revenue per destination plus the trip's grand total.

    The grand total may be negative when terminal tax exceeds fares and
    cargo; that is reported, not rejected.
    """
    by_destination: Dict[str, DestinationRevenue] = {}

    for booking in voucher.booked_seats:
        revenue = by_destination.get(booking.destination)
        if revenue is None:
            revenue = DestinationRevenue(destination=booking.destination, ticket_count=0, total_revenue=0)
            by_destination[booking.destination] = revenue
        revenue.ticket_count += 1
        revenue.total_revenue += booking.final_fare

    revenue_by_destination = sorted(
        by_destination.values(),
        key=lambda r: (r.destination.casefold(), r.destination)
    )

    total_fare = sum(r.total_revenue for r in revenue_by_destination)
    grand_total = total_fare - terminal_tax + cargo

    return VoucherFinancialSummary(
        revenue_by_destination=revenue_by_destination,
        total_fare=total_fare,
        terminal_tax=terminal_tax,
        cargo=cargo,
        grand_total=grand_total
    )


def validate_financial_input(value: Union[str, int, float], field_name: str) -> int:
    """Parse terminal tax or cargo input and floor it to whole currency units"""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a valid number")

    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a valid number")

    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")

    if number > settings.MAX_FINANCIAL_INPUT:
        raise ValidationError(
            f"{field_name} exceeds maximum allowed ({settings.MAX_FINANCIAL_INPUT:,})"
        )

    return math.floor(number)
