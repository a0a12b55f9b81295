import re
from typing import List, Optional
from terminal_ledger.bookings.schemas import Passenger
from terminal_ledger.exceptions import ValidationError

CNIC_PATTERN = re.compile(r"^\d{5}-\d{7}-\d$")


def validate_passenger(passenger: Passenger) -> List[str]:
    errors = []
    if passenger.cnic and not CNIC_PATTERN.match(passenger.cnic):
        errors.append("Invalid CNIC format (XXXXX-XXXXXXX-X)")
    return errors


def validate_ticket(
    passenger: Passenger,
    destination: Optional[str],
    seat_ids: List[int],
    total_base_fare: float,
    total_discount: float
) -> List[str]:
    """Collect every problem with a ticket; an empty list means it is valid"""
    errors = validate_passenger(passenger)

    if not destination or not destination.strip():
        errors.append("Destination is required")

    if not seat_ids:
        errors.append("At least one seat must be selected")

    if total_discount < 0:
        errors.append("Discount cannot be negative")
    elif total_discount > total_base_fare:
        errors.append("Discount cannot exceed total fare")

    return errors


def ensure_valid_ticket(*args, **kwargs) -> None:
    errors = validate_ticket(*args, **kwargs)
    if errors:
        raise ValidationError("; ".join(errors))
