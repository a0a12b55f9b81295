"""
Ledger error taxonomy.

All ledger errors are ``ValueError`` subclasses so callers that only care
about "bad input" can catch ``ValueError``. Routers translate them into HTTP
responses with ``to_http_exception``.
"""

from fastapi import HTTPException, status


class LedgerError(ValueError):
    """Base class for all ledger errors"""
    status_code = status.HTTP_400_BAD_REQUEST


class ValidationError(LedgerError):
    """Malformed passenger, CNIC, discount or financial input"""


class InvalidArgument(LedgerError):
    """Programmer error such as a zero seat count"""


class NotFoundError(LedgerError):
    """Referenced vehicle, route, voucher or ticket does not exist"""
    status_code = status.HTTP_404_NOT_FOUND


class SeatAlreadyBooked(LedgerError):
    """A booking targets a seat already held by another ticket"""
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, seat_ids, voucher_id: str):
        self.seat_ids = sorted(seat_ids)
        self.voucher_id = voucher_id
        seats = ", ".join(str(seat_id) for seat_id in self.seat_ids)
        super().__init__(f"Seat(s) {seats} already booked on voucher {voucher_id}")


class VoucherNotEditable(LedgerError):
    """Bookings can only change while the voucher is boarding"""
    status_code = status.HTTP_409_CONFLICT


class InvalidStatusTransition(LedgerError):
    """Requested voucher status change is not an allowed edge"""
    status_code = status.HTTP_409_CONFLICT


class ConfirmationRequired(LedgerError):
    """Departure with a negative grand total needs explicit acknowledgement"""
    status_code = status.HTTP_409_CONFLICT


def to_http_exception(error: LedgerError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=str(error))
