"""
Voucher Module

A voucher is one vehicle's trip on one date and holds every ticket sold
for it. Vouchers move one way through boarding -> departed -> closed;
bookings can only change while boarding.

Key Components:
- lifecycle.py: Status accessor, edit gate and allowed transitions
- financial_service.py: Revenue by destination, grand total, tax/cargo input checks
- service.py: Voucher administration and departure/closing
- router.py: FastAPI endpoints for vouchers, summaries and voucher receipts
- schemas.py: Pydantic models for vouchers and financial summaries
"""

from .schemas import (
    Voucher, VoucherStatus, VoucherCreate, VoucherUpdate, DepartureRequest,
    DestinationRevenue, VoucherFinancialSummary
)
from .lifecycle import get_voucher_status, can_edit_voucher, can_transition_to_status
from .financial_service import calculate_voucher_financial_summary, validate_financial_input

__all__ = [
    "Voucher",
    "VoucherStatus",
    "VoucherCreate",
    "VoucherUpdate",
    "DepartureRequest",
    "DestinationRevenue",
    "VoucherFinancialSummary",
    "get_voucher_status",
    "can_edit_voucher",
    "can_transition_to_status",
    "calculate_voucher_financial_summary",
    "validate_financial_input"
]
