"""
Voucher lifecycle: boarding -> departed -> closed.

Status is always read through ``get_voucher_status`` so records created
before the lifecycle existed are treated as boarding.
"""

from typing import Dict, List
from terminal_ledger.vouchers.schemas import Voucher, VoucherStatus, VoucherStatusDisplay

ALLOWED_TRANSITIONS: Dict[VoucherStatus, List[VoucherStatus]] = {
    VoucherStatus.BOARDING: [VoucherStatus.DEPARTED],
    VoucherStatus.DEPARTED: [VoucherStatus.CLOSED],
    VoucherStatus.CLOSED: [],
}

_STATUS_DISPLAY = {
    VoucherStatus.BOARDING: ("🟢", "Boarding", "secondary"),
    VoucherStatus.DEPARTED: ("🔴", "Departed", "destructive"),
    VoucherStatus.CLOSED: ("⚫", "Closed", "outline"),
}


def get_voucher_status(voucher: Voucher) -> VoucherStatus:
    return voucher.status or VoucherStatus.BOARDING


def can_edit_voucher(voucher: Voucher) -> bool:
    """Bookings may only be added, edited or cancelled while boarding"""
    return get_voucher_status(voucher) == VoucherStatus.BOARDING


def can_transition_to_status(current: VoucherStatus, new: VoucherStatus) -> bool:
    return new in ALLOWED_TRANSITIONS.get(VoucherStatus(current), [])


def get_voucher_status_display(voucher: Voucher) -> VoucherStatusDisplay:
    status = get_voucher_status(voucher)
    emoji, label, variant = _STATUS_DISPLAY[status]
    return VoucherStatusDisplay(
        status=status,
        emoji=emoji,
        label=label,
        variant=variant,
        can_edit=can_edit_voucher(voucher)
    )
