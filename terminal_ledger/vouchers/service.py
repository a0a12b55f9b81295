import logging
import uuid
from datetime import date, datetime
from typing import List, Optional

from terminal_ledger.exceptions import (
    ConfirmationRequired, InvalidStatusTransition, NotFoundError, ValidationError
)
from terminal_ledger.storage.repository import Ledger
from terminal_ledger.vehicles.service import VehicleService
from terminal_ledger.vouchers.financial_service import (
    calculate_voucher_financial_summary, validate_financial_input
)
from terminal_ledger.vouchers.lifecycle import can_transition_to_status, get_voucher_status
from terminal_ledger.vouchers.schemas import (
    DepartureRequest, Voucher, VoucherCreate, VoucherFinancialSummary, VoucherStatus, VoucherUpdate
)

logger = logging.getLogger(__name__)


class VoucherService:
    """Daily trip vouchers and their boarding -> departed -> closed lifecycle"""

    def __init__(self, ledger: Ledger):
        self.ledger = ledger
        self.vehicle_service = VehicleService(ledger)

    def list_vouchers(self, for_date: Optional[date] = None) -> List[Voucher]:
        if for_date is None:
            return list(self.ledger.state.vouchers)
        return [v for v in self.ledger.state.vouchers if v.date == for_date]

    def get_todays_vouchers(self) -> List[Voucher]:
        return self.list_vouchers(date.today())

    def get_voucher(self, voucher_id: str) -> Optional[Voucher]:
        for voucher in self.ledger.state.vouchers:
            if voucher.id == voucher_id:
                return voucher
        return None

    def require_voucher(self, voucher_id: str) -> Voucher:
        voucher = self.get_voucher(voucher_id)
        if not voucher:
            raise NotFoundError(f"Voucher {voucher_id} not found")
        return voucher

    def get_booked_seats_count(self, voucher_id: str) -> int:
        voucher = self.get_voucher(voucher_id)
        return len(voucher.booked_seats) if voucher else 0

    def create_voucher(self, request: VoucherCreate) -> Voucher:
        self.vehicle_service.require_vehicle(request.vehicle_id)

        voucher = Voucher(
            id=str(uuid.uuid4()),
            vehicle_id=request.vehicle_id,
            date=request.date,
            origin=self.ledger.origin,
            departure_time=request.departure_time,
            driver_name=request.driver_name,
            driver_mobile=request.driver_mobile,
            created_at=datetime.now(),
            tickets=[],
            status=VoucherStatus.BOARDING
        )
        self.ledger.state.vouchers.append(voucher)
        self.ledger.save()
        return voucher

    def update_voucher(self, voucher_id: str, updates: VoucherUpdate) -> Voucher:
        """Edit trip details. Closed vouchers are read-only."""
        voucher = self.require_voucher(voucher_id)
        if get_voucher_status(voucher) == VoucherStatus.CLOSED:
            raise InvalidStatusTransition(f"Voucher {voucher.id} is closed and cannot be edited")

        if updates.vehicle_id is not None and updates.vehicle_id != voucher.vehicle_id:
            if voucher.tickets:
                raise ValidationError("Cannot change the vehicle of a voucher that has bookings")
            self.vehicle_service.require_vehicle(updates.vehicle_id)
            voucher.vehicle_id = updates.vehicle_id
        if updates.date is not None:
            voucher.date = updates.date
        if updates.departure_time is not None:
            voucher.departure_time = updates.departure_time
        if updates.driver_name is not None and updates.driver_name.strip():
            voucher.driver_name = updates.driver_name.strip()
        if updates.driver_mobile is not None and updates.driver_mobile.strip():
            voucher.driver_mobile = updates.driver_mobile.strip()

        self.ledger.save()
        return voucher

    def remove_voucher(self, voucher_id: str) -> None:
        voucher = self.require_voucher(voucher_id)
        self.ledger.state.vouchers = [v for v in self.ledger.state.vouchers if v.id != voucher.id]
        self.ledger.save()

    def get_financial_summary(
        self,
        voucher_id: str,
        terminal_tax: Optional[str] = None,
        cargo: Optional[str] = None
    ) -> VoucherFinancialSummary:
        """Summary using the given inputs, or the values stamped at departure"""
        voucher = self.require_voucher(voucher_id)
        tax_value = validate_financial_input(terminal_tax, "Terminal tax") if terminal_tax is not None else (voucher.terminal_tax or 0)
        cargo_value = validate_financial_input(cargo, "Cargo") if cargo is not None else (voucher.cargo or 0)
        return calculate_voucher_financial_summary(voucher, tax_value, cargo_value)

    def mark_departed(self, voucher_id: str, request: DepartureRequest) -> Voucher:
        """Stamp terminal tax and cargo and freeze bookings"""
        voucher = self.require_voucher(voucher_id)
        self._ensure_transition(voucher, VoucherStatus.DEPARTED)

        terminal_tax = validate_financial_input(request.terminal_tax, "Terminal tax")
        cargo = validate_financial_input(request.cargo, "Cargo")

        summary = calculate_voucher_financial_summary(voucher, terminal_tax, cargo)
        if summary.grand_total < 0 and not request.acknowledge_negative_total:
            raise ConfirmationRequired(
                f"Grand total is negative ({summary.grand_total:g}); confirm to mark voucher as departed"
            )

        voucher.status = VoucherStatus.DEPARTED
        voucher.terminal_tax = terminal_tax
        voucher.cargo = cargo
        voucher.departed_at = datetime.now()
        self.ledger.save()

        logger.info(
            "Voucher %s departed: fare %s, tax %s, cargo %s, grand total %s",
            voucher.id, summary.total_fare, terminal_tax, cargo, summary.grand_total
        )
        return voucher

    def mark_closed(self, voucher_id: str) -> Voucher:
        """Terminal state, no further changes"""
        voucher = self.require_voucher(voucher_id)
        self._ensure_transition(voucher, VoucherStatus.CLOSED)

        voucher.status = VoucherStatus.CLOSED
        voucher.closed_at = datetime.now()
        self.ledger.save()

        logger.info("Voucher %s closed", voucher.id)
        return voucher

    def _ensure_transition(self, voucher: Voucher, new_status: VoucherStatus) -> None:
        current = get_voucher_status(voucher)
        if not can_transition_to_status(current, new_status):
            raise InvalidStatusTransition(
                f"Cannot change voucher {voucher.id} from {current.value} to {new_status.value}"
            )
