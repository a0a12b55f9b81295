from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional
from datetime import date
from terminal_ledger.dependencies import get_ledger
from terminal_ledger.exceptions import LedgerError, to_http_exception
from terminal_ledger.printing.receipt_service import ReceiptService
from terminal_ledger.printing.schemas import VoucherReceipt
from terminal_ledger.storage.repository import Ledger
from terminal_ledger.vehicles.service import VehicleService
from terminal_ledger.vouchers.lifecycle import get_voucher_status_display
from terminal_ledger.vouchers.schemas import (
    DepartureRequest, Voucher, VoucherCreate, VoucherFinancialSummary, VoucherStatusDisplay, VoucherUpdate
)
from terminal_ledger.vouchers.service import VoucherService

router = APIRouter()

@router.get("/", response_model=List[Voucher])
def list_vouchers(
    for_date: Optional[date] = Query(None, alias="date", description="Only vouchers for this date"),
    ledger: Ledger = Depends(get_ledger)
):
    """List vouchers, optionally for a single date"""
    return VoucherService(ledger).list_vouchers(for_date)

@router.get("/today", response_model=List[Voucher])
def list_todays_vouchers(ledger: Ledger = Depends(get_ledger)):
    return VoucherService(ledger).get_todays_vouchers()

@router.post("/", response_model=Voucher, status_code=status.HTTP_201_CREATED)
def create_voucher(request: VoucherCreate, ledger: Ledger = Depends(get_ledger)):
    """Open a boarding voucher for a vehicle's trip"""
    try:
        return VoucherService(ledger).create_voucher(request)
    except LedgerError as e:
        raise to_http_exception(e)

@router.get("/{voucher_id}", response_model=Voucher)
def get_voucher(voucher_id: str, ledger: Ledger = Depends(get_ledger)):
    voucher = VoucherService(ledger).get_voucher(voucher_id)
    if not voucher:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Voucher not found"
        )
    return voucher

@router.patch("/{voucher_id}", response_model=Voucher)
def update_voucher(voucher_id: str, updates: VoucherUpdate, ledger: Ledger = Depends(get_ledger)):
    """Edit trip details (vehicle, date, departure time, driver)"""
    try:
        return VoucherService(ledger).update_voucher(voucher_id, updates)
    except LedgerError as e:
        raise to_http_exception(e)

@router.delete("/{voucher_id}")
def remove_voucher(voucher_id: str, ledger: Ledger = Depends(get_ledger)):
    try:
        VoucherService(ledger).remove_voucher(voucher_id)
    except LedgerError as e:
        raise to_http_exception(e)
    return {"message": "Voucher removed successfully"}

# Lifecycle Endpoints
@router.get("/{voucher_id}/status", response_model=VoucherStatusDisplay)
def get_voucher_status(voucher_id: str, ledger: Ledger = Depends(get_ledger)):
    try:
        voucher = VoucherService(ledger).require_voucher(voucher_id)
    except LedgerError as e:
        raise to_http_exception(e)
    return get_voucher_status_display(voucher)

@router.get("/{voucher_id}/summary", response_model=VoucherFinancialSummary)
def get_financial_summary(
    voucher_id: str,
    terminal_tax: Optional[str] = Query(None, description="Preview with this terminal tax"),
    cargo: Optional[str] = Query(None, description="Preview with this cargo revenue"),
    ledger: Ledger = Depends(get_ledger)
):
    """Revenue by destination and grand total.

    Without query values the tax and cargo stamped at departure are used.
    """
    try:
        return VoucherService(ledger).get_financial_summary(voucher_id, terminal_tax, cargo)
    except LedgerError as e:
        raise to_http_exception(e)

@router.post("/{voucher_id}/depart", response_model=Voucher)
def mark_departed(voucher_id: str, request: DepartureRequest, ledger: Ledger = Depends(get_ledger)):
    """Record terminal tax and cargo and freeze bookings"""
    try:
        return VoucherService(ledger).mark_departed(voucher_id, request)
    except LedgerError as e:
        raise to_http_exception(e)

@router.post("/{voucher_id}/close", response_model=Voucher)
def mark_closed(voucher_id: str, ledger: Ledger = Depends(get_ledger)):
    """Close a departed voucher. This cannot be undone."""
    try:
        return VoucherService(ledger).mark_closed(voucher_id)
    except LedgerError as e:
        raise to_http_exception(e)

@router.get("/{voucher_id}/receipt", response_model=VoucherReceipt)
def get_voucher_receipt(voucher_id: str, ledger: Ledger = Depends(get_ledger)):
    """Printable trip summary payload"""
    voucher_service = VoucherService(ledger)
    try:
        voucher = voucher_service.require_voucher(voucher_id)
        vehicle = VehicleService(ledger).require_vehicle(voucher.vehicle_id)
        summary = voucher_service.get_financial_summary(voucher_id)
    except LedgerError as e:
        raise to_http_exception(e)

    receipts = ReceiptService(ledger.terminal_info, ledger.settings.CURRENCY)
    return receipts.voucher_receipt(voucher, vehicle, summary)
