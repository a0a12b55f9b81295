from fastapi import APIRouter, Depends, Query
from terminal_ledger.dependencies import get_ledger
from terminal_ledger.exceptions import LedgerError, to_http_exception
from terminal_ledger.reports.schemas import RevenueReport
from terminal_ledger.reports.service import ReportService
from terminal_ledger.storage.repository import Ledger

router = APIRouter()

@router.get("/revenue", response_model=RevenueReport)
def get_revenue_report(
    days: int = Query(7, description="Report period, 7 or 30 days"),
    ledger: Ledger = Depends(get_ledger)
):
    """Revenue, discounts and passengers over the last N days"""
    try:
        return ReportService(ledger).revenue_report(days)
    except LedgerError as e:
        raise to_http_exception(e)
