from pydantic import BaseModel
from typing import List, Optional
from terminal_ledger.routes.schemas import Route
from terminal_ledger.schemas import CamelModel
from terminal_ledger.vehicles.schemas import Vehicle
from terminal_ledger.vouchers.schemas import Voucher

class LedgerState(CamelModel):
    """The whole persisted blob"""
    vehicles: List[Vehicle] = []
    vouchers: List[Voucher] = []
    routes: List[Route] = []

class RestoreResult(BaseModel):
    state: LedgerState
    discarded: bool = False  # legacy structure found; stored blob must be removed
    migrated: int = 0  # vouchers whose tickets were rebuilt from booked seats
    source: Optional[str] = None  # "saved" or "defaults"
