from typing import Optional
from terminal_ledger.config import settings
from terminal_ledger.database import SessionLocal, init_db
from terminal_ledger.storage.repository import Ledger
from terminal_ledger.storage.store import SqlStateStore

_ledger: Optional[Ledger] = None

def get_ledger() -> Ledger:
    """Process-wide ledger, loaded from the database on first use"""
    global _ledger
    if _ledger is None:
        init_db()
        ledger = Ledger(SqlStateStore(SessionLocal), settings)
        ledger.load()
        _ledger = ledger
    return _ledger
