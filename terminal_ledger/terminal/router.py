from fastapi import APIRouter, Depends
from typing import Optional
from terminal_ledger.dependencies import get_ledger
from terminal_ledger.schemas import CamelModel
from terminal_ledger.storage.repository import Ledger
from terminal_ledger.terminal.schemas import TerminalInfo
from terminal_ledger.terminal.service import TerminalService

router = APIRouter()

class TerminalSetupStatus(CamelModel):
    terminal_info: Optional[TerminalInfo] = None
    is_setup_complete: bool

@router.get("/", response_model=TerminalSetupStatus)
def get_terminal(ledger: Ledger = Depends(get_ledger)):
    service = TerminalService(ledger)
    return TerminalSetupStatus(
        terminal_info=service.get_terminal_info(),
        is_setup_complete=service.is_setup_complete()
    )

@router.put("/", response_model=TerminalInfo)
def set_terminal(info: TerminalInfo, ledger: Ledger = Depends(get_ledger)):
    """Configure the terminal name, city, area and contact number"""
    return TerminalService(ledger).set_terminal_info(info)

@router.delete("/")
def clear_terminal(ledger: Ledger = Depends(get_ledger)):
    TerminalService(ledger).clear_terminal_info()
    return {"message": "Terminal info cleared"}
