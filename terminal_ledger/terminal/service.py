from typing import Optional
from terminal_ledger.storage.repository import Ledger
from terminal_ledger.terminal.schemas import TerminalInfo

class TerminalService:
    def __init__(self, ledger: Ledger):
        self.ledger = ledger

    def get_terminal_info(self) -> Optional[TerminalInfo]:
        return self.ledger.terminal_info

    def is_setup_complete(self) -> bool:
        return self.ledger.terminal_info is not None

    def set_terminal_info(self, info: TerminalInfo) -> TerminalInfo:
        """Existing routes keep their origin; only new routes and vouchers use the new city"""
        self.ledger.save_terminal_info(info)
        return info

    def clear_terminal_info(self) -> None:
        self.ledger.save_terminal_info(None)
