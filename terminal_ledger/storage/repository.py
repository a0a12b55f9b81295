import json
import logging
from typing import Optional

from pydantic import ValidationError as SchemaValidationError

from terminal_ledger.config import Settings, settings as default_settings
from terminal_ledger.storage.migration import default_state, restore_state
from terminal_ledger.storage.schemas import LedgerState
from terminal_ledger.storage.store import StateStore
from terminal_ledger.terminal.schemas import TerminalInfo

logger = logging.getLogger(__name__)


class Ledger:
    """In-memory ledger state backed by a ``StateStore``.

    State is loaded once and the whole blob is written back after every
    mutation. There is a single writer, so no locking is done. Load problems
    fall back to defaults and save problems are logged, never raised.
    """

    def __init__(self, store: StateStore, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or default_settings
        self.state: LedgerState = default_state(self.settings.DEFAULT_ORIGIN)
        self.terminal_info: Optional[TerminalInfo] = None

    @property
    def origin(self) -> str:
        """City every route and voucher departs from"""
        if self.terminal_info:
            return self.terminal_info.city
        return self.settings.DEFAULT_ORIGIN

    def load(self) -> LedgerState:
        self.terminal_info = self._load_terminal_info()

        try:
            raw = self.store.get(self.settings.STORAGE_KEY)
        except Exception:
            logger.exception("Failed to read booking state, using defaults")
            raw = None

        result = restore_state(raw, origin=self.origin)
        self.state = result.state

        if result.discarded:
            try:
                self.store.remove(self.settings.STORAGE_KEY)
            except Exception:
                logger.exception("Failed to clear outdated booking state")
        if result.migrated:
            self.save()

        logger.info(
            "Loaded booking state from %s: %d vehicle(s), %d voucher(s), %d route(s)",
            result.source, len(self.state.vehicles), len(self.state.vouchers), len(self.state.routes)
        )
        return self.state

    def save(self) -> None:
        try:
            payload = json.dumps(self.state.model_dump(by_alias=True, mode="json"))
            self.store.set(self.settings.STORAGE_KEY, payload)
        except Exception:
            logger.exception("Failed to save booking state")

    def _load_terminal_info(self) -> Optional[TerminalInfo]:
        try:
            raw = self.store.get(self.settings.TERMINAL_STORAGE_KEY)
            if not raw:
                return None
            return TerminalInfo.model_validate_json(raw)
        except SchemaValidationError as e:
            logger.error("Saved terminal info is incomplete, ignoring it: %s", e)
        except Exception:
            logger.exception("Failed to load terminal info")
        return None

    def save_terminal_info(self, info: Optional[TerminalInfo]) -> None:
        self.terminal_info = info
        try:
            if info is None:
                self.store.remove(self.settings.TERMINAL_STORAGE_KEY)
            else:
                self.store.set(self.settings.TERMINAL_STORAGE_KEY, info.model_dump_json(by_alias=True))
        except Exception:
            logger.exception("Failed to save terminal info")
