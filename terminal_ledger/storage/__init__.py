"""
Persistence of the ledger state blob and migration of older blobs.

Key Components:
- store.py: StateStore collaborators (SQLAlchemy table, in-memory)
- migration.py: Legacy detection, default fallback, seat-to-ticket migration
- repository.py: Ledger, the loaded state plus save-after-mutation
"""

from .store import StateStore, InMemoryStateStore, SqlStateStore
from .repository import Ledger

__all__ = ["StateStore", "InMemoryStateStore", "SqlStateStore", "Ledger"]
