"""
State store collaborators.

The ledger persists a single JSON blob per key, the way a browser's local
storage would. ``SqlStateStore`` keeps the blobs in the ``app_state`` table;
``InMemoryStateStore`` is a drop-in stand-in for tests and scripts.
"""

from typing import Dict, Optional
from sqlalchemy.orm import Session, sessionmaker
from terminal_ledger.models import AppState


class StateStore:
    """Key/value store of JSON strings"""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class InMemoryStateStore(StateStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class SqlStateStore(StateStore):
    """One row per key in ``app_state``; each call uses its own session"""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        db: Session = self.session_factory()
        try:
            row = db.query(AppState).filter(AppState.key == key).first()
            return row.value if row else None
        finally:
            db.close()

    def set(self, key: str, value: str) -> None:
        db: Session = self.session_factory()
        try:
            row = db.query(AppState).filter(AppState.key == key).first()
            if row:
                row.value = value
            else:
                db.add(AppState(key=key, value=value))
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def remove(self, key: str) -> None:
        db: Session = self.session_factory()
        try:
            db.query(AppState).filter(AppState.key == key).delete()
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
