from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func
from terminal_ledger.database import Base

# ================================
# Key/value application state
# ================================
class AppState(Base):
    __tablename__ = "app_state"

    key = Column(String(100), primary_key=True, index=True)
    value = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
