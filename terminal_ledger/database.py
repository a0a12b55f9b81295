from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from terminal_ledger.config import settings

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def init_db(bind=None):
    """Create tables that do not exist yet"""
    # Models must be imported so they register on Base.metadata
    from terminal_ledger import models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
