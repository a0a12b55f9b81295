from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./terminal_ledger.db"
    DATABASE_ECHO: bool = False

    # Storage keys
    STORAGE_KEY: str = "booking-app-state"
    TERMINAL_STORAGE_KEY: str = "terminal-info"

    # Terminal
    DEFAULT_ORIGIN: str = "Multan"
    CURRENCY: str = "PKR"
    MAX_FINANCIAL_INPUT: int = 100000

    # Application
    PROJECT_NAME: str = "Terminal Voucher & Ticket Ledger"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: Optional[str] = None

    @property
    def cors_origins(self) -> list:
        if not self.CORS_ORIGINS:
            return ["http://localhost:3000", "http://localhost:5173"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
