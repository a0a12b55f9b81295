from pydantic import Field, validator
from terminal_ledger.schemas import CamelModel

class TerminalInfo(CamelModel):
    """Identity of the terminal printed on receipts; ``city`` is every route's origin"""
    name: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    area: str = Field(..., min_length=1)
    contact_number: str = Field(..., min_length=1)

    @validator('name', 'city', 'area', 'contact_number')
    def strip_required(cls, v):
        if not v.strip():
            raise ValueError('Value cannot be blank')
        return v.strip()
