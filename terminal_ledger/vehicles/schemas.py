from pydantic import Field, validator
from typing import List, Optional
from enum import Enum
from terminal_ledger.schemas import CamelModel

class VehicleType(str, Enum):
    """Vehicle type enumeration"""
    HIGHROOF = "highroof"
    BUS = "bus"

class Seat(CamelModel):
    """Single position in a vehicle's seat layout"""
    id: int
    row: int
    col: int
    is_folding: bool = False
    is_driver: bool = False

class Vehicle(CamelModel):
    id: str
    name: str
    registration_number: str
    type: VehicleType
    seats: List[Seat]
    total_seats: int

    def get_seat(self, seat_id: int) -> Optional[Seat]:
        for seat in self.seats:
            if seat.id == seat_id:
                return seat
        return None

class VehicleCreate(CamelModel):
    name: str = Field(..., min_length=1)
    registration_number: str = Field(..., min_length=1)
    type: VehicleType = VehicleType.HIGHROOF
    rows: int = Field(12, ge=1, le=20, description="Bus rows (ignored for highroof)")
    cols: int = Field(4, ge=1, le=6, description="Bus columns (ignored for highroof)")

    @validator('name', 'registration_number')
    def strip_required(cls, v):
        if not v.strip():
            raise ValueError('Value cannot be blank')
        return v.strip()

class VehicleUpdate(CamelModel):
    name: Optional[str] = None
    registration_number: Optional[str] = None
