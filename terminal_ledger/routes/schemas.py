from pydantic import Field, validator
from typing import Optional
from terminal_ledger.schemas import CamelModel
from terminal_ledger.vehicles.schemas import VehicleType

class Route(CamelModel):
    """Fare table entry. Several routes may share a destination with different vehicle types."""
    id: str
    origin: str
    destination: str
    vehicle_type: VehicleType
    fare: int = Field(..., ge=0)

class RouteCreate(CamelModel):
    """Origin is not accepted here, it is always the terminal's city"""
    destination: str = Field(..., min_length=1)
    vehicle_type: VehicleType
    fare: int = Field(..., ge=0)

    @validator('destination')
    def strip_destination(cls, v):
        if not v.strip():
            raise ValueError('Destination is required')
        return v.strip()

class RouteUpdate(CamelModel):
    destination: Optional[str] = None
    vehicle_type: Optional[VehicleType] = None
    fare: Optional[int] = Field(None, ge=0)
