from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List
from terminal_ledger.dependencies import get_ledger
from terminal_ledger.exceptions import LedgerError, to_http_exception
from terminal_ledger.storage.repository import Ledger
from terminal_ledger.vehicles.layouts import build_layout
from terminal_ledger.vehicles.schemas import Seat, Vehicle, VehicleCreate, VehicleType, VehicleUpdate
from terminal_ledger.vehicles.service import VehicleService

router = APIRouter()

@router.get("/", response_model=List[Vehicle])
def list_vehicles(ledger: Ledger = Depends(get_ledger)):
    """List all vehicles in the fleet"""
    return VehicleService(ledger).list_vehicles()

@router.get("/layouts/{vehicle_type}", response_model=List[Seat])
def preview_layout(
    vehicle_type: VehicleType,
    rows: int = Query(12, ge=1, le=20, description="Bus rows"),
    cols: int = Query(4, ge=1, le=6, description="Bus columns")
):
    """Preview the seat layout a new vehicle of this type would get"""
    return build_layout(vehicle_type, rows, cols)

@router.post("/", response_model=Vehicle, status_code=status.HTTP_201_CREATED)
def add_vehicle(request: VehicleCreate, ledger: Ledger = Depends(get_ledger)):
    """Add a vehicle with the preset layout for its type"""
    return VehicleService(ledger).add_vehicle(request)

@router.get("/{vehicle_id}", response_model=Vehicle)
def get_vehicle(vehicle_id: str, ledger: Ledger = Depends(get_ledger)):
    vehicle = VehicleService(ledger).get_vehicle(vehicle_id)
    if not vehicle:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Vehicle not found"
        )
    return vehicle

@router.patch("/{vehicle_id}", response_model=Vehicle)
def update_vehicle(vehicle_id: str, updates: VehicleUpdate, ledger: Ledger = Depends(get_ledger)):
    try:
        return VehicleService(ledger).update_vehicle(vehicle_id, updates)
    except LedgerError as e:
        raise to_http_exception(e)

@router.delete("/{vehicle_id}")
def remove_vehicle(vehicle_id: str, ledger: Ledger = Depends(get_ledger)):
    try:
        VehicleService(ledger).remove_vehicle(vehicle_id)
    except LedgerError as e:
        raise to_http_exception(e)
    return {"message": "Vehicle removed successfully"}
