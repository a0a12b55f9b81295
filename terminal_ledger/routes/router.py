from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional
from terminal_ledger.dependencies import get_ledger
from terminal_ledger.exceptions import LedgerError, to_http_exception
from terminal_ledger.routes.schemas import Route, RouteCreate, RouteUpdate
from terminal_ledger.routes.service import RouteService
from terminal_ledger.storage.repository import Ledger
from terminal_ledger.vehicles.schemas import VehicleType

router = APIRouter()

@router.get("/", response_model=List[Route])
def list_routes(
    origin: Optional[str] = Query(None, description="Filter by origin city"),
    vehicle_type: Optional[VehicleType] = Query(None, description="Filter by vehicle type"),
    ledger: Ledger = Depends(get_ledger)
):
    """List routes, optionally filtered by origin and vehicle type"""
    service = RouteService(ledger)
    if origin is None and vehicle_type is None:
        return service.list_routes()
    return service.get_routes_by_origin(origin or ledger.origin, vehicle_type)

@router.post("/", response_model=Route, status_code=status.HTTP_201_CREATED)
def add_route(request: RouteCreate, ledger: Ledger = Depends(get_ledger)):
    """Add a route departing from the terminal's city"""
    return RouteService(ledger).add_route(request)

@router.get("/{route_id}", response_model=Route)
def get_route(route_id: str, ledger: Ledger = Depends(get_ledger)):
    route = RouteService(ledger).get_route(route_id)
    if not route:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Route not found"
        )
    return route

@router.patch("/{route_id}", response_model=Route)
def update_route(route_id: str, updates: RouteUpdate, ledger: Ledger = Depends(get_ledger)):
    try:
        return RouteService(ledger).update_route(route_id, updates)
    except LedgerError as e:
        raise to_http_exception(e)

@router.delete("/{route_id}")
def remove_route(route_id: str, ledger: Ledger = Depends(get_ledger)):
    try:
        RouteService(ledger).remove_route(route_id)
    except LedgerError as e:
        raise to_http_exception(e)
    return {"message": "Route removed successfully"}
