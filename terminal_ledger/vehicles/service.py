import uuid
from typing import List, Optional
from terminal_ledger.exceptions import NotFoundError
from terminal_ledger.storage.repository import Ledger
from terminal_ledger.vehicles.layouts import build_layout, count_bookable_seats
from terminal_ledger.vehicles.schemas import Vehicle, VehicleCreate, VehicleUpdate

class VehicleService:
    """Fleet administration. Booking operations never mutate vehicles."""

    def __init__(self, ledger: Ledger):
        self.ledger = ledger

    def list_vehicles(self) -> List[Vehicle]:
        return list(self.ledger.state.vehicles)

    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        for vehicle in self.ledger.state.vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None

    def require_vehicle(self, vehicle_id: str) -> Vehicle:
        vehicle = self.get_vehicle(vehicle_id)
        if not vehicle:
            raise NotFoundError(f"Vehicle {vehicle_id} not found")
        return vehicle

    def add_vehicle(self, request: VehicleCreate) -> Vehicle:
        seats = build_layout(request.type, request.rows, request.cols)
        vehicle = Vehicle(
            id=f"vehicle-{uuid.uuid4().hex[:12]}",
            name=request.name,
            registration_number=request.registration_number.upper(),
            type=request.type,
            seats=seats,
            total_seats=count_bookable_seats(seats)
        )
        self.ledger.state.vehicles.append(vehicle)
        self.ledger.save()
        return vehicle

    def update_vehicle(self, vehicle_id: str, updates: VehicleUpdate) -> Vehicle:
        vehicle = self.require_vehicle(vehicle_id)

        if updates.name is not None and updates.name.strip():
            vehicle.name = updates.name.strip()
        if updates.registration_number is not None and updates.registration_number.strip():
            vehicle.registration_number = updates.registration_number.strip().upper()

        self.ledger.save()
        return vehicle

    def remove_vehicle(self, vehicle_id: str) -> None:
        vehicle = self.require_vehicle(vehicle_id)
        self.ledger.state.vehicles = [v for v in self.ledger.state.vehicles if v.id != vehicle.id]
        self.ledger.save()
