from typing import List
from terminal_ledger.routes.schemas import Route
from terminal_ledger.vehicles.schemas import VehicleType

# Fare varies by destination AND vehicle type
_DEFAULT_FARES = [
    ("route-1", "Lahore", VehicleType.HIGHROOF, 1500),
    ("route-2", "Faisalabad", VehicleType.HIGHROOF, 1200),
    ("route-3", "Islamabad", VehicleType.HIGHROOF, 2500),
    ("route-4", "Lahore", VehicleType.BUS, 1800),
    ("route-5", "Faisalabad", VehicleType.BUS, 1500),
    ("route-6", "Islamabad", VehicleType.BUS, 3000),
]

def default_routes(origin: str = "Multan") -> List[Route]:
    return [
        Route(id=route_id, origin=origin, destination=destination, vehicle_type=vehicle_type, fare=fare)
        for route_id, destination, vehicle_type, fare in _DEFAULT_FARES
    ]
