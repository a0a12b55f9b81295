import uuid
from typing import List, Optional
from terminal_ledger.exceptions import NotFoundError, ValidationError
from terminal_ledger.routes.schemas import Route, RouteCreate, RouteUpdate
from terminal_ledger.storage.repository import Ledger
from terminal_ledger.vehicles.schemas import VehicleType

class RouteService:
    """Route table owned by the terminal. The booking ledger only reads fares from it."""

    def __init__(self, ledger: Ledger):
        self.ledger = ledger

    def list_routes(self) -> List[Route]:
        return list(self.ledger.state.routes)

    def get_route(self, route_id: str) -> Optional[Route]:
        for route in self.ledger.state.routes:
            if route.id == route_id:
                return route
        return None

    def require_route(self, route_id: str) -> Route:
        route = self.get_route(route_id)
        if not route:
            raise NotFoundError(f"Route {route_id} not found")
        return route

    def get_routes_by_origin(
        self,
        origin: str,
        vehicle_type: Optional[VehicleType] = None
    ) -> List[Route]:
        """Routes leaving ``origin``, optionally narrowed to one vehicle type"""
        routes = [route for route in self.ledger.state.routes if route.origin == origin]
        if vehicle_type is not None:
            routes = [route for route in routes if route.vehicle_type == vehicle_type]
        return routes

    def find_fare_route(self, origin: str, destination: str, vehicle_type: VehicleType) -> Route:
        """Route whose fare applies to a booking; unknown destinations are rejected"""
        for route in self.get_routes_by_origin(origin, vehicle_type):
            if route.destination == destination:
                return route
        raise ValidationError(
            f"Invalid destination selected: no {vehicle_type.value} route from {origin} to {destination}"
        )

    def add_route(self, request: RouteCreate) -> Route:
        route = Route(
            id=f"route-{uuid.uuid4().hex[:9]}",
            origin=self.ledger.origin,
            destination=request.destination,
            vehicle_type=request.vehicle_type,
            fare=request.fare
        )
        self.ledger.state.routes.append(route)
        self.ledger.save()
        return route

    def update_route(self, route_id: str, updates: RouteUpdate) -> Route:
        route = self.require_route(route_id)

        if updates.destination is not None:
            if not updates.destination.strip():
                raise ValidationError("Destination is required")
            route.destination = updates.destination.strip()
        if updates.vehicle_type is not None:
            route.vehicle_type = updates.vehicle_type
        if updates.fare is not None:
            route.fare = updates.fare

        self.ledger.save()
        return route

    def remove_route(self, route_id: str) -> None:
        route = self.require_route(route_id)
        self.ledger.state.routes = [r for r in self.ledger.state.routes if r.id != route.id]
        self.ledger.save()
