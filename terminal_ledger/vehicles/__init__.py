"""Fleet vehicles and their seat layouts"""

from .schemas import Seat, Vehicle, VehicleType, VehicleCreate, VehicleUpdate
from .layouts import HIGHROOF_LAYOUT, generate_bus_layout

__all__ = ["Seat", "Vehicle", "VehicleType", "VehicleCreate", "VehicleUpdate", "HIGHROOF_LAYOUT", "generate_bus_layout"]
