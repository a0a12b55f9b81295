"""Seat layout presets for the supported vehicle types"""

from typing import List
from terminal_ledger.vehicles.schemas import Seat, VehicleType


def _seat(seat_id: int, row: int, col: int, is_folding: bool = False, is_driver: bool = False) -> Seat:
    return Seat(id=seat_id, row=row, col=col, is_folding=is_folding, is_driver=is_driver)


# Highroof van: driver seat 0, folding seats in the middle of rows 2 and 3
HIGHROOF_LAYOUT: List[Seat] = [
    # Row 0 - Driver
    _seat(0, 0, 0, is_driver=True),
    _seat(1, 0, 2),
    _seat(2, 0, 3),
    # Row 1
    _seat(3, 1, 0),
    _seat(4, 1, 1),
    _seat(5, 1, 2),
    _seat(6, 1, 3),
    # Row 2
    _seat(7, 2, 0),
    _seat(8, 2, 1, is_folding=True),
    _seat(9, 2, 2),
    _seat(10, 2, 3),
    # Row 3
    _seat(11, 3, 0),
    _seat(12, 3, 1, is_folding=True),
    _seat(13, 3, 2),
    _seat(14, 3, 3),
    # Row 4 (last row - full)
    _seat(15, 4, 0),
    _seat(16, 4, 1),
    _seat(17, 4, 2),
    _seat(18, 4, 3),
]


def generate_bus_layout(rows: int = 12, cols: int = 4) -> List[Seat]:
    """Grid layout numbered left to right, front to back, starting at 1"""
    seats = []
    seat_id = 1
    for row in range(rows):
        for col in range(cols):
            seats.append(_seat(seat_id, row, col))
            seat_id += 1
    return seats


def build_layout(vehicle_type: VehicleType, rows: int = 12, cols: int = 4) -> List[Seat]:
    if vehicle_type == VehicleType.HIGHROOF:
        return [seat.model_copy() for seat in HIGHROOF_LAYOUT]
    return generate_bus_layout(rows, cols)


def count_bookable_seats(seats: List[Seat]) -> int:
    return sum(1 for seat in seats if not seat.is_driver)
