"""
Route & Fare Table Module

Routes pair the terminal's city with a destination and vehicle type and
carry the per-seat fare used when booking.
"""

from .schemas import Route, RouteCreate, RouteUpdate
from .defaults import default_routes

__all__ = ["Route", "RouteCreate", "RouteUpdate", "default_routes"]
