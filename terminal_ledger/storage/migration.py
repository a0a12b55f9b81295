"""
Migration adapter for persisted ledger state.

Structural changes to vehicles or vouchers are not migrated: a blob showing
an older schema is discarded and replaced with defaults. Only the move from
flat booked seats to tickets is migrated in place.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as SchemaValidationError

from terminal_ledger.bookings.schemas import BookedSeat
from terminal_ledger.bookings.ticket_mapper import migrate_booked_seats_to_tickets
from terminal_ledger.routes.defaults import default_routes
from terminal_ledger.storage.schemas import LedgerState, RestoreResult

logger = logging.getLogger(__name__)

LEGACY_SEAT_KEYS = ("type", "column")
LEGACY_VOUCHER_KEYS = ("destination", "fare")


def default_state(origin: str = "Multan") -> LedgerState:
    return LedgerState(vehicles=[], vouchers=[], routes=default_routes(origin))


def _has_legacy_seats(vehicles: List[Any]) -> bool:
    for vehicle in vehicles:
        if not isinstance(vehicle, dict):
            continue
        for seat in vehicle.get("seats") or []:
            if not isinstance(seat, dict):
                continue
            if isinstance(seat.get("id"), str):
                return True
            if any(key in seat for key in LEGACY_SEAT_KEYS):
                return True
    return False


def _has_legacy_vouchers(vouchers: List[Any]) -> bool:
    return any(
        isinstance(voucher, dict) and any(key in voucher for key in LEGACY_VOUCHER_KEYS)
        for voucher in vouchers
    )


def has_legacy_structure(raw: Dict[str, Any]) -> bool:
    """True for string seat ids, ``type``/``column`` seat keys, or per-voucher destination/fare"""
    return _has_legacy_seats(raw.get("vehicles") or []) or _has_legacy_vouchers(raw.get("vouchers") or [])


def needs_ticket_migration(voucher: Dict[str, Any]) -> bool:
    return (
        isinstance(voucher, dict)
        and not voucher.get("tickets")
        and len(voucher.get("bookedSeats") or []) > 0
    )


def migrate_voucher_tickets(vouchers: List[Dict[str, Any]]) -> int:
    """Attach tickets rebuilt from ``bookedSeats`` to vouchers that lack them.

    Idempotent: migrated vouchers carry ``tickets`` and are skipped on the
    next pass.
    """
    migrated = 0
    for voucher in vouchers:
        if not needs_ticket_migration(voucher):
            continue
        booked_seats = [BookedSeat.model_validate(seat) for seat in voucher["bookedSeats"]]
        tickets = migrate_booked_seats_to_tickets(booked_seats, voucher["id"])
        voucher["tickets"] = [ticket.model_dump(by_alias=True, mode="json") for ticket in tickets]
        migrated += 1
    return migrated


def restore_state(raw_json: Optional[str], origin: str = "Multan") -> RestoreResult:
    """Turn a persisted blob into ledger state, falling back to defaults"""
    if not raw_json:
        return RestoreResult(state=default_state(origin), source="defaults")

    try:
        parsed = json.loads(raw_json)
    except ValueError as e:
        logger.error("Failed to parse saved booking state, using defaults: %s", e)
        return RestoreResult(state=default_state(origin), source="defaults")

    if not (
        isinstance(parsed, dict)
        and isinstance(parsed.get("vehicles"), list)
        and isinstance(parsed.get("vouchers"), list)
    ):
        logger.error("Saved booking state has no vehicles/vouchers lists, using defaults")
        return RestoreResult(state=default_state(origin), source="defaults")

    if has_legacy_structure(parsed):
        logger.warning("Detected old data structure. Discarding saved state and using defaults.")
        return RestoreResult(state=default_state(origin), discarded=True, source="defaults")

    # Older blobs predate the route table
    if not isinstance(parsed.get("routes"), list):
        logger.info("Saved state has no routes, substituting default routes")
        parsed["routes"] = [route.model_dump(by_alias=True, mode="json") for route in default_routes(origin)]

    try:
        migrated = migrate_voucher_tickets(parsed["vouchers"])
        if migrated:
            logger.info("Migrated %d voucher(s) to ticket format", migrated)
        state = LedgerState.model_validate(parsed)
    except (SchemaValidationError, KeyError, TypeError) as e:
        logger.error("Saved booking state failed validation, using defaults: %s", e)
        return RestoreResult(state=default_state(origin), source="defaults")

    return RestoreResult(state=state, migrated=migrated, source="saved")
