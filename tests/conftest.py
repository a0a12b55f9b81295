"""
Shared fixtures: an in-memory ledger with one highroof van, one bus and a
boarding voucher for each, plus an API client wired to that ledger.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from terminal_ledger.config import Settings
from terminal_ledger.dependencies import get_ledger
from terminal_ledger.storage.repository import Ledger
from terminal_ledger.storage.store import InMemoryStateStore
from terminal_ledger.vehicles.schemas import VehicleCreate, VehicleType
from terminal_ledger.vehicles.service import VehicleService
from terminal_ledger.vouchers.schemas import VoucherCreate
from terminal_ledger.vouchers.service import VoucherService


@pytest.fixture
def test_settings():
    return Settings(DEFAULT_ORIGIN="Multan", DATABASE_URL="sqlite://")


@pytest.fixture
def store():
    return InMemoryStateStore()


@pytest.fixture
def ledger(store, test_settings):
    """Fresh ledger with default state (default Multan routes)"""
    ledger = Ledger(store, test_settings)
    ledger.load()
    return ledger


@pytest.fixture
def highroof(ledger):
    return VehicleService(ledger).add_vehicle(VehicleCreate(
        name="Highroof 1",
        registration_number="abc-123",
        type=VehicleType.HIGHROOF
    ))


@pytest.fixture
def bus(ledger):
    return VehicleService(ledger).add_vehicle(VehicleCreate(
        name="Bus 1",
        registration_number="LHR-9090",
        type=VehicleType.BUS,
        rows=12,
        cols=4
    ))


@pytest.fixture
def voucher(ledger, highroof):
    """Boarding voucher on the highroof van"""
    return VoucherService(ledger).create_voucher(VoucherCreate(
        vehicle_id=highroof.id,
        date=date.today(),
        departure_time="14:30",
        driver_name="Aslam",
        driver_mobile="0300-1234567"
    ))


@pytest.fixture
def client(ledger):
    from terminal_ledger.main import app

    app.dependency_overrides[get_ledger] = lambda: ledger
    yield TestClient(app)
    app.dependency_overrides.clear()
