"""Pytest fixtures for pay engine tests."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
import yaml

from balancebooks.core.config import ConfigManager
from balancebooks.data.models import Driver, FuelEntry, Load, Truck

FIXED_NOW = datetime(2024, 1, 8, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def config_manager(tmp_path, monkeypatch):
    """Config manager backed by a temporary config.yaml."""
    for var in ("BALANCEBOOKS_CONFIG_DIR", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)

    config = {
        "company": {
            "name": "Red River Hauling",
            "address": "12 Depot Rd, Tulsa, OK",
            "phone": "918-555-0142",
        },
        "pay_statements": {"id_prefix": "stmt"},
        "logging": {"level": "INFO", "format": "json"},
    }
    with open(tmp_path / "config.yaml", "w") as f:
        yaml.safe_dump(config, f)
    return ConfigManager(config_dir=tmp_path)


@pytest.fixture
def per_mile_driver():
    """Per-mile driver with a fuel advance and weekly insurance."""
    return Driver(
        id="DRV-1",
        first_name="Sam",
        last_name="Rivera",
        payment_type="per_mile",
        pay_rate=Decimal("0.55"),
        fuel_advance_rate=Decimal("50"),
        insurance_deduction=Decimal("700"),
    )


@pytest.fixture
def loads():
    """Two loads for DRV-1 and one for another driver."""
    return [
        Load(
            id="L-1",
            load_number="TX-4471",
            date="2024-01-02",
            stops=[{"location": "Tulsa, OK"}, {"location": "Dallas, TX"}],
            loaded_miles=500,
            deadhead_miles=50,
            rate=1200,
            driver_id="DRV-1",
            truck_id="T-1",
        ),
        Load(
            id="L-2",
            load_number="TX-4490",
            date="2024-01-04",
            origin="Dallas, TX",
            destination="Houston, TX",
            loaded_miles=240,
            deadhead_miles=10,
            rate=700,
            driver_id="DRV-1",
            truck_id="T-2",
        ),
        Load(
            id="L-3",
            load_number="OK-0021",
            loaded_miles=300,
            rate=900,
            driver_id="DRV-2",
            truck_id="T-1",
        ),
    ]


@pytest.fixture
def driver_loads(loads):
    """Loads assigned to DRV-1."""
    return [load for load in loads if load.driver_id == "DRV-1"]


@pytest.fixture
def fuel_entries():
    """One advanced purchase ($350) and one paid by the driver ($210)."""
    return [
        FuelEntry(
            gallons=100,
            price_per_gallon="3.50",
            driver_id="DRV-1",
            truck_id="T-1",
        ),
        FuelEntry(
            gallons=50,
            price_per_gallon=4,
            total_amount="210",
            is_fuel_advance=False,
            driver_id="DRV-1",
            truck_id="T-2",
        ),
    ]


@pytest.fixture
def truck():
    """Truck with a 5 MPG target."""
    return Truck(id="T-1", unit_number="101", target_mpg=5)
