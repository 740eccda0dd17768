"""Pytest configuration and fixtures for testing."""

import json
import random
from datetime import datetime
from pathlib import Path

import pytest

from emulator.core.config import Settings
from emulator.schemas.coupon import Cpn, CpnOffer
from emulator.services.catalog_service import CouponCatalog
from emulator.services.delay_service import DelayEmulator


# Deterministic random source
@pytest.fixture
def rng() -> random.Random:
    """Create a seeded random generator."""
    return random.Random(1234)


# Fixed generation time
@pytest.fixture
def fixed_now() -> datetime:
    """Return a fixed naive local timestamp."""
    return datetime(2025, 6, 5, 12, 0, 0)


# Single-offer coupon fixture
@pytest.fixture
def coupon() -> Cpn:
    """Create the minimal coupon: one offer priced 10."""
    return Cpn(
        id=1,
        omni_id="100",
        use="use",
        conditions="conditions",
        partner_omni_id=201,
        partner_crm_id="partner-crm-id-value",
        offers=(CpnOffer(id=9, omni_id="9", price=10),),
    )


# Multi-offer coupon fixture
@pytest.fixture
def multi_offer_coupon() -> Cpn:
    """Create a coupon with two offers."""
    return Cpn(
        id=123456789012345,
        omni_id="123003789",
        use="test use",
        conditions="test condition",
        partner_omni_id=202,
        partner_crm_id="crm-202",
        offers=(
            CpnOffer(id=11, omni_id="111", price=25),
            CpnOffer(id=12, omni_id="222", price=50),
        ),
    )


@pytest.fixture
def catalog(coupon: Cpn) -> CouponCatalog:
    """Create a catalog holding the minimal coupon only."""
    return CouponCatalog([coupon])


@pytest.fixture
def zero_delay() -> DelayEmulator:
    """Create a delay emulator that never waits."""
    return DelayEmulator(0, 0)


@pytest.fixture
def catalog_file(tmp_path: Path, coupon: Cpn) -> Path:
    """Write the minimal coupon catalog to a JSON file."""
    path = tmp_path / "cpn-list.json"
    path.write_text(json.dumps([coupon.model_dump(mode="json")]), encoding="utf-8")
    return path


@pytest.fixture
def test_settings(catalog_file: Path) -> Settings:
    """Settings without delay pointing at the temporary catalog."""
    return Settings(DELAY_MIN_MS=0, DELAY_MAX_MS=0, CPN_CATALOG_PATH=str(catalog_file))
