"""Pytest configuration and fixtures."""

import pytest

from prop_catalog.models.base import Address
from prop_catalog.models.catalog import GroupUnit, LeafUnit, Status


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def parcel() -> LeafUnit:
    """A free-standing parcel at (8,1): 500 sqm at 10 $/sqm."""
    return LeafUnit(6, Address(8, 1), Status.FOR_SALE, 500, 10)


@pytest.fixture
def building() -> GroupUnit:
    """Building (3,3) with one apartment and one split apartment.

    (3,3)
      (3,3,1)     100 sqm x 50 $      FOR_SALE
      (3,3,2)
        (3,3,2,1)  40 sqm x 25 $      SOLD
        (3,3,2,2)  60 sqm x 25 $      SOLD
    """
    root = GroupUnit(1, Address(3, 3))
    root.add(LeafUnit(2, Address(3, 3, 1), Status.FOR_SALE, 100, 50))
    split = GroupUnit(3, Address(3, 3, 2), Status.SOLD)
    split.add(LeafUnit(4, Address(3, 3, 2, 1), Status.SOLD, 40, 25))
    split.add(LeafUnit(5, Address(3, 3, 2, 2), Status.SOLD, 60, 25))
    root.add(split)
    return root


@pytest.fixture
def scenario_records() -> list[tuple]:
    """A main-address record followed by one of its apartments."""
    return [
        (8000, 45 * 8000, "FOR_SALE", "5 1"),
        (700, 30 * 700, "FOR_SALE", "5 1 1"),
    ]
