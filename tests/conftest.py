"""Shared fixtures for the drink log tests."""

from datetime import date

import pytest

from app import DrinkTracker
from models import Record


@pytest.fixture
def data_dir(tmp_path):
    """A fresh, empty data directory."""
    return str(tmp_path / "data")


@pytest.fixture
def tracker(data_dir):
    """A tracker with no stored data, selected on 15 Jan 2026."""
    return DrinkTracker(data_dir=data_dir, today=date(2026, 1, 15))


@pytest.fixture
def make_record():
    """Build a Record without going through a tracker."""
    counter = {"n": 0}

    def _make(shop="50嵐", item="紅茶", price=30.0, day=date(2026, 1, 15), sweetness="半糖", ice="微冰"):
        counter["n"] += 1
        return Record(
            id=f"r{counter['n']}",
            shop=shop,
            item=item,
            price=price,
            sweetness=sweetness,
            ice=ice,
            date=day,
        )

    return _make
