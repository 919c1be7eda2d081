from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from spinwheel.config import settings
from spinwheel.schemas import Slot
from spinwheel.wheel_sets import get_wheels


def make_slot(id: str, weight: float = 25, position=0, is_winning: bool = False, label: str = "") -> Slot:
    return Slot(id=id, label=label or id.upper(), weight=weight, is_winning=is_winning, position=position)


@pytest.fixture
def four_slots():
    # Winning weights {30, 20} amid {30, 20, 25, 25}
    return [
        make_slot("coffee", 30, position=0, is_winning=True),
        make_slot("lose-a", 25, position=1),
        make_slot("discount", 20, position=2, is_winning=True),
        make_slot("lose-b", 25, position=3),
    ]


@pytest.fixture(autouse=True)
def _fresh_catalog():
    get_wheels.cache_clear()
    yield
    get_wheels.cache_clear()


@pytest.fixture
def seeded_spins(monkeypatch):
    monkeypatch.setattr(settings, "allow_seeded_spins", True)
    monkeypatch.setattr(settings, "internal_api_token", "")
    return settings


@pytest.fixture
def api():
    from spinwheel.main import app

    return TestClient(app)
