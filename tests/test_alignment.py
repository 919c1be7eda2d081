from __future__ import annotations

import logging
import random

import pytest

from spinwheel.alignment import align, resolve_index
from spinwheel.errors import SlotNotFound
from spinwheel.ordering import order_slots
from spinwheel.schemas import SpinOut, WheelMode
from spinwheel.spin import spin_slots

from conftest import make_slot


def _outcome(slot_id: str, index: int) -> SpinOut:
    return SpinOut(slot_id=slot_id, index=index, label=slot_id.upper())


def test_resolve_index_by_id(four_slots) -> None:
    ordered = order_slots(four_slots)
    assert resolve_index(ordered, "discount") == 2
    with pytest.raises(SlotNotFound) as exc:
        resolve_index(ordered, "missing")
    assert exc.value.slot_id == "missing"


def test_align_ignores_a_wrong_index_hint(four_slots, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="spinwheel.alignment"):
        landing = align(four_slots, _outcome("discount", 0))
    assert landing.index == 2
    assert landing.slot.id == "discount"
    assert not landing.degraded
    assert "disagrees" in caplog.text


def test_align_falls_back_to_hint_when_id_is_missing(four_slots, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="spinwheel.alignment"):
        landing = align(four_slots, _outcome("gone", 1))
    assert landing.degraded
    assert landing.index == 1
    assert landing.slot.id == "lose-a"
    assert "falling back" in caplog.text


def test_align_strict_or_unusable_hint_raises(four_slots) -> None:
    with pytest.raises(SlotNotFound):
        align(four_slots, _outcome("gone", 1), strict=True)
    with pytest.raises(SlotNotFound):
        align(four_slots, _outcome("gone", 9))


def test_duplicate_positions_align_across_independent_views() -> None:
    slots = [
        make_slot("lot-4", 25, position=2),
        make_slot("lot-1", 25, position=0),
        make_slot("lot-3", 25, position=2),
        make_slot("lot-2", 25, position=2),
    ]
    outcome = spin_slots(WheelMode.random_win, slots, random_source=lambda: 0.6)
    landing = align(list(reversed(slots)), outcome)
    assert landing.slot.id == outcome.slot_id
    assert landing.index == outcome.index


@pytest.mark.parametrize("mode", [WheelMode.random_win, WheelMode.all_win])
def test_selector_and_presenter_agree_over_many_spins(mode) -> None:
    rng = random.Random(1234)
    slots = [
        make_slot(f"slot-{i}", w, position=p, is_winning=i % 2 == 0)
        for i, (w, p) in enumerate([(10, 0), (15, 1), (5, 1), (20, 1), (25, 3), (25, 2)])
    ]
    for _ in range(10_000):
        server_view = rng.sample(slots, len(slots))
        client_view = rng.sample(slots, len(slots))
        outcome = spin_slots(mode, server_view, random_source=rng.random)
        landing = align(client_view, outcome)
        ordered_ids = [s.id for s in order_slots(client_view)]
        assert not landing.degraded
        assert landing.slot.id == outcome.slot_id
        assert landing.index == ordered_ids.index(outcome.slot_id)
        assert landing.index == outcome.index
