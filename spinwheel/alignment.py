"""Resolving a reported spin outcome against the presenter's own slot view.

The selecting side reports the winning slot id and an index hint. The
presenting side orders its own copy of the slots and looks the id up; the
hint is only used when the id cannot be found, and then the landing is
flagged as degraded.
"""
from __future__ import annotations

import logging
from typing import Iterable, NamedTuple, Sequence

from spinwheel.errors import SlotNotFound
from spinwheel.ordering import order_slots
from spinwheel.schemas import Slot, SpinOut

logger = logging.getLogger(__name__)


class Landing(NamedTuple):
    slot: Slot
    index: int
    degraded: bool = False


def resolve_index(ordered_slots: Sequence[Slot], slot_id: str) -> int:
    for i, s in enumerate(ordered_slots):
        if s.id == slot_id:
            return i
    raise SlotNotFound(slot_id)


def align(slots: Iterable[Slot], outcome: SpinOut, *, strict: bool = False) -> Landing:
    ordered = order_slots(slots)
    try:
        index = resolve_index(ordered, outcome.slot_id)
    except SlotNotFound:
        if strict or not 0 <= outcome.index < len(ordered):
            raise
        logger.warning(
            "Slot %s not in local view of %d slots; falling back to reported index %d",
            outcome.slot_id, len(ordered), outcome.index,
        )
        return Landing(ordered[outcome.index], outcome.index, degraded=True)

    if index != outcome.index:
        logger.warning(
            "Index hint %d for slot %s disagrees with local index %d; using local index",
            outcome.index, outcome.slot_id, index,
        )
    return Landing(ordered[index], index)
