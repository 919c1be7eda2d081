"""Canonical slot ordering shared by the selecting and presenting sides.

Both sides must produce the same sequence for the same logical slot set, so
the key is a pure function of the slot: ``position`` first, ``id`` second.
Ids compare by code point (the same order as their UTF-8 bytes), never by
locale.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from spinwheel.schemas import Slot

logger = logging.getLogger(__name__)

# Slots without a position go after every positioned slot.
UNSET_POSITION = 999


def slot_sort_key(slot: Slot) -> Tuple[int, str]:
    position = UNSET_POSITION if slot.position is None else slot.position
    return (position, slot.id)


def order_slots(slots: Iterable[Slot]) -> List[Slot]:
    """Return a new list of ``slots`` in canonical display order.

    The input is never mutated. With unique ids no two slots compare equal,
    so the result does not depend on the order the slots arrived in.
    """
    return sorted(slots, key=slot_sort_key)


@dataclass
class PositionReport:
    valid: bool
    errors: List[str] = field(default_factory=list)


def validate_slot_positions(slots: List[Slot]) -> PositionReport:
    errors: List[str] = []
    if not slots:
        errors.append("No slots provided")
        return PositionReport(valid=False, errors=errors)

    positions = [s.position for s in slots if s.position is not None]
    seen: set[int] = set()
    duplicates: List[int] = []
    for p in positions:
        if p in seen and p not in duplicates:
            duplicates.append(p)
        seen.add(p)
    if duplicates:
        errors.append(f"Duplicate positions found: {', '.join(str(p) for p in duplicates)}")

    negative = [p for p in positions if p < 0]
    if negative:
        errors.append(f"Negative positions found: {', '.join(str(p) for p in negative)}")

    return PositionReport(valid=not errors, errors=errors)


def describe_order(slots: List[Slot], label: str = "Slots") -> List[str]:
    lines = [
        f"[{i}] pos={s.position} id={s.id} label={s.label!r}"
        for i, s in enumerate(order_slots(slots))
    ]
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s ordering:\n  %s", label, "\n  ".join(lines))
    return lines
