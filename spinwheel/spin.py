from __future__ import annotations

import logging
from typing import Iterable, Optional

from spinwheel.config import settings
from spinwheel.ordering import describe_order, validate_slot_positions
from spinwheel.pin import generate_pin
from spinwheel.schemas import Slot, SpinOut, Wheel, WheelMode
from spinwheel.selector import RandomSource, select_for_mode
from spinwheel.wheel_sets import get_wheels

logger = logging.getLogger(__name__)


def get_wheel(wheel_id: str) -> Wheel:
    wheels = get_wheels()
    if wheel_id not in wheels:
        raise KeyError(wheel_id)
    return wheels[wheel_id]


def spin_slots(
    mode: WheelMode,
    slots: Iterable[Slot],
    *,
    seed: Optional[str] = None,
    random_source: Optional[RandomSource] = None,
) -> SpinOut:
    slots = list(slots)
    mode = WheelMode(mode)

    report = validate_slot_positions(slots)
    if slots and not report.valid:
        # Ordering stays deterministic through the id tiebreak; this is upstream data noise.
        logger.warning("Slot positions need attention: %s", "; ".join(report.errors))
    describe_order(slots, label=f"{mode.value} spin")

    result = select_for_mode(
        mode,
        slots,
        random_source,
        seed=seed,
        algorithm=settings.seed_hash_algorithm,
    )
    logger.info(
        "Spin %s: slot %s (%r) at index %d%s",
        mode.value, result.slot.id, result.slot.label, result.index,
        " [seeded]" if seed is not None else "",
    )
    return SpinOut(
        slot_id=result.slot.id,
        index=result.index,
        label=result.slot.label,
        is_winning=result.slot.is_winning,
        mode=mode,
        pin=generate_pin() if result.slot.is_winning else None,
    )


def spin_once(
    wheel: Wheel,
    *,
    seed: Optional[str] = None,
    random_source: Optional[RandomSource] = None,
) -> SpinOut:
    logger.debug("Spinning wheel %s (%s)", wheel.id, wheel.title)
    return spin_slots(wheel.mode, wheel.slots, seed=seed, random_source=random_source)
