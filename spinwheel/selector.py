"""Weighted prize selection over an ordered slot sequence.

Weights are percentages: a ``RANDOM_WIN`` population must sum to exactly 100.
A draw ``r`` in ``[0, 100)`` lands in the first slot whose cumulative weight
reaches it (``r <= C[i]``), so the cumulative array index is the display
index of the ordered sequence.
"""
from __future__ import annotations

import bisect
import functools
import hashlib
import logging
import math
import random
from typing import Callable, List, Optional, Sequence

from spinwheel.errors import (
    EmptySlotSet,
    InvalidConfiguration,
    NoWinningSlots,
    format_weight,
)
from spinwheel.ordering import order_slots
from spinwheel.schemas import SelectionResult, Slot, WheelMode

logger = logging.getLogger(__name__)

TOTAL_WEIGHT = 100

# Produces a float in [0, 1).
RandomSource = Callable[[], float]


def seeded_fraction(seed: str, algorithm: str = "sha256") -> float:
    """Map ``seed`` to a reproducible fraction in ``[0, 1)``.

    The first 4 bytes of the digest of the UTF-8 seed are read as an
    unsigned big-endian integer and divided by 2**32.
    """
    digest = hashlib.new(algorithm, seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "big", signed=False) / 2**32


def seeded_source(seed: str, algorithm: str = "sha256") -> RandomSource:
    return functools.partial(seeded_fraction, seed, algorithm)


def draw(random_source: Optional[RandomSource] = None) -> float:
    source = random_source or random.random
    return source() * TOTAL_WEIGHT


def cumulative_weights(weights: Sequence[float]) -> List[float]:
    out: List[float] = []
    running = 0.0
    for w in weights:
        running += w
        out.append(running)
    return out


def pick_index(cumulative: Sequence[float], r: float) -> int:
    """Smallest ``i`` with ``r <= cumulative[i]``.

    A draw past the last boundary (rounding in a renormalised population, or
    ``r == 100`` passed in directly) resolves to the last slot.
    """
    if not cumulative:
        raise EmptySlotSet()
    return min(bisect.bisect_left(cumulative, r), len(cumulative) - 1)


def validate_slots(slots: Sequence[Slot]) -> None:
    if not slots:
        raise EmptySlotSet()

    seen: set[str] = set()
    for s in slots:
        if not s.id or not s.id.strip():
            raise InvalidConfiguration(f"Slot {s.label!r} has a blank id")
        if s.id in seen:
            raise InvalidConfiguration(f'Duplicate slot id "{s.id}"')
        seen.add(s.id)
        if s.weight < 0 or s.weight > TOTAL_WEIGHT:
            raise InvalidConfiguration(
                f'Slot "{s.label or s.id}" has invalid weight: {format_weight(s.weight)}'
            )


def validate_weights(slots: Sequence[Slot]) -> float:
    total = math.fsum(s.weight for s in slots)
    if total != TOTAL_WEIGHT:
        raise InvalidConfiguration.bad_sum(total)
    return total


def _resolve_draw(r: Optional[float], random_source: Optional[RandomSource]) -> float:
    return draw(random_source) if r is None else float(r)


def select(
    ordered_slots: Sequence[Slot],
    random_source: Optional[RandomSource] = None,
    *,
    r: Optional[float] = None,
) -> SelectionResult:
    """Draw one slot from a population whose weights sum to exactly 100.

    ``ordered_slots`` must already be in canonical order; the returned index
    refers to that sequence. ``r`` overrides the random draw.
    """
    validate_slots(ordered_slots)
    validate_weights(ordered_slots)

    cumulative = cumulative_weights([s.weight for s in ordered_slots])
    value = _resolve_draw(r, random_source)
    index = pick_index(cumulative, value)

    logger.debug("Draw %.4f over %d slots -> index %d", value, len(ordered_slots), index)
    return SelectionResult(ordered_slots[index], index)


def select_winning(
    ordered_slots: Sequence[Slot],
    random_source: Optional[RandomSource] = None,
    *,
    r: Optional[float] = None,
) -> SelectionResult:
    """``ALL_WIN`` variant: draw among winning slots only.

    Winning weights are rescaled to sum to 100; the result index is looked up
    by id in ``ordered_slots``.
    """
    validate_slots(ordered_slots)

    winners = [s for s in ordered_slots if s.is_winning]
    if not winners:
        raise NoWinningSlots()

    winning_total = math.fsum(s.weight for s in winners)
    if winning_total <= 0:
        raise InvalidConfiguration(
            f"Winning slot weights must be positive, got {format_weight(winning_total)}",
            total=winning_total,
        )

    # Sums to 100 only up to rounding; pick_index tolerates that.
    normalized = [s.weight / winning_total * TOTAL_WEIGHT for s in winners]
    value = _resolve_draw(r, random_source)
    local = pick_index(cumulative_weights(normalized), value)
    chosen = winners[local]

    index = next(i for i, s in enumerate(ordered_slots) if s.id == chosen.id)
    logger.debug(
        "Winning draw %.4f over %d of %d slots -> local %d, index %d",
        value, len(winners), len(ordered_slots), local, index,
    )
    return SelectionResult(chosen, index)


def select_for_mode(
    mode: WheelMode,
    slots: Sequence[Slot],
    random_source: Optional[RandomSource] = None,
    *,
    seed: Optional[str] = None,
    algorithm: str = "sha256",
) -> SelectionResult:
    """Order ``slots`` canonically and run the selector ``mode`` asks for."""
    ordered = order_slots(slots)
    if seed is not None:
        random_source = seeded_source(seed, algorithm)

    if WheelMode(mode) is WheelMode.all_win:
        return select_winning(ordered, random_source)
    return select(ordered, random_source)
