from __future__ import annotations

import enum
from typing import List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field


class WheelMode(str, enum.Enum):
    random_win = "RANDOM_WIN"
    all_win = "ALL_WIN"


# --- Core data ---

class Slot(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1)
    label: str = ""
    # 0..100, enforced by selector.validate_slots
    weight: float = 0
    is_winning: bool = Field(default=False, alias="isWinning")
    # Display-order hint only; upstream data may repeat it.
    position: Optional[int] = None
    color: Optional[str] = None


class Wheel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, max_length=50)
    title: str = "Wheel"
    mode: WheelMode = WheelMode.random_win
    slots: List[Slot] = Field(default_factory=list)


class SelectionResult(NamedTuple):
    slot: Slot
    index: int


# --- API inputs ---

class SpinIn(BaseModel):
    # Test-only: makes the draw reproducible.
    seed: Optional[str] = Field(default=None, min_length=1, max_length=200)


class SlotsSpinIn(SpinIn):
    mode: WheelMode = WheelMode.random_win
    slots: List[Slot] = Field(default_factory=list)


# --- API outputs ---

class SpinOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    slot_id: str = Field(..., alias="slotId")
    # Advisory: consumers in another process re-derive it from slot_id.
    index: int = Field(..., ge=0)
    label: str = ""
    is_winning: bool = Field(default=False, alias="isWinning")
    mode: WheelMode = WheelMode.random_win
    # Claim code, only on winning spins
    pin: Optional[str] = None


class WheelSummary(BaseModel):
    id: str
    title: str
    mode: WheelMode
    slots: int
