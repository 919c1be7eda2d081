from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from spinwheel.config import settings
from spinwheel.schemas import Wheel, WheelMode
from spinwheel.selector import validate_slots

# Packaged catalog used when WHEELS_FILE is not set
DEFAULT_WHEELS_FILE = Path(__file__).resolve().parent / "data" / "wheels.json"


def _norm_slot(s: dict[str, Any], i: int) -> dict[str, Any]:
    position = s.get("position")
    return {
        "id": str(s.get("id") or ""),
        "label": str(s.get("label") or s.get("id") or f"Slot {i + 1}"),
        "weight": float(s.get("weight") or 0),
        "isWinning": s.get("isWinning", s.get("is_winning")) or False,
        "position": None if position is None else int(position),
        "color": s.get("color") or None,
    }


def _norm_wheel(w: dict[str, Any]) -> dict[str, Any]:
    slots = [_norm_slot(s, i) for i, s in enumerate(w.get("slots") or [])]
    return {
        "id": str(w.get("id") or "default"),
        "title": str(w.get("title") or w.get("id") or "Wheel"),
        "mode": str(w.get("mode") or WheelMode.random_win.value).upper(),
        "slots": slots,
    }


def load_wheels(path: Optional[str | Path] = None) -> Dict[str, Wheel]:
    data_file = Path(path or settings.wheels_file or DEFAULT_WHEELS_FILE)
    with open(data_file, "r", encoding="utf-8") as f:
        raw = json.load(f)

    out: Dict[str, Wheel] = {}
    for item in raw or []:
        wheel = Wheel.model_validate(_norm_wheel(item))
        validate_slots(wheel.slots)
        out[wheel.id] = wheel
    return out


@lru_cache(maxsize=1)
def get_wheels() -> Dict[str, Wheel]:
    return load_wheels()


def reload_wheels() -> Dict[str, Wheel]:
    get_wheels.cache_clear()
    return get_wheels()
