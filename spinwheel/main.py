from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Header, HTTPException

from spinwheel.config import settings
from spinwheel.errors import WheelError
from spinwheel.ordering import order_slots
from spinwheel.schemas import SlotsSpinIn, SpinIn, SpinOut, Wheel, WheelSummary
from spinwheel.spin import get_wheel, spin_once, spin_slots
from spinwheel.wheel_sets import get_wheels

logger = logging.getLogger(__name__)

app = FastAPI(title="spinwheel")


@app.on_event("startup")
def _startup():
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(levelname)s - [%(name)s] - %(message)s",
    )
    logger.info("Loaded %d wheels", len(get_wheels()))


def require_seed_access(seed: Optional[str], x_internal_token: Optional[str]) -> None:
    """Seeded draws are for tests only; refuse them unless explicitly enabled."""
    if seed is None:
        return
    if not settings.allow_seeded_spins:
        raise HTTPException(status_code=403, detail="Seeded spins are disabled")
    if settings.internal_api_token:
        if (x_internal_token or "") != settings.internal_api_token:
            raise HTTPException(status_code=403, detail="Forbidden")


def _wheel_error(e: WheelError) -> HTTPException:
    return HTTPException(status_code=400, detail={"error": e.code, "message": str(e)})


def _find_wheel(wheel_id: str) -> Wheel:
    try:
        return get_wheel(wheel_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Unknown wheel")


# ---------------- PUBLIC API ----------------

@app.get("/api/wheels")
def api_wheels():
    return {
        "items": [
            WheelSummary(id=w.id, title=w.title, mode=w.mode, slots=len(w.slots))
            for w in get_wheels().values()
        ]
    }


@app.get("/api/wheels/{wheel_id}", response_model=Wheel)
def api_wheel(wheel_id: str):
    wheel = _find_wheel(wheel_id)
    # Canonical order, so naive clients see the same sequence the selector used
    return wheel.model_copy(update={"slots": order_slots(wheel.slots)})


@app.post("/api/wheels/{wheel_id}/spin", response_model=SpinOut)
def api_wheel_spin(
    wheel_id: str,
    payload: Optional[SpinIn] = None,
    x_internal_token: Optional[str] = Header(default=None, alias="X-Internal-Token"),
):
    wheel = _find_wheel(wheel_id)
    seed = payload.seed if payload else None
    require_seed_access(seed, x_internal_token)

    try:
        return spin_once(wheel, seed=seed)
    except WheelError as e:
        logger.warning("Spin rejected for wheel %s: %s", wheel_id, e)
        raise _wheel_error(e)


@app.post("/api/spin", response_model=SpinOut)
def api_spin(
    payload: SlotsSpinIn,
    x_internal_token: Optional[str] = Header(default=None, alias="X-Internal-Token"),
):
    require_seed_access(payload.seed, x_internal_token)

    try:
        return spin_slots(payload.mode, payload.slots, seed=payload.seed)
    except WheelError as e:
        logger.warning("Spin rejected: %s", e)
        raise _wheel_error(e)
