from __future__ import annotations

from typing import Any, Optional

import httpx

from spinwheel.alignment import Landing, align
from spinwheel.config import settings
from spinwheel.schemas import SpinOut, Wheel


class WheelClient:
    """Presenting side of a spin.

    Talks to the API over HTTP and decides where the wheel lands from its own
    copy of the slots; the index in the spin response is only a hint.
    """

    def __init__(self, base_url: str, *, http: Optional[httpx.Client] = None, timeout: float = 20) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = http or httpx.Client(timeout=timeout)
        self._owns_http = http is None

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "WheelClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def _headers(self) -> dict[str, str]:
        headers = {}
        if getattr(settings, "internal_api_token", ""):
            headers["X-Internal-Token"] = settings.internal_api_token
        return headers

    def fetch_wheel(self, wheel_id: str) -> Wheel:
        r = self._http.get(f"{self.base_url}/api/wheels/{wheel_id}")
        r.raise_for_status()
        return Wheel.model_validate(r.json())

    def spin(self, wheel_id: str, seed: Optional[str] = None) -> SpinOut:
        body = {"seed": seed} if seed is not None else {}
        r = self._http.post(
            f"{self.base_url}/api/wheels/{wheel_id}/spin",
            json=body,
            headers=self._headers(),
        )
        r.raise_for_status()
        return SpinOut.model_validate(r.json())

    def play(self, wheel_id: str, seed: Optional[str] = None) -> Landing:
        outcome = self.spin(wheel_id, seed=seed)
        wheel = self.fetch_wheel(wheel_id)
        return align(wheel.slots, outcome)
