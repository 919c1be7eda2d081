"""Prize claim PINs handed out on winning spins."""
from __future__ import annotations

import hmac
import re
import secrets

PIN_MIN = 10_000_000
PIN_MAX = 99_999_999

_PIN_RE = re.compile(r"[0-9]{8}")


def generate_pin() -> str:
    return str(PIN_MIN + secrets.randbelow(PIN_MAX - PIN_MIN + 1))


def validate_pin(pin: object) -> bool:
    return isinstance(pin, str) and _PIN_RE.fullmatch(pin) is not None


def verify_pin(given: str, expected: str) -> bool:
    if not validate_pin(given) or not validate_pin(expected):
        return False
    return hmac.compare_digest(given, expected)
