from __future__ import annotations

from typing import Optional


def format_weight(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


class WheelError(ValueError):
    """Base class for caller-input failures of a selection call.

    These are deterministic: the same input fails the same way, so nothing
    in this package retries them.
    """

    code = "wheel_error"


class EmptySlotSet(WheelError):
    code = "empty_slot_set"

    def __init__(self, message: str = "At least one slot is required") -> None:
        super().__init__(message)


class InvalidConfiguration(WheelError):
    code = "invalid_configuration"

    def __init__(self, message: str, total: Optional[float] = None) -> None:
        super().__init__(message)
        self.total = total

    @classmethod
    def bad_sum(cls, total: float) -> "InvalidConfiguration":
        return cls(f"Slot weights must sum to 100, got {format_weight(total)}", total=total)


class NoWinningSlots(WheelError):
    code = "no_winning_slots"

    def __init__(self, message: str = "No winning slots available in ALL_WIN mode") -> None:
        super().__init__(message)


class SlotNotFound(WheelError):
    code = "slot_not_found"

    def __init__(self, slot_id: str) -> None:
        super().__init__(f'Slot with ID "{slot_id}" not found')
        self.slot_id = slot_id
