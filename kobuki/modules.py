"""LED, sound, digital output and battery definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

PIN_COUNT = 4


class LedNumber(IntEnum):
    """The LEDs, counted from left to right."""

    LED1 = 0
    LED2 = 1


class LedColour(IntEnum):
    """LED colours as bits of the general purpose output word."""

    BLACK = 0x00
    RED = 0x100
    GREEN = 0x200
    ORANGE = 0x300


class SoundSequence(IntEnum):
    """Built-in sound sequences."""

    ON = 0x0
    OFF = 0x1
    RECHARGE = 0x2
    BUTTON = 0x3
    ERROR = 0x4
    CLEANING_START = 0x5
    CLEANING_END = 0x6


def _four_false() -> list[bool]:
    return [False] * PIN_COUNT


@dataclass
class DigitalOutput:
    """Values for digital output pins 0-3; ``mask`` marks the pins to set."""

    values: list[bool] = field(default_factory=_four_false)
    mask: list[bool] = field(default_factory=_four_false)

    def __post_init__(self) -> None:
        if len(self.values) != PIN_COUNT or len(self.mask) != PIN_COUNT:
            raise ValueError(f"values and mask must hold {PIN_COUNT} entries")

    def set(self, pin: int, value: bool) -> None:
        """Set ``pin`` to ``value`` and mark it to be applied."""
        if not 0 <= pin < PIN_COUNT:
            raise IndexError(f"pin must be in range 0-{PIN_COUNT - 1}")
        self.values[pin] = bool(value)
        self.mask[pin] = True


class BatterySource(IntEnum):
    NONE = 0
    ADAPTER = 1
    DOCK = 2


class BatteryLevel(IntEnum):
    DANGEROUS = 0
    LOW = 1
    HEALTHY = 2
    MAXIMUM = 3


class BatteryState(IntEnum):
    DISCHARGING = 0
    CHARGED = 1
    CHARGING = 2