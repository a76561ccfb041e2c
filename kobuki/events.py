"""Events raised when the robot's sensor state changes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

INPUT_PIN_COUNT = 4


@dataclass(frozen=True)
class ButtonEvent:
    """A button was pressed or released."""

    class State(IntEnum):
        RELEASED = 0
        PRESSED = 1

    class Button(IntEnum):
        BUTTON0 = 0
        BUTTON1 = 1
        BUTTON2 = 2

    state: ButtonEvent.State
    button: ButtonEvent.Button


@dataclass(frozen=True)
class BumperEvent:
    """A bumper was pressed or released."""

    class State(IntEnum):
        RELEASED = 0
        PRESSED = 1

    class Bumper(IntEnum):
        LEFT = 0
        CENTER = 1
        RIGHT = 2

    state: BumperEvent.State
    bumper: BumperEvent.Bumper


@dataclass(frozen=True)
class CliffEvent:
    """A cliff sensor went over or came back from an edge."""

    class State(IntEnum):
        FLOOR = 0
        CLIFF = 1

    class Sensor(IntEnum):
        LEFT = 0
        CENTER = 1
        RIGHT = 2

    state: CliffEvent.State
    sensor: CliffEvent.Sensor
    bottom: int = 0


@dataclass(frozen=True)
class WheelEvent:
    """A wheel was raised or dropped."""

    class State(IntEnum):
        RAISED = 0
        DROPPED = 1

    class Wheel(IntEnum):
        LEFT = 0
        RIGHT = 1

    state: WheelEvent.State
    wheel: WheelEvent.Wheel


@dataclass(frozen=True)
class PowerEvent:
    """A change of charging source or battery condition."""

    class Event(IntEnum):
        UNPLUGGED = 0
        PLUGGED_TO_ADAPTER = 1
        PLUGGED_TO_DOCKBASE = 2
        CHARGE_COMPLETED = 3
        BATTERY_LOW = 4
        BATTERY_CRITICAL = 5

    event: PowerEvent.Event


def _four_false() -> tuple[bool, ...]:
    return (False,) * INPUT_PIN_COUNT


@dataclass(frozen=True)
class InputEvent:
    """The digital input pins 0-3, on or off."""

    values: tuple[bool, ...] = field(default_factory=_four_false)

    def __post_init__(self) -> None:
        values = tuple(bool(value) for value in self.values)
        if len(values) != INPUT_PIN_COUNT:
            raise ValueError(f"values must hold {INPUT_PIN_COUNT} entries")
        object.__setattr__(self, "values", values)


@dataclass(frozen=True)
class RobotEvent:
    """The robot went online or offline; unknown at startup."""

    class State(IntEnum):
        OFFLINE = 0
        ONLINE = 1
        UNKNOWN = 2

    state: RobotEvent.State = State.UNKNOWN