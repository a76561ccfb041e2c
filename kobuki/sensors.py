"""Streamed sensor payloads: core sensors, cliff, current, dock IR, inertia, GPIO and gyro."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .payload import ByteReader, Payload, PayloadError, PayloadType, pack_uint

MAX_GYRO_DATA_SIZE = 3 * 8


class CoreSensorFlags:
    """Bit masks for the fields of the core sensors payload."""

    # buttons
    BUTTON0 = 0x01
    BUTTON1 = 0x02
    BUTTON2 = 0x04

    # bumper
    LEFT_BUMPER = 0x04
    CENTER_BUMPER = 0x02
    RIGHT_BUMPER = 0x01

    # cliff sensor
    LEFT_CLIFF = 0x04
    CENTER_CLIFF = 0x02
    RIGHT_CLIFF = 0x01

    # wheel drop sensor
    LEFT_WHEEL = 0x02
    RIGHT_WHEEL = 0x01

    # charger: the upper bits tell adapter from dock, the lower four the state
    ADAPTER_TYPE = 0x10
    BATTERY_STATE_MASK = 0x0F
    DISCHARGING = 0x00
    CHARGED = 0x02
    CHARGING = 0x06

    # wheel over-current
    LEFT_WHEEL_OC = 0x01
    RIGHT_WHEEL_OC = 0x02


@dataclass
class CoreSensorsData:
    """Contents of the core sensors payload."""

    time_stamp: int = 0
    bumper: int = 0
    wheel_drop: int = 0
    cliff: int = 0
    left_encoder: int = 0
    right_encoder: int = 0
    left_pwm: int = 0
    right_pwm: int = 0
    buttons: int = 0
    charger: int = 0
    battery: int = 0
    over_current: int = 0


def _check_count(name: str, values: list[int], count: int) -> None:
    if len(values) != count:
        raise ValueError(f"{name} must hold {count} values, not {len(values)}")


@dataclass
class Cliff(Payload):
    """Readings of the three cliff sensors (right, centre, left)."""

    length: ClassVar[int] = 6
    bottom: list[int] = field(default_factory=lambda: [0, 0, 0])

    def serialise(self) -> bytes:
        _check_count("bottom", self.bottom, 3)
        body = b"".join(pack_uint(value, 2) for value in self.bottom)
        return self._header_bytes(PayloadType.CLIFF, self.length) + body

    def deserialise(self, reader: ByteReader) -> None:
        self._read_fixed_header(reader, PayloadType.CLIFF)
        self.bottom = [reader.read_uint(2) for _ in range(3)]


@dataclass
class Current(Payload):
    """Supplied motor current, left and right; useful to detect a blocked robot."""

    length: ClassVar[int] = 2
    current: list[int] = field(default_factory=lambda: [0, 0])

    def serialise(self) -> bytes:
        _check_count("current", self.current, 2)
        body = b"".join(pack_uint(value, 1) for value in self.current)
        return self._header_bytes(PayloadType.CURRENT, self.length) + body

    def deserialise(self, reader: ByteReader) -> None:
        self._read_fixed_header(reader, PayloadType.CURRENT)
        self.current = [reader.read_uint(1) for _ in range(2)]


@dataclass
class DockIR(Payload):
    """Signals of the three docking infrared sensors."""

    length: ClassVar[int] = 3
    docking: list[int] = field(default_factory=lambda: [0, 0, 0])

    def serialise(self) -> bytes:
        _check_count("docking", self.docking, 3)
        body = b"".join(pack_uint(value, 1) for value in self.docking)
        return self._header_bytes(PayloadType.DOCK_INFRA_RED, self.length) + body

    def deserialise(self, reader: ByteReader) -> None:
        self._read_fixed_header(reader, PayloadType.DOCK_INFRA_RED)
        self.docking = [reader.read_uint(1) for _ in range(3)]


@dataclass
class Inertia(Payload):
    """Heading angle and angular rate, plus three acceleration bytes."""

    length: ClassVar[int] = 7
    angle: int = 0
    angle_rate: int = 0
    acc: list[int] = field(default_factory=lambda: [0, 0, 0])

    def serialise(self) -> bytes:
        _check_count("acc", self.acc, 3)
        body = (
            pack_uint(self.angle, 2)
            + pack_uint(self.angle_rate, 2)
            + b"".join(pack_uint(value, 1) for value in self.acc)
        )
        return self._header_bytes(PayloadType.INERTIA, self.length) + body

    def deserialise(self, reader: ByteReader) -> None:
        self._read_fixed_header(reader, PayloadType.INERTIA)
        self.angle = reader.read_int(2)
        self.angle_rate = reader.read_int(2)
        self.acc = [reader.read_uint(1) for _ in range(3)]


@dataclass
class GpInput(Payload):
    """Digital input word and four analog inputs (0-4095).

    On the wire the analog values are followed by three unused 16-bit words.
    """

    length: ClassVar[int] = 16
    digital_input: int = 0
    analog_input: list[int] = field(default_factory=lambda: [0, 0, 0, 0])

    def serialise(self) -> bytes:
        _check_count("analog_input", self.analog_input, 4)
        body = (
            pack_uint(self.digital_input, 2)
            + b"".join(pack_uint(value, 2) for value in self.analog_input)
            + pack_uint(0, 2) * 3
        )
        return self._header_bytes(PayloadType.GP_INPUT, self.length) + body

    def deserialise(self, reader: ByteReader) -> None:
        self._read_fixed_header(reader, PayloadType.GP_INPUT)
        self.digital_input = reader.read_uint(2)
        self.analog_input = [reader.read_uint(2) for _ in range(4)]
        for _ in range(3):
            reader.read_uint(2)


@dataclass
class ThreeAxisGyro(Payload):
    """Raw three-axis gyro samples; a dynamic payload of varying size."""

    is_dynamic: ClassVar[bool] = True
    length: ClassVar[int] = 4
    frame_id: int = 0
    data: list[int] = field(default_factory=list)

    @property
    def followed_data_length(self) -> int:
        """Number of 16-bit sample words carried."""
        return len(self.data)

    def serialise(self) -> bytes:
        if len(self.data) > MAX_GYRO_DATA_SIZE:
            raise ValueError(
                f"at most {MAX_GYRO_DATA_SIZE} samples fit in a gyro payload"
            )
        packed_length = 2 + 2 * len(self.data)
        body = (
            pack_uint(self.frame_id, 1)
            + pack_uint(len(self.data), 1)
            + b"".join(pack_uint(value, 2) for value in self.data)
        )
        return self._header_bytes(PayloadType.THREE_AXIS_GYRO, packed_length) + body

    def deserialise(self, reader: ByteReader) -> None:
        packed_length = self._read_header(reader, PayloadType.THREE_AXIS_GYRO)
        if self.length > packed_length:
            raise PayloadError(
                f"ThreeAxisGyro: length {packed_length} below minimum {self.length}"
            )
        frame_id = reader.read_uint(1)
        count = reader.read_uint(1)
        if packed_length != 2 + 2 * count:
            raise PayloadError(
                f"ThreeAxisGyro: length {packed_length} does not fit {count} samples"
            )
        if count > MAX_GYRO_DATA_SIZE:
            raise PayloadError(
                f"ThreeAxisGyro: {count} samples exceed {MAX_GYRO_DATA_SIZE}"
            )
        self.frame_id = frame_id
        self.data = [reader.read_uint(2) for _ in range(count)]