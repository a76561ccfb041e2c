"""Service payloads: controller gains, eeprom, firmware, hardware and device id."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .payload import ByteReader, Payload, PayloadError, PayloadType, pack_uint
from .version import format_version

CURRENT_FIRMWARE_MAJOR_VERSION = 1
CURRENT_FIRMWARE_MINOR_VERSION = 2

EEPROM_DATA_SIZE = 16

# Early firmware sent a two-byte decimal version; these map it to the
# four-byte major/minor/patch word used since.
_OLD_FIRMWARE_VERSIONS = {
    123: 65536,    # 1.0.0
    10100: 65792,  # 1.1.0
    110: 65792,
    10101: 65793,  # 1.1.1
    111: 65793,
}
_OLD_HARDWARE_VERSIONS = {
    104: 0x00010004,  # 1.0.4
}


@dataclass
class ControllerInfo(Payload):
    """Wheel velocity controller type and PID gains (scaled by 1000)."""

    length: ClassVar[int] = 13
    type: int = 0
    p_gain: int = 100 * 1000
    i_gain: int = 100
    d_gain: int = 2 * 1000

    def serialise(self) -> bytes:
        body = (
            pack_uint(self.type, 1)
            + pack_uint(self.p_gain, 4)
            + pack_uint(self.i_gain, 4)
            + pack_uint(self.d_gain, 4)
        )
        return self._header_bytes(PayloadType.CONTROLLER_INFO, self.length) + body

    def deserialise(self, reader: ByteReader) -> None:
        self._read_fixed_header(reader, PayloadType.CONTROLLER_INFO)
        self.type = reader.read_uint(1)
        self.p_gain = reader.read_uint(4)
        self.i_gain = reader.read_uint(4)
        self.d_gain = reader.read_uint(4)


@dataclass
class Eeprom(Payload):
    """A frame id followed by sixteen bytes of eeprom contents."""

    length: ClassVar[int] = 17
    frame_id: int = 0
    eeprom: list[int] = field(default_factory=lambda: [0] * EEPROM_DATA_SIZE)

    def serialise(self) -> bytes:
        if len(self.eeprom) != EEPROM_DATA_SIZE:
            raise ValueError(
                f"eeprom must hold {EEPROM_DATA_SIZE} values, not {len(self.eeprom)}"
            )
        body = pack_uint(self.frame_id, 1) + bytes(
            value & 0xFF for value in self.eeprom
        )
        return self._header_bytes(PayloadType.EEPROM, self.length) + body

    def deserialise(self, reader: ByteReader) -> None:
        self._read_fixed_header(reader, PayloadType.EEPROM)
        self.frame_id = reader.read_uint(1)
        self.eeprom = [reader.read_uint(1) for _ in range(EEPROM_DATA_SIZE)]


def _read_version(
    reader: ByteReader, payload: Payload, payload_type: PayloadType,
    old_versions: dict[int, int], current: int,
) -> int:
    """Decode a two- or four-byte version payload; return the version word."""
    packed_length = payload._read_header(reader, payload_type)
    if packed_length not in (2, 4):
        raise PayloadError(
            f"{type(payload).__name__}: unexpected length {packed_length}"
        )
    if packed_length == 2:
        return old_versions.get(reader.read_uint(2), current)
    return reader.read_uint(4)


@dataclass
class Firmware(Payload):
    """Firmware version word: ``0x00MMmmpp`` (major, minor, patch)."""

    is_dynamic: ClassVar[bool] = True
    length: ClassVar[int] = 2
    version: int = 0

    def serialise(self) -> bytes:
        return self._header_bytes(PayloadType.FIRMWARE, 4) + pack_uint(self.version, 4)

    def deserialise(self, reader: ByteReader) -> None:
        self.version = _read_version(
            reader, self, PayloadType.FIRMWARE, _OLD_FIRMWARE_VERSIONS, self.version
        )

    def current_version(self) -> str:
        """The firmware version this driver expects, patch left open."""
        return f"{CURRENT_FIRMWARE_MAJOR_VERSION}.{CURRENT_FIRMWARE_MINOR_VERSION}.x"

    def flashed_version(self) -> str:
        """The version of the firmware on the robot."""
        return format_version(self.version)

    def current_major_version(self) -> int:
        return CURRENT_FIRMWARE_MAJOR_VERSION

    def current_minor_version(self) -> int:
        return CURRENT_FIRMWARE_MINOR_VERSION

    def flashed_major_version(self) -> int:
        return (self.version & 0x00FF0000) >> 16

    def flashed_minor_version(self) -> int:
        return (self.version & 0x0000FF00) >> 8

    def check_major_version(self) -> int:
        """Negative if the flashed major version is older than expected, 0 if equal."""
        return self.flashed_major_version() - CURRENT_FIRMWARE_MAJOR_VERSION

    def check_minor_version(self) -> int:
        """Negative if the flashed minor version is older than expected, 0 if equal."""
        return self.flashed_minor_version() - CURRENT_FIRMWARE_MINOR_VERSION


@dataclass
class Hardware(Payload):
    """Hardware version word: ``0x00MMmmpp`` (major, minor, patch)."""

    is_dynamic: ClassVar[bool] = True
    length: ClassVar[int] = 2
    version: int = 0

    def serialise(self) -> bytes:
        return self._header_bytes(PayloadType.HARDWARE, 4) + pack_uint(self.version, 4)

    def deserialise(self, reader: ByteReader) -> None:
        self.version = _read_version(
            reader, self, PayloadType.HARDWARE, _OLD_HARDWARE_VERSIONS, self.version
        )


@dataclass
class UniqueDeviceID(Payload):
    """The three 32-bit words of the robot's unique device id."""

    length: ClassVar[int] = 12
    udid0: int = 0
    udid1: int = 0
    udid2: int = 0

    def serialise(self) -> bytes:
        body = b"".join(
            pack_uint(value, 4) for value in (self.udid0, self.udid1, self.udid2)
        )
        return self._header_bytes(PayloadType.UNIQUE_DEVICE_ID, self.length) + body

    def deserialise(self, reader: ByteReader) -> None:
        self._read_fixed_header(reader, PayloadType.UNIQUE_DEVICE_ID)
        self.udid0 = reader.read_uint(4)
        self.udid1 = reader.read_uint(4)
        self.udid2 = reader.read_uint(4)