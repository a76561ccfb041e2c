"""Little-endian byte packing and the base class for protocol payloads."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from enum import IntEnum


class PayloadType(IntEnum):
    """Identifier byte that opens every payload chunk of a packet."""

    # Streamed payloads
    CORE_SENSORS = 1
    DOCK_INFRA_RED = 3
    INERTIA = 4
    CLIFF = 5
    CURRENT = 6
    # Service payloads
    HARDWARE = 10
    FIRMWARE = 11
    THREE_AXIS_GYRO = 13
    EEPROM = 15
    GP_INPUT = 16
    UNIQUE_DEVICE_ID = 19
    RESERVED = 20
    CONTROLLER_INFO = 21


class PayloadError(ValueError):
    """Raised when a byte stream cannot be decoded into a payload."""


def pack_uint(value: int, size: int) -> bytes:
    """Encode an integer into ``size`` little-endian bytes.

    Negative values are written in two's complement, as a fixed-width
    integer would be.
    """
    if size <= 0:
        raise ValueError("size must be positive")
    mask = (1 << (8 * size)) - 1
    return (int(value) & mask).to_bytes(size, "little")


def pack_float(value: float) -> bytes:
    """Encode a float as four little-endian IEEE 754 bytes."""
    return struct.pack("<f", value)


class ByteReader:
    """Consumes little-endian values from the front of a byte sequence."""

    def __init__(self, data: bytes | bytearray = b"") -> None:
        self._data = bytes(data)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._data) - self._pos

    @property
    def remaining(self) -> bytes:
        """The bytes not yet consumed."""
        return self._data[self._pos:]

    def _take(self, size: int) -> bytes:
        if size <= 0:
            raise ValueError("size must be positive")
        if len(self) < size:
            raise PayloadError(
                f"need {size} bytes but only {len(self)} remain"
            )
        chunk = self._data[self._pos:self._pos + size]
        self._pos += size
        return chunk

    def read_uint(self, size: int) -> int:
        """Read an unsigned little-endian integer of ``size`` bytes."""
        return int.from_bytes(self._take(size), "little", signed=False)

    def read_int(self, size: int) -> int:
        """Read a signed little-endian integer of ``size`` bytes."""
        return int.from_bytes(self._take(size), "little", signed=True)

    def read_float(self) -> float:
        """Read a four-byte little-endian IEEE 754 float."""
        return struct.unpack("<f", self._take(4))[0]


class Payload(ABC):
    """A sub-payload of a packet: a header id, a length byte and data.

    ``length`` is the size of the data part, excluding header and length
    field. For fixed payloads the length field must match it; for dynamic
    ones it is the minimum.
    """

    is_dynamic: bool = False
    length: int = 0

    @abstractmethod
    def serialise(self) -> bytes:
        """Return the payload encoded as bytes, header included."""

    @abstractmethod
    def deserialise(self, reader: ByteReader) -> None:
        """Fill this payload from ``reader``; raise PayloadError on failure."""

    @staticmethod
    def _header_bytes(payload_type: PayloadType, length: int) -> bytes:
        return pack_uint(int(payload_type), 1) + pack_uint(length, 1)

    def _read_header(self, reader: ByteReader, payload_type: PayloadType) -> int:
        """Check and consume the header; return the packed length byte."""
        if len(reader) < self.length + 2:
            raise PayloadError(
                f"{type(self).__name__}: not enough bytes in stream"
            )
        header_id = reader.read_uint(1)
        packed_length = reader.read_uint(1)
        if header_id != payload_type:
            raise PayloadError(
                f"{type(self).__name__}: unexpected header id {header_id}"
            )
        return packed_length

    def _read_fixed_header(
        self, reader: ByteReader, payload_type: PayloadType
    ) -> None:
        packed_length = self._read_header(reader, payload_type)
        if packed_length != self.length:
            raise PayloadError(
                f"{type(self).__name__}: length {packed_length} "
                f"does not match {self.length}"
            )