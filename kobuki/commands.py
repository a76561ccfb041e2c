"""Command identifiers and the state kept for outgoing commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag


class CommandName(IntEnum):
    """Identifier byte of each command sub-payload."""

    BASE_CONTROL = 1
    SOUND = 3
    SOUND_SEQUENCE = 4
    REQUEST_EXTRA = 9
    CHANGE_FRAME = 10
    REQUEST_EEPROM = 11
    SET_DIGITAL_OUT = 12
    SET_CONTROLLER = 13
    GET_CONTROLLER = 14


class VersionFlag(IntFlag):
    """Flags selecting which version information to request."""

    HARDWARE_VERSION = 0x01
    FIRMWARE_VERSION = 0x02
    UNIQUE_DEVICE_ID = 0x08


@dataclass
class CommandData:
    """The data carried by commands.

    This is kept as state between commands: a general purpose output command
    that changes one LED must keep the other output bits as they were.

    ``gp_out`` bits:

    * ``0x000f`` digital output pins 0-3
    * ``0x00f0`` external power breakers (3.3V, 5V, 12V, 12V1A)
    * ``0x0f00`` LED array (red1, green1, red2, green2)

    By default all power pins are high and everything else low.
    """

    command: CommandName = CommandName.BASE_CONTROL
    # base control
    speed: int = 0
    radius: int = 0
    # sound
    note: int = 0
    duration: int = 0
    # sound sequence
    segment_name: int = 0
    # request extra (version flags)
    request_flags: int = 0
    # change frame and request eeprom
    frame_id: int = 0
    # set digital out
    gp_out: int = 0x00F0
    # controller gains
    type: int = 0
    p_gain: int = 1000
    i_gain: int = 1000
    d_gain: int = 1000
    reserved: int = 0