"""Version information reported by the robot."""

from __future__ import annotations

from dataclasses import dataclass


def format_version(version: int) -> str:
    """Render a version word as ``major.minor.patch``; the top byte is ignored."""
    major = (version & 0x00FF0000) >> 16
    minor = (version & 0x0000FF00) >> 8
    patch = version & 0x000000FF
    return f"{major}.{minor}.{patch}"


def format_udid(udid0: int, udid1: int, udid2: int) -> str:
    """Render the three unique device id words as ``udid0-udid1-udid2``."""
    return f"{udid0}-{udid1}-{udid2}"


@dataclass(frozen=True)
class VersionInfo:
    """Firmware, hardware and unique device id of a robot."""

    firmware: int
    hardware: int
    udid0: int
    udid1: int
    udid2: int
    software: int = 0

    def firmware_string(self) -> str:
        return format_version(self.firmware)

    def hardware_string(self) -> str:
        return format_version(self.hardware)

    def udid_string(self) -> str:
        return format_udid(self.udid0, self.udid1, self.udid2)