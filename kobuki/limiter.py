"""Acceleration limiting for velocity commands."""

from __future__ import annotations

import time
from typing import Callable


class AccelerationLimiter:
    """Limits velocity commands whose change since the last command is too great."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.enabled = True
        self.linear_acceleration_max = 0.5
        self.angular_acceleration_max = 3.5
        self.linear_deceleration_max = -0.5 * 1.2
        self.angular_deceleration_max = -3.5 * 1.2
        self._last_timestamp = clock()
        self._last_vx = 0.0
        self._last_wz = 0.0

    def configure(
        self,
        enabled: bool,
        linear_acceleration_max: float = 0.5,
        angular_acceleration_max: float = 3.5,
        linear_deceleration_max: float = -0.5 * 1.2,
        angular_deceleration_max: float = -3.5 * 1.2,
    ) -> None:
        """Enable or disable limiting and set the limits (m/s^2, rad/s^2)."""
        self.enabled = enabled
        self.linear_acceleration_max = linear_acceleration_max
        self.angular_acceleration_max = angular_acceleration_max
        self.linear_deceleration_max = linear_deceleration_max
        self.angular_deceleration_max = angular_deceleration_max

    @staticmethod
    def _clamp(
        target: float, last: float, duration: float, up: float, down: float
    ) -> float:
        if duration <= 0:
            # No time has passed: only an unchanged command gets through.
            return target if target == last else last
        acceleration = (target - last) / duration
        if acceleration > up:
            return last + up * duration
        if acceleration < down:
            return last + down * duration
        return target

    def limit(self, vx: float, wz: float) -> tuple[float, float]:
        """Return the (linear, angular) command after limiting.

        When disabled the command is passed through unchanged.
        """
        if not self.enabled:
            return vx, wz
        now = self._clock()
        duration = now - self._last_timestamp
        command_vx = self._clamp(
            vx, self._last_vx, duration,
            self.linear_acceleration_max, self.linear_deceleration_max,
        )
        command_wz = self._clamp(
            wz, self._last_wz, duration,
            self.angular_acceleration_max, self.angular_deceleration_max,
        )
        self._last_vx = command_vx
        self._last_wz = command_wz
        self._last_timestamp = now
        return command_vx, command_wz