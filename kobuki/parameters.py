"""Driver configuration parameters."""

from __future__ import annotations

from dataclasses import dataclass

BATTERY_CAPACITY = 16.5
BATTERY_LOW = 14.0
BATTERY_DANGEROUS = 13.2


@dataclass
class Parameters:
    """Parameter list for the driver, with defaults."""

    device_port: str = "/dev/kobuki"
    sigslots_namespace: str = "/kobuki"
    simulation: bool = False
    enable_acceleration_limiter: bool = True
    battery_capacity: float = BATTERY_CAPACITY
    battery_low: float = BATTERY_LOW
    battery_dangerous: float = BATTERY_DANGEROUS
    linear_acceleration_limit: float = 0.3
    linear_deceleration_limit: float = -0.3 * 1.2
    angular_acceleration_limit: float = 3.5
    angular_deceleration_limit: float = -3.5 * 1.2
    error_msg: str = ""

    def validate(self) -> bool:
        """Check the parameters; every combination is currently accepted."""
        self.error_msg = ""
        return True