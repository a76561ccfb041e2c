import pytest

from kobuki.parameters import Parameters


def test_defaults():
    params = Parameters()
    assert params.device_port == "/dev/kobuki"
    assert params.sigslots_namespace == "/kobuki"
    assert params.simulation is False
    assert params.enable_acceleration_limiter is True


def test_battery_defaults_ordered():
    params = Parameters()
    assert params.battery_capacity == 16.5
    assert params.battery_dangerous < params.battery_low < params.battery_capacity


def test_deceleration_limits_are_scaled_negatives():
    params = Parameters()
    assert params.linear_deceleration_limit == pytest.approx(-params.linear_acceleration_limit * 1.2)
    assert params.angular_deceleration_limit == pytest.approx(-params.angular_acceleration_limit * 1.2)


def test_validate_accepts_and_clears_message():
    params = Parameters(device_port="/dev/ttyUSB0", error_msg="stale")
    assert params.validate() is True
    assert params.error_msg == ""


def test_instances_are_independent():
    first = Parameters()
    second = Parameters()
    first.device_port = "/dev/other"
    assert second.device_port == "/dev/kobuki"