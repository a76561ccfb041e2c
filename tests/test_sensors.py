import pytest

from kobuki.payload import ByteReader, PayloadError, PayloadType
from kobuki.sensors import (
    Cliff,
    CoreSensorsData,
    Current,
    DockIR,
    GpInput,
    Inertia,
    ThreeAxisGyro,
)


def _roundtrip(payload, fresh):
    fresh.deserialise(ByteReader(payload.serialise()))
    return fresh


def test_cliff_wire_bytes():
    assert Cliff(bottom=[1, 2, 3]).serialise() == bytes([5, 6, 1, 0, 2, 0, 3, 0])


def test_cliff_roundtrip():
    result = _roundtrip(Cliff(bottom=[1000, 2000, 65535]), Cliff())
    assert result.bottom == [1000, 2000, 65535]


def test_cliff_wrong_count_rejected():
    with pytest.raises(ValueError):
        Cliff(bottom=[1, 2]).serialise()


def test_cliff_short_stream():
    with pytest.raises(PayloadError):
        Cliff().deserialise(ByteReader(bytes([5, 6, 1, 0])))


def test_cliff_wrong_header():
    data = bytes([PayloadType.CURRENT, 6, 1, 0, 2, 0, 3, 0])
    with pytest.raises(PayloadError):
        Cliff().deserialise(ByteReader(data))


def test_cliff_wrong_length():
    data = bytes([PayloadType.CLIFF, 5, 1, 0, 2, 0, 3, 0])
    with pytest.raises(PayloadError):
        Cliff().deserialise(ByteReader(data))


def test_current_wire_and_roundtrip():
    payload = Current(current=[7, 200])
    assert payload.serialise() == bytes([6, 2, 7, 200])
    assert _roundtrip(payload, Current()).current == [7, 200]


def test_dock_ir_roundtrip_leaves_trailing_bytes():
    payload = DockIR(docking=[1, 2, 4])
    reader = ByteReader(payload.serialise() + b"\xaa\xbb")
    result = DockIR()
    result.deserialise(reader)
    assert result.docking == [1, 2, 4]
    assert reader.remaining == b"\xaa\xbb"


def test_dock_ir_header_byte():
    assert DockIR().serialise()[:2] == bytes([3, 3])


def test_inertia_negative_roundtrip():
    payload = Inertia(angle=-1234, angle_rate=-5, acc=[9, 8, 7])
    result = _roundtrip(payload, Inertia())
    assert (result.angle, result.angle_rate, result.acc) == (-1234, -5, [9, 8, 7])


def test_inertia_serialised_size():
    data = Inertia().serialise()
    assert len(data) == Inertia.length + 2
    assert data[0] == PayloadType.INERTIA


def test_gp_input_roundtrip_and_size():
    payload = GpInput(digital_input=0x000F, analog_input=[0, 1, 4095, 2048])
    data = payload.serialise()
    assert len(data) == GpInput.length + 2
    assert data[-6:] == bytes(6)
    result = _roundtrip(payload, GpInput())
    assert result.digital_input == 0x000F
    assert result.analog_input == [0, 1, 4095, 2048]


def test_gp_input_short_stream():
    with pytest.raises(PayloadError):
        GpInput().deserialise(ByteReader(GpInput().serialise()[:-1]))


def test_gyro_wire_bytes():
    payload = ThreeAxisGyro(frame_id=3, data=[1, 2])
    assert payload.serialise() == bytes([13, 6, 3, 2, 1, 0, 2, 0])
    assert payload.followed_data_length == 2


def test_gyro_roundtrip():
    samples = list(range(100, 124))
    result = _roundtrip(ThreeAxisGyro(frame_id=9, data=samples), ThreeAxisGyro())
    assert result.frame_id == 9
    assert result.data == samples


def test_gyro_too_many_samples():
    with pytest.raises(ValueError):
        ThreeAxisGyro(data=[0] * 25).serialise()


def test_gyro_length_mismatch():
    data = bytes([13, 8, 3, 2, 1, 0, 2, 0, 0, 0])
    with pytest.raises(PayloadError):
        ThreeAxisGyro().deserialise(ByteReader(data))


def test_gyro_length_below_minimum():
    data = bytes([13, 2, 3, 0, 0, 0])
    with pytest.raises(PayloadError):
        ThreeAxisGyro().deserialise(ByteReader(data))


def test_core_sensors_data_holds_values():
    data = CoreSensorsData(bumper=0x04, battery=160)
    assert (data.bumper, data.battery, data.time_stamp) == (0x04, 160, 0)