import pytest

from kobuki.info import (
    ControllerInfo,
    Eeprom,
    Firmware,
    Hardware,
    UniqueDeviceID,
)
from kobuki.payload import ByteReader, PayloadError, PayloadType, pack_uint


def _decode(cls, data):
    payload = cls()
    payload.deserialise(ByteReader(data))
    return payload


def test_controller_info_defaults():
    info = ControllerInfo()
    assert (info.type, info.p_gain, info.i_gain, info.d_gain) == (0, 100000, 100, 2000)


def test_controller_info_header_bytes():
    data = ControllerInfo().serialise()
    assert data[0] == PayloadType.CONTROLLER_INFO
    assert data[1] == 13
    assert len(data) == 15


def test_controller_info_round_trip():
    original = ControllerInfo(type=1, p_gain=123456, i_gain=7, d_gain=4242)
    assert _decode(ControllerInfo, original.serialise()) == original


def test_controller_info_wrong_header():
    data = bytearray(ControllerInfo().serialise())
    data[0] = PayloadType.CLIFF
    with pytest.raises(PayloadError):
        _decode(ControllerInfo, bytes(data))


def test_controller_info_wrong_length():
    data = bytearray(ControllerInfo().serialise())
    data[1] = 12
    with pytest.raises(PayloadError):
        _decode(ControllerInfo, bytes(data))


def test_controller_info_short_stream():
    with pytest.raises(PayloadError):
        _decode(ControllerInfo, ControllerInfo().serialise()[:-1])


def test_eeprom_round_trip():
    original = Eeprom(frame_id=3, eeprom=list(range(16)))
    data = original.serialise()
    assert data[0] == PayloadType.EEPROM
    assert data[1] == 17
    assert _decode(Eeprom, data) == original


def test_eeprom_rejects_wrong_size():
    with pytest.raises(ValueError):
        Eeprom(eeprom=[0] * 15).serialise()


def test_firmware_serialise_uses_four_byte_length():
    data = Firmware(version=65793).serialise()
    assert data[:2] == bytes([PayloadType.FIRMWARE, 4])
    assert _decode(Firmware, data).version == 65793


@pytest.mark.parametrize(
    "old, expected",
    [(123, 65536), (10100, 65792), (110, 65792), (10101, 65793), (111, 65793)],
)
def test_firmware_old_style_versions(old, expected):
    data = bytes([PayloadType.FIRMWARE, 2]) + pack_uint(old, 2)
    assert _decode(Firmware, data).version == expected


def test_firmware_unknown_old_version_keeps_value():
    firmware = Firmware(version=65536)
    firmware.deserialise(ByteReader(bytes([PayloadType.FIRMWARE, 2]) + pack_uint(999, 2)))
    assert firmware.version == 65536


def test_firmware_bad_length():
    data = bytes([PayloadType.FIRMWARE, 3]) + pack_uint(0, 3)
    with pytest.raises(PayloadError):
        _decode(Firmware, data)


def test_firmware_version_strings():
    firmware = Firmware(version=65793)
    assert firmware.current_version() == "1.2.x"
    assert firmware.flashed_version() == "1.1.1"
    assert firmware.current_major_version() == 1
    assert firmware.current_minor_version() == 2
    assert firmware.flashed_major_version() == 1
    assert firmware.flashed_minor_version() == 1


def test_firmware_version_checks():
    older = Firmware(version=65793)
    assert older.check_major_version() == 0
    assert older.check_minor_version() < 0
    same = Firmware(version=(1 << 16) | (2 << 8) | 5)
    assert same.check_major_version() == 0
    assert same.check_minor_version() == 0
    newer = Firmware(version=2 << 16)
    assert newer.check_major_version() > 0


def test_hardware_old_style_version():
    data = bytes([PayloadType.HARDWARE, 2]) + pack_uint(104, 2)
    assert _decode(Hardware, data).version == 0x00010004


def test_hardware_round_trip():
    original = Hardware(version=0x00010004)
    data = original.serialise()
    assert data[:2] == bytes([PayloadType.HARDWARE, 4])
    assert _decode(Hardware, data) == original


def test_hardware_wrong_header():
    data = bytes([PayloadType.FIRMWARE, 4]) + pack_uint(1, 4)
    with pytest.raises(PayloadError):
        _decode(Hardware, data)


def test_unique_device_id_round_trip():
    original = UniqueDeviceID(udid0=11, udid1=0xFFFFFFFF, udid2=7)
    data = original.serialise()
    assert data[:2] == bytes([PayloadType.UNIQUE_DEVICE_ID, 12])
    assert len(data) == 14
    assert _decode(UniqueDeviceID, data) == original


def test_unique_device_id_leaves_following_bytes():
    reader = ByteReader(UniqueDeviceID(udid0=1).serialise() + b"\x09")
    UniqueDeviceID().deserialise(reader)
    assert reader.remaining == b"\x09"