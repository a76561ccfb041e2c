# kobuki

Data structures and wire formats for the payloads exchanged with a Kobuki
mobile robot base. It uses only the standard library.

## What is in the package

- **`kobuki.payload`**: the base of the wire format. Each payload is a header
  byte, a length byte and then little-endian fields.
  - `PayloadType` holds the header ids.
  - `pack_uint(value, size)` and `pack_float(value)` encode values.
  - `ByteReader` decodes them with `read_uint`, `read_int` and `read_float`.
  - `Payload` is the abstract base, with `serialise()` and `deserialise(reader)`.
  - `PayloadError` is raised when bytes cannot be decoded.
- **`kobuki.sensors`**: the streamed payloads. These are `Cliff`, `Current`,
  `DockIR`, `Inertia`, `GpInput` and `ThreeAxisGyro`. The module also has
  `CoreSensorsData`, a plain record of the core sensor fields, and the
  `CoreSensorFlags` bit masks.
- **`kobuki.info`**: the service payloads. These are `ControllerInfo`,
  `Eeprom`, `Firmware`, `Hardware` and `UniqueDeviceID`.
  - `Firmware` and `Hardware` also accept the older two-byte version format.
  - `Firmware` compares the flashed version with the one the package expects
    (1.2.x), using `check_major_version()` and `check_minor_version()`.
- **`kobuki.version`**: `VersionInfo`, `format_version` and `format_udid`.
- **`kobuki.commands`**: `CommandName`, `VersionFlag` and `CommandData`. The
  `CommandData` defaults have the power pins high and the PID gains at 1000.
- **`kobuki.events`**: the event records `ButtonEvent`, `BumperEvent`,
  `CliffEvent`, `WheelEvent`, `PowerEvent`, `InputEvent` and `RobotEvent`.
- **`kobuki.modules`**: the enums `LedNumber`, `LedColour`, `SoundSequence`,
  `BatterySource`, `BatteryLevel` and `BatteryState`, plus `DigitalOutput`.
  `DigitalOutput.set(pin, value)` sets a pin and marks it in the mask.
- **`kobuki.limiter`**: `AccelerationLimiter`, which clamps changes in
  linear and angular velocity commands. The clock is injectable.
- **`kobuki.parameters`**: `Parameters`, the driver settings with their
  defaults.

## Installation

```
pip install .
```

## Examples

Encode a payload to bytes and decode it back:

```python
from kobuki.payload import ByteReader
from kobuki.sensors import Cliff

cliff = Cliff(bottom=[100, 200, 300])
raw = cliff.serialise()

decoded = Cliff()
decoded.deserialise(ByteReader(raw))
assert decoded.bottom == [100, 200, 300]
```

Turn a packed version word into a string:

```python
from kobuki.version import format_version

format_version(0x00010203)  # "1.2.3"
```

Smooth velocity commands:

```python
from kobuki.limiter import AccelerationLimiter

limiter = AccelerationLimiter()
limiter.configure(True, 0.3, 3.5, -0.36, -4.2)
vx, wz = limiter.limit(1.0, 0.0)
```

When the limiter is disabled, `limit` returns the command unchanged.

`deserialise` raises `kobuki.payload.PayloadError` in these cases:

- the stream is too short;
- the header id is wrong;
- the length field does not fit what the payload expects.

## What the package does not do

This is a library of formats and data, not a driver:

- It opens no serial port.
- It does not find packets in a byte stream or check their checksums.
- It does not encode `CommandData` into command bytes.
- It does not compute odometry.
- It does not turn sensor changes into events. The event classes are records
  only, and nothing dispatches them.
- For the battery, it has only the enums. It does not compute a level or a
  percentage from a voltage.
- It has no command-line tools.

## Running the tests

```
pip install .[test]
pytest
```