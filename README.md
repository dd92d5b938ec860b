# bno055

A small driver for the BNO055 9-axis absolute orientation sensor. It knows
the register map and how to decode and encode the sensor's data; the
transport that actually reaches the chip is supplied by you as a `Bus`.

The package has three modules:

- `bno055.registers` – register addresses (`Register`), the enumerations
  `OperationMode`, `VectorType`, `SystemStatus`, `SystemError`, `Axis`,
  `AxisSign`, and the scale and timing constants.
- `bno055.models` – frozen dataclasses for the values exchanged with the
  sensor: `SelfTestResult`, `CalibrationState`, `Vector3`,
  `CalibrationOffset`, `CalibrationRadius`, `CalibrationData`, `Vector`
  and `AxisMap`.
- `bno055.device` – the `Bus` base class, `NullBus`, the `BNO055` driver
  and `DeviceNotFoundError`.

## Installing

```
pip install .
```

## Providing a bus

Subclass `Bus` and implement `write(register, value)`, which writes one
byte, and `read(register, length)`, which returns `bytes`. `delay(milliseconds)`
defaults to `time.sleep`; override it if your platform waits differently.

```python
from bno055.device import Bus
from bno055.registers import I2C_ADDRESS

class MyBus(Bus):
    def __init__(self, i2c):
        self.i2c = i2c

    def write(self, register, value):
        self.i2c.write(I2C_ADDRESS, bytes([register, value]))

    def read(self, register, length):
        self.i2c.write(I2C_ADDRESS, bytes([register]))
        return self.i2c.read(I2C_ADDRESS, length)
```

`NullBus` discards writes, reads zeros and never waits. It is handy for
dry runs; note that `setup()` on a `NullBus` raises `DeviceNotFoundError`
because the chip id reads back as `0x00`.

## Reading the sensor

```python
from bno055.device import BNO055

imu = BNO055(MyBus(i2c))
imu.setup()                      # reset, check chip id, enter config mode
imu.set_operation_mode_ndof()

print(imu.read_temperature())    # signed byte
print(imu.euler())               # Vector(w=0.0, x=heading, y=roll, z=pitch)
print(imu.quaternion())          # Vector(w, x, y, z)
print(imu.read_calibration_state())
print(imu.read_self_test_result())
```

`setup()` raises `DeviceNotFoundError` (with the value read in its
`chip_id` attribute) when the chip id is not `0xA0`.

`read_vector(vector_type)` reads any `VectorType`; the shortcuts are
`accelerometer()`, `magnetometer()`, `gyroscope()`, `euler()`,
`linear_acceleration()`, `gravity()` and `quaternion()`. Raw counts are
divided by the type's scale: 100 for the accelerations, 16 for the
magnetometer, gyroscope and Euler angles, and 2^14 for quaternions. Only
quaternions fill `w`; for the others it is `0.0`.

`read_system_status()` and `read_system_error()` return the raw register
values, to be compared with `SystemStatus` and `SystemError`.
`read_operation_mode()` returns an `OperationMode`.

`enable_external_crystal()` sets the external-crystal bit of `SYS_TRIGGER`.
`disable_external_crystal()` writes the register back unchanged: it does not
clear a bit that is already set.

## Calibration

```python
data = imu.read_calibration_data()     # CalibrationData
blob = data.to_bytes()                 # 22 bytes, as in the register map
# ... later ...
from bno055.models import CalibrationData
imu.write_calibration_data(CalibrationData.from_bytes(blob))
```

Both calls switch to config mode for the transfer and restore the mode
that was active before, even if the transfer fails. `from_bytes` and
`to_bytes` raise `ValueError` on a wrong length or out-of-range values.

## Axis remapping

```python
from bno055.models import AxisMap
from bno055.registers import Axis, AxisSign

imu.set_axis_map(AxisMap(x=Axis.Y, x_sign=AxisSign.POSITIVE,
                         y=Axis.X, y_sign=AxisSign.NEGATIVE,
                         z=Axis.Z, z_sign=AxisSign.POSITIVE))
```

## What it does not do

The package contains no transport: there is no I2C or serial
implementation of `Bus`, so talking to a real chip needs one written for
your hardware. The serial framing bytes and status codes in
`bno055.registers` are constants only. There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```