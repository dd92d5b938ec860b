"""Value types read from and written to the BNO055."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from .registers import CALIBRATION_DATA_LENGTH, Axis, AxisSign

# accel xyz, mag xyz, gyro xyz offsets, then accel and mag radius.
_CALIBRATION = struct.Struct("<9h2H")


@dataclass(frozen=True)
class SelfTestResult:
    """Pass flags of the power-on self test."""

    mcu: bool = False
    gyro: bool = False
    mag: bool = False
    accel: bool = False

    @classmethod
    def from_byte(cls, value: int) -> SelfTestResult:
        """Decode the ST_RESULT register."""
        return cls(
            mcu=bool((value >> 3) & 0x01),
            gyro=bool((value >> 2) & 0x01),
            mag=bool((value >> 1) & 0x01),
            accel=bool(value & 0x01),
        )


@dataclass(frozen=True)
class CalibrationState:
    """Calibration levels (0 to 3) of the system and each sensor."""

    sys: int = 0
    gyro: int = 0
    mag: int = 0
    accel: int = 0

    @classmethod
    def from_byte(cls, value: int) -> CalibrationState:
        """Decode the CALIB_STAT register."""
        return cls(
            sys=(value >> 6) & 0x03,
            gyro=(value >> 4) & 0x03,
            accel=(value >> 2) & 0x03,
            mag=value & 0x03,
        )


@dataclass(frozen=True)
class Vector3:
    """Three signed 16-bit components."""

    x: int = 0
    y: int = 0
    z: int = 0


@dataclass(frozen=True)
class CalibrationOffset:
    """Sensor offsets stored in the calibration registers."""

    gyro: Vector3 = field(default_factory=Vector3)
    mag: Vector3 = field(default_factory=Vector3)
    accel: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class CalibrationRadius:
    """Accelerometer and magnetometer radii."""

    mag: int = 0
    accel: int = 0


@dataclass(frozen=True)
class CalibrationData:
    """The complete calibration profile of the sensor."""

    offset: CalibrationOffset = field(default_factory=CalibrationOffset)
    radius: CalibrationRadius = field(default_factory=CalibrationRadius)

    @classmethod
    def from_bytes(cls, data: bytes) -> CalibrationData:
        """Decode the 22 bytes starting at ACC_OFFSET_X_LSB."""
        if len(data) != CALIBRATION_DATA_LENGTH:
            raise ValueError(
                f"calibration data must be {CALIBRATION_DATA_LENGTH} bytes, got {len(data)}"
            )
        values = _CALIBRATION.unpack(bytes(data))
        return cls(
            offset=CalibrationOffset(
                accel=Vector3(*values[0:3]),
                mag=Vector3(*values[3:6]),
                gyro=Vector3(*values[6:9]),
            ),
            radius=CalibrationRadius(accel=values[9], mag=values[10]),
        )

    def to_bytes(self) -> bytes:
        """Encode as the 22 bytes starting at ACC_OFFSET_X_LSB."""
        o = self.offset
        try:
            return _CALIBRATION.pack(
                o.accel.x, o.accel.y, o.accel.z,
                o.mag.x, o.mag.y, o.mag.z,
                o.gyro.x, o.gyro.y, o.gyro.z,
                self.radius.accel, self.radius.mag,
            )
        except struct.error as exc:
            raise ValueError(f"calibration value out of range: {exc}") from exc


@dataclass(frozen=True)
class Vector:
    """A scaled output vector; w is only used by quaternions."""

    w: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_bytes(cls, data: bytes, scale: float = 1.0, quaternion: bool = False) -> Vector:
        """Decode little-endian signed 16-bit components and divide by scale."""
        count = 4 if quaternion else 3
        needed = 2 * count
        if len(data) < needed:
            raise ValueError(f"vector needs {needed} bytes, got {len(data)}")
        raw = struct.unpack_from(f"<{count}h", bytes(data))
        components = [value / scale for value in raw]
        if quaternion:
            return cls(*components)
        return cls(0.0, *components)


@dataclass(frozen=True)
class AxisMap:
    """Axis remapping and sign configuration."""

    x: Axis = Axis.X
    x_sign: AxisSign = AxisSign.POSITIVE
    y: Axis = Axis.Y
    y_sign: AxisSign = AxisSign.POSITIVE
    z: Axis = Axis.Z
    z_sign: AxisSign = AxisSign.POSITIVE

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, Axis(getattr(self, name)))
            sign = f"{name}_sign"
            object.__setattr__(self, sign, AxisSign(getattr(self, sign)))

    def remap_byte(self) -> int:
        """Value for the AXIS_MAP_CONFIG register."""
        return (self.z << 4) | (self.y << 2) | self.x

    def sign_byte(self) -> int:
        """Value for the AXIS_MAP_SIGN register."""
        return (self.x_sign << 2) | (self.y_sign << 1) | self.z_sign