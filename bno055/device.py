"""Driver for the BNO055 absolute orientation sensor over a register bus."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod

from .models import (
    AxisMap,
    CalibrationData,
    CalibrationState,
    SelfTestResult,
    Vector,
)
from .registers import (
    CALIBRATION_DATA_LENGTH,
    CHIP_ID_VALUE,
    EXTERNAL_CRYSTAL_DELAY_MS,
    RESET_DELAY_MS,
    SETUP_DELAY_MS,
    SYS_TRIGGER_EXTERNAL_CRYSTAL,
    SYS_TRIGGER_RESET,
    OperationMode,
    Register,
    VectorType,
)


class Bus(ABC):
    """Register access to the sensor; subclasses provide the transport."""

    @abstractmethod
    def write(self, register: int, value: int) -> None:
        """Write one byte to a register."""

    @abstractmethod
    def read(self, register: int, length: int) -> bytes:
        """Read length bytes starting at a register."""

    def delay(self, milliseconds: int) -> None:
        """Wait for the given number of milliseconds."""
        time.sleep(milliseconds / 1000)


class NullBus(Bus):
    """A bus with nothing attached: writes vanish, reads give zeros, no waiting."""

    def write(self, register: int, value: int) -> None:
        return None

    def read(self, register: int, length: int) -> bytes:
        return bytes(length)

    def delay(self, milliseconds: int) -> None:
        return None


class DeviceNotFoundError(Exception):
    """The chip id register did not hold the BNO055 id."""

    def __init__(self, chip_id: int) -> None:
        self.chip_id = chip_id
        super().__init__(f"Can't find BNO055, id: 0x{chip_id:02x}. Please check your wiring.")


class BNO055:
    """High-level operations on a BNO055 reached through a Bus."""

    def __init__(self, bus: Bus) -> None:
        self.bus = bus

    def _read_byte(self, register: int) -> int:
        return self.bus.read(register, 1)[0]

    def set_page(self, page: int) -> None:
        self.bus.write(Register.PAGE_ID, page)

    def read_operation_mode(self) -> OperationMode:
        return OperationMode(self._read_byte(Register.OPR_MODE))

    def set_operation_mode(self, mode: OperationMode) -> None:
        mode = OperationMode(mode)
        self.bus.write(Register.OPR_MODE, mode)
        self.bus.delay(mode.settle_ms())

    def set_operation_mode_config(self) -> None:
        self.set_operation_mode(OperationMode.CONFIG)

    def set_operation_mode_ndof(self) -> None:
        self.set_operation_mode(OperationMode.NDOF)

    def set_external_crystal_use(self, state: bool) -> None:
        """Set the external-crystal bit; disabling leaves the current bits as they are."""
        self.set_page(0)
        value = self._read_byte(Register.SYS_TRIGGER)
        if state:
            value |= SYS_TRIGGER_EXTERNAL_CRYSTAL
        self.bus.write(Register.SYS_TRIGGER, value)
        self.bus.delay(EXTERNAL_CRYSTAL_DELAY_MS)

    def enable_external_crystal(self) -> None:
        self.set_external_crystal_use(True)

    def disable_external_crystal(self) -> None:
        self.set_external_crystal_use(False)

    def reset(self) -> None:
        self.bus.write(Register.SYS_TRIGGER, SYS_TRIGGER_RESET)
        self.bus.delay(RESET_DELAY_MS)

    def read_temperature(self) -> int:
        """Temperature as a signed byte."""
        self.set_page(0)
        return int.from_bytes(self.bus.read(Register.TEMP, 1), "little", signed=True)

    def setup(self) -> None:
        """Reset the sensor, check its id and leave it in config mode."""
        self.reset()
        chip_id = self._read_byte(Register.CHIP_ID)
        if chip_id != CHIP_ID_VALUE:
            raise DeviceNotFoundError(chip_id)
        self.set_page(0)
        self.bus.write(Register.SYS_TRIGGER, 0x00)
        self.set_operation_mode_config()
        self.bus.delay(SETUP_DELAY_MS)

    def read_sw_revision(self) -> int:
        self.set_page(0)
        data = self.bus.read(Register.SW_REV_ID_LSB, 2)
        return int.from_bytes(data[:2], "little", signed=True)

    def read_bootloader_revision(self) -> int:
        self.set_page(0)
        return self._read_byte(Register.BL_REV_ID)

    def read_system_status(self) -> int:
        """Raw SYS_STATUS value; compare with SystemStatus."""
        self.set_page(0)
        return self._read_byte(Register.SYS_STATUS)

    def read_self_test_result(self) -> SelfTestResult:
        self.set_page(0)
        return SelfTestResult.from_byte(self._read_byte(Register.ST_RESULT))

    def read_system_error(self) -> int:
        """Raw SYS_ERR value; compare with SystemError."""
        self.set_page(0)
        return self._read_byte(Register.SYS_ERR)

    def read_calibration_state(self) -> CalibrationState:
        self.set_page(0)
        return CalibrationState.from_byte(self._read_byte(Register.CALIB_STAT))

    def read_calibration_data(self) -> CalibrationData:
        """Read the calibration profile, switching to config mode and back."""
        mode = self.read_operation_mode()
        self.set_operation_mode_config()
        try:
            self.set_page(0)
            raw = self.bus.read(Register.ACC_OFFSET_X_LSB, CALIBRATION_DATA_LENGTH)
            return CalibrationData.from_bytes(raw)
        finally:
            self.set_operation_mode(mode)

    def write_calibration_data(self, data: CalibrationData) -> None:
        """Write the calibration profile, switching to config mode and back."""
        raw = data.to_bytes()
        mode = self.read_operation_mode()
        self.set_operation_mode_config()
        try:
            self.set_page(0)
            for offset, value in enumerate(raw):
                self.bus.write(Register.ACC_OFFSET_X_LSB + offset, value)
        finally:
            self.set_operation_mode(mode)

    def read_vector(self, vector_type: VectorType) -> Vector:
        vector_type = VectorType(vector_type)
        self.set_page(0)
        raw = self.bus.read(vector_type, vector_type.length())
        return Vector.from_bytes(
            raw, vector_type.scale(), vector_type is VectorType.QUATERNION
        )

    def accelerometer(self) -> Vector:
        return self.read_vector(VectorType.ACCELEROMETER)

    def magnetometer(self) -> Vector:
        return self.read_vector(VectorType.MAGNETOMETER)

    def gyroscope(self) -> Vector:
        return self.read_vector(VectorType.GYROSCOPE)

    def euler(self) -> Vector:
        return self.read_vector(VectorType.EULER)

    def linear_acceleration(self) -> Vector:
        return self.read_vector(VectorType.LINEARACCEL)

    def gravity(self) -> Vector:
        return self.read_vector(VectorType.GRAVITY)

    def quaternion(self) -> Vector:
        return self.read_vector(VectorType.QUATERNION)

    def set_axis_map(self, axis_map: AxisMap) -> None:
        self.bus.write(Register.AXIS_MAP_CONFIG, axis_map.remap_byte())
        self.bus.write(Register.AXIS_MAP_SIGN, axis_map.sign_byte())