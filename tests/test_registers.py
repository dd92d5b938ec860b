import pytest

from bno055.registers import (
    ACCEL_SCALE,
    MAG_SCALE,
    Axis,
    AxisSign,
    OperationMode,
    Register,
    SystemStatus,
    VectorType,
)
from bno055.registers import SystemError as SensorSystemError


@pytest.mark.parametrize(
    "address, name",
    [
        (0x00, "CHIP_ID"),
        (0x07, "PAGE_ID"),
        (0x3D, "OPR_MODE"),
        (0x3F, "SYS_TRIGGER"),
        (0x55, "ACC_OFFSET_X_LSB"),
        (0x6A, "MAG_RADIUS_MSB"),
    ],
)
def test_register_lookup_by_address_matches_register_map(address, name):
    assert Register(address) is Register[name]


def test_page_one_names_alias_page_zero_addresses():
    assert Register(0x08) is Register.ACC_CONFIG
    assert Register["GYR_AM_SET"] is Register(0x1F)


def test_unknown_register_address_is_rejected():
    with pytest.raises(ValueError):
        Register(0xFF)


@pytest.mark.parametrize(
    "value, mode",
    [
        (0x00, OperationMode.CONFIG),
        (0x07, OperationMode.AMG),
        (0x0C, OperationMode.NDOF),
    ],
)
def test_operation_mode_lookup(value, mode):
    assert OperationMode(value) is mode


def test_operation_modes_are_contiguous():
    assert [m.value for m in OperationMode] == list(range(13))
    with pytest.raises(ValueError):
        OperationMode(0x0D)


def test_config_mode_settles_longer():
    assert OperationMode.CONFIG.settle_ms() == 19
    assert {m.settle_ms() for m in OperationMode if m is not OperationMode.CONFIG} == {7}


@pytest.mark.parametrize(
    "vector, scale",
    [
        (VectorType.ACCELEROMETER, ACCEL_SCALE),
        (VectorType.LINEARACCEL, ACCEL_SCALE),
        (VectorType.GRAVITY, ACCEL_SCALE),
        (VectorType.MAGNETOMETER, MAG_SCALE),
        (VectorType.GYROSCOPE, 16),
        (VectorType.EULER, 16),
        (VectorType.QUATERNION, 16384),
    ],
)
def test_vector_scales(vector, scale):
    assert vector.scale() == scale


def test_vector_lengths():
    assert VectorType.QUATERNION.length() == 8
    assert {v.length() for v in VectorType if v is not VectorType.QUATERNION} == {6}


@pytest.mark.parametrize(
    "vector, register",
    [
        (VectorType.ACCELEROMETER, Register.ACC_DATA_X_LSB),
        (VectorType.EULER, Register.EUL_HEADING_LSB),
        (VectorType.QUATERNION, Register.QUA_DATA_W_LSB),
        (VectorType.GRAVITY, Register.GRV_DATA_X_LSB),
    ],
)
def test_vector_addresses_are_data_registers(vector, register):
    assert Register(int(vector)) is register
    assert VectorType(int(register)) is vector


def test_system_status_lookup():
    assert SystemStatus(0x05) is SystemStatus.FUSION_ALGO_RUNNING
    assert SystemStatus(0x00) is SystemStatus.IDLE


def test_system_error_lookup():
    assert SensorSystemError(0x0A) is SensorSystemError.SENSOR_CONF_ERROR
    assert SensorSystemError(0x03) is SensorSystemError.SELF_TEST_FAILED


def test_axis_enumerations():
    assert [int(a) for a in Axis] == [0, 1, 2]
    assert AxisSign(1) is AxisSign.NEGATIVE
    with pytest.raises(ValueError):
        Axis(3)