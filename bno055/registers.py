"""Register map, operating modes and enumerations of the BNO055 sensor."""

from enum import IntEnum

CHIP_ID_VALUE = 0xA0

I2C_ADDRESS_HIGH = 0x29
I2C_ADDRESS_LOW = 0x28
I2C_ADDRESS = I2C_ADDRESS_LOW

READ_TIMEOUT_MS = 100
WRITE_TIMEOUT_MS = 10

# Serial (UART) framing bytes.
START_BYTE = 0xAA
RESPONSE_BYTE = 0xBB
ERROR_BYTE = 0xEE

# Serial (UART) write status codes.
ERROR_WRITE_SUCCESS = 0x01
ERROR_WRITE_FAIL = 0x03
ERROR_REGMAP_INV_ADDR = 0x04
ERROR_REGMAP_WRITE_DIS = 0x05
ERROR_WRONG_START_BYTE = 0x06
ERROR_BUS_OVERRUN_ERR = 0x07
ERROR_MAX_LEN_ERR = 0x08
ERROR_MIN_LEN_ERR = 0x09
ERROR_RECV_CHAR_TIMEOUT = 0x0A

REG_WRITE = 0x00
REG_READ = 0x01

ACCEL_SCALE = 100
TEMP_SCALE = 1
ANGULAR_RATE_SCALE = 16
EULER_SCALE = 16
MAG_SCALE = 16
QUATERNION_SCALE = 1 << 14

SYS_TRIGGER_RESET = 0x20
SYS_TRIGGER_EXTERNAL_CRYSTAL = 0x80
RESET_DELAY_MS = 700
EXTERNAL_CRYSTAL_DELAY_MS = 700
SETUP_DELAY_MS = 10
CALIBRATION_DATA_LENGTH = 22


class Register(IntEnum):
    """Register addresses; page 1 names are aliases of page 0 addresses."""

    # Page 0
    CHIP_ID = 0x00
    ACC_ID = 0x01
    MAG_ID = 0x02
    GYRO_ID = 0x03
    SW_REV_ID_LSB = 0x04
    SW_REV_ID_MSB = 0x05
    BL_REV_ID = 0x06
    PAGE_ID = 0x07
    ACC_DATA_X_LSB = 0x08
    ACC_DATA_X_MSB = 0x09
    ACC_DATA_Y_LSB = 0x0A
    ACC_DATA_Y_MSB = 0x0B
    ACC_DATA_Z_LSB = 0x0C
    ACC_DATA_Z_MSB = 0x0D
    MAG_DATA_X_LSB = 0x0E
    MAG_DATA_X_MSB = 0x0F
    MAG_DATA_Y_LSB = 0x10
    MAG_DATA_Y_MSB = 0x11
    MAG_DATA_Z_LSB = 0x12
    MAG_DATA_Z_MSB = 0x13
    GYR_DATA_X_LSB = 0x14
    GYR_DATA_X_MSB = 0x15
    GYR_DATA_Y_LSB = 0x16
    GYR_DATA_Y_MSB = 0x17
    GYR_DATA_Z_LSB = 0x18
    GYR_DATA_Z_MSB = 0x19
    EUL_HEADING_LSB = 0x1A
    EUL_HEADING_MSB = 0x1B
    EUL_ROLL_LSB = 0x1C
    EUL_ROLL_MSB = 0x1D
    EUL_PITCH_LSB = 0x1E
    EUL_PITCH_MSB = 0x1F
    QUA_DATA_W_LSB = 0x20
    QUA_DATA_W_MSB = 0x21
    QUA_DATA_X_LSB = 0x22
    QUA_DATA_X_MSB = 0x23
    QUA_DATA_Y_LSB = 0x24
    QUA_DATA_Y_MSB = 0x25
    QUA_DATA_Z_LSB = 0x26
    QUA_DATA_Z_MSB = 0x27
    LIA_DATA_X_LSB = 0x28
    LIA_DATA_X_MSB = 0x29
    LIA_DATA_Y_LSB = 0x2A
    LIA_DATA_Y_MSB = 0x2B
    LIA_DATA_Z_LSB = 0x2C
    LIA_DATA_Z_MSB = 0x2D
    GRV_DATA_X_LSB = 0x2E
    GRV_DATA_X_MSB = 0x2F
    GRV_DATA_Y_LSB = 0x30
    GRV_DATA_Y_MSB = 0x31
    GRV_DATA_Z_LSB = 0x32
    GRV_DATA_Z_MSB = 0x33
    TEMP = 0x34
    CALIB_STAT = 0x35
    ST_RESULT = 0x36
    INT_STATUS = 0x37
    SYS_CLK_STATUS = 0x38
    SYS_STATUS = 0x39
    SYS_ERR = 0x3A
    UNIT_SEL = 0x3B
    OPR_MODE = 0x3D
    PWR_MODE = 0x3E
    SYS_TRIGGER = 0x3F
    TEMP_SOURCE = 0x40
    AXIS_MAP_CONFIG = 0x41
    AXIS_MAP_SIGN = 0x42
    ACC_OFFSET_X_LSB = 0x55
    ACC_OFFSET_X_MSB = 0x56
    ACC_OFFSET_Y_LSB = 0x57
    ACC_OFFSET_Y_MSB = 0x58
    ACC_OFFSET_Z_LSB = 0x59
    ACC_OFFSET_Z_MSB = 0x5A
    MAG_OFFSET_X_LSB = 0x5B
    MAG_OFFSET_X_MSB = 0x5C
    MAG_OFFSET_Y_LSB = 0x5D
    MAG_OFFSET_Y_MSB = 0x5E
    MAG_OFFSET_Z_LSB = 0x5F
    MAG_OFFSET_Z_MSB = 0x60
    GYR_OFFSET_X_LSB = 0x61
    GYR_OFFSET_X_MSB = 0x62
    GYR_OFFSET_Y_LSB = 0x63
    GYR_OFFSET_Y_MSB = 0x64
    GYR_OFFSET_Z_LSB = 0x65
    GYR_OFFSET_Z_MSB = 0x66
    ACC_RADIUS_LSB = 0x67
    ACC_RADIUS_MSB = 0x68
    MAG_RADIUS_LSB = 0x69
    MAG_RADIUS_MSB = 0x6A

    # Page 1
    ACC_CONFIG = 0x08
    MAG_CONFIG = 0x09
    GYRO_CONFIG_0 = 0x0A
    GYRO_CONFIG_1 = 0x0B
    ACC_SLEEP_CONFIG = 0x0C
    GYR_SLEEP_CONFIG = 0x0D
    INT_MSK = 0x0F
    INT_EN = 0x10
    ACC_AM_THRES = 0x11
    ACC_INT_SETTINGS = 0x12
    ACC_HG_DURATION = 0x13
    ACC_HG_THRESH = 0x14
    ACC_NM_THRESH = 0x15
    ACC_NM_SET = 0x16
    GYR_INT_SETTINGS = 0x17
    GYR_HR_X_SET = 0x18
    GYR_DUR_X = 0x19
    GYR_HR_Y_SET = 0x1A
    GYR_DUR_Y = 0x1B
    GYR_HR_Z_SET = 0x1C
    GYR_DUR_Z = 0x1D
    GYR_AM_THRESH = 0x1E
    GYR_AM_SET = 0x1F


class SystemStatus(IntEnum):
    """Values of the SYS_STATUS register."""

    IDLE = 0x00
    SYSTEM_ERROR = 0x01
    INITIALIZING_PERIPHERALS = 0x02
    SYSTEM_INITIALIZATION = 0x03
    EXECUTING_SELF_TEST = 0x04
    FUSION_ALGO_RUNNING = 0x05
    FUSION_ALGO_NOT_RUNNING = 0x06


class OperationMode(IntEnum):
    """Operation modes selected through the OPR_MODE register."""

    CONFIG = 0x00
    # Sensor modes
    ACCONLY = 0x01
    MAGONLY = 0x02
    GYRONLY = 0x03
    ACCMAG = 0x04
    ACCGYRO = 0x05
    MAGGYRO = 0x06
    AMG = 0x07
    # Fusion modes
    IMU = 0x08
    COMPASS = 0x09
    M4G = 0x0A
    NDOF_FMC_OFF = 0x0B
    NDOF = 0x0C

    def settle_ms(self) -> int:
        """Milliseconds to wait after switching into this mode."""
        return 19 if self is OperationMode.CONFIG else 7


class VectorType(IntEnum):
    """Output vectors, each named by the address of its first data register."""

    ACCELEROMETER = 0x08  # m/s^2
    MAGNETOMETER = 0x0E  # uT
    GYROSCOPE = 0x14  # rad/s
    EULER = 0x1A  # degrees
    QUATERNION = 0x20  # no units
    LINEARACCEL = 0x28  # m/s^2
    GRAVITY = 0x2E  # m/s^2

    def scale(self) -> int:
        """Divisor turning raw register counts into the output unit."""
        return _VECTOR_SCALES[self]

    def length(self) -> int:
        """Number of data bytes the vector occupies."""
        return 8 if self is VectorType.QUATERNION else 6


_VECTOR_SCALES = {
    VectorType.ACCELEROMETER: ACCEL_SCALE,
    VectorType.MAGNETOMETER: MAG_SCALE,
    VectorType.GYROSCOPE: ANGULAR_RATE_SCALE,
    VectorType.EULER: EULER_SCALE,
    VectorType.QUATERNION: QUATERNION_SCALE,
    VectorType.LINEARACCEL: ACCEL_SCALE,
    VectorType.GRAVITY: ACCEL_SCALE,
}


class SystemError(IntEnum):  # noqa: A001 - named after the SYS_ERR register
    """Values of the SYS_ERR register."""

    NO_ERROR = 0x00
    PERIPHERAL_INITIALIZATION_ERROR = 0x01
    SYSTEM_INITIALIZATION_ERROR = 0x02
    SELF_TEST_FAILED = 0x03
    REG_MAP_VAL_OUT_OF_RANGE = 0x04
    REG_MAP_ADDR_OUT_OF_RANGE = 0x05
    REG_MAP_WRITE_ERROR = 0x06
    LOW_PWR_MODE_NOT_AVAILABLE_FOR_SELECTED_OPR_MODE = 0x07
    ACCEL_PWR_MODE_NOT_AVAILABLE = 0x08
    FUSION_ALGO_CONF_ERROR = 0x09
    SENSOR_CONF_ERROR = 0x0A


class Axis(IntEnum):
    """Axis selector used in the axis remap register."""

    X = 0x00
    Y = 0x01
    Z = 0x02


class AxisSign(IntEnum):
    """Axis sign used in the axis sign register."""

    POSITIVE = 0x00
    NEGATIVE = 0x01