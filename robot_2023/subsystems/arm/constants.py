# ------------------------------------------------------------------------ #
#      o-o      o                o                                         #
#     /         |                |                                         #
#    O     o  o O-o  o-o o-o     |  oo o--o o-o o-o                        #
#     \    |  | |  | |-' |   \   o | | |  |  /   /                         #
#      o-o o--O o-o  o-o o    o-o  o-o-o--O o-o o-o                        #
#             |                           |                                #
#          o--o                        o--o                                #
#                        o--o      o         o                             #
#                        |   |     |         |  o                          #
#                        O-Oo  o-o O-o  o-o -o-    o-o o-o                 #
#                        |  \  | | |  | | |  |  | |     \                  #
#                        o   o o-o o-o  o-o  o  |  o-o o-o                 #
#                                                                          #
#    Jemison High School - Huntsville Alabama                              #
# ------------------------------------------------------------------------ #

import math
from dataclasses import dataclass

from wpimath.units import radians, radians_per_second, radians_per_second_squared, seconds, volts

from lib_swerve.actuators.actuator import ActuatorConfig


class ArmConstants:
    POSITION_00: radians = 0.0  # home position
    POSITION_01: radians = 0.83  # test position (parallel to ground)
    POSITION_02: radians = 3.14  # high scoring position
    POSITION_03: radians = 3.45  # human player position

    PRESET_POSITIONS = (POSITION_00, POSITION_01, POSITION_02, POSITION_03)

    HOME_POSITION: radians = POSITION_00
    HOME_DIRECTION = -1  # The arm moves toward negative angles to reach home

    SOFT_LIMIT_REVERSE: radians = -0.1
    SOFT_LIMIT_FORWARD: radians = 4.5

    ARM_LEFT_LIMIT_SWITCH_DIO_CHANNEL = 0
    ARM_RIGHT_LIMIT_SWITCH_DIO_CHANNEL = 2

    ARM_CURRENT_LIMIT = 34  # amps
    ARM_MANUAL_SCALED = 0.42
    ARM_HOMING_POWER = 0.1  # duty cycle used to find home

    # Test mode walks the arm through the presets open loop
    ARM_TEST_POWER = 0.2
    ARM_TEST_TOLERANCE: radians = 0.05

    ARM_GEAR_RATIO = 1.0 / 224  # 1:224 planetary gear ratio
    POSITION_CONVERSION_FACTOR = ARM_GEAR_RATIO * 2.0 * math.pi
    VELOCITY_CONVERSION_FACTOR = ARM_GEAR_RATIO * 2.0 * math.pi / 60.0
    ARM_FREE_SPEED: radians_per_second = 5676.0 * VELOCITY_CONVERSION_FACTOR

    # Arm angle (radians) where gravity has no torque on the arm
    ARM_ZERO_COSINE_OFFSET: radians = -math.pi / 6

    ARM_KS: volts = 0.0
    ARM_KG: volts = 0.4
    ARM_KV = 12.0 / ARM_FREE_SPEED  # volt seconds per radian

    ARM_DEFAULT_P = 0.79
    ARM_DEFAULT_I = 0.02
    ARM_DEFAULT_D = 0.0

    ARM_MAX_VELOCITY: radians_per_second = 0.66
    ARM_MAX_ACCELERATION: radians_per_second_squared = 0.66

    MOTOR_CONFIG = ActuatorConfig(current_limit=ARM_CURRENT_LIMIT,
                                  brake=True,
                                  position_conversion_factor=POSITION_CONVERSION_FACTOR,
                                  velocity_conversion_factor=VELOCITY_CONVERSION_FACTOR,
                                  free_speed=ARM_FREE_SPEED)


@dataclass(frozen=True)
class ArmConfig:
    """
    Arm gains and limits, fixed once the controller is built
    """
    soft_limit_reverse: radians = ArmConstants.SOFT_LIMIT_REVERSE
    soft_limit_forward: radians = ArmConstants.SOFT_LIMIT_FORWARD
    home_position: radians = ArmConstants.HOME_POSITION
    home_direction: int = ArmConstants.HOME_DIRECTION
    zero_cosine_offset: radians = ArmConstants.ARM_ZERO_COSINE_OFFSET

    p: float = ArmConstants.ARM_DEFAULT_P
    i: float = ArmConstants.ARM_DEFAULT_I
    d: float = ArmConstants.ARM_DEFAULT_D

    ks: volts = ArmConstants.ARM_KS
    kg: volts = ArmConstants.ARM_KG
    kv: float = ArmConstants.ARM_KV

    max_velocity: radians_per_second = ArmConstants.ARM_MAX_VELOCITY
    max_acceleration: radians_per_second_squared = ArmConstants.ARM_MAX_ACCELERATION

    manual_scale: float = ArmConstants.ARM_MANUAL_SCALED
    homing_power: float = ArmConstants.ARM_HOMING_POWER
    period: seconds = 0.02

    def __post_init__(self) -> None:
        if self.soft_limit_reverse >= self.soft_limit_forward:
            raise ValueError(f"Reverse soft limit {self.soft_limit_reverse} must be below "
                             f"forward soft limit {self.soft_limit_forward}")

        if not self.soft_limit_reverse <= self.home_position <= self.soft_limit_forward:
            raise ValueError(f"Home position {self.home_position} is outside the soft limits")

        if self.home_direction not in (-1, 1):
            raise ValueError(f"Home direction must be -1 or 1: {self.home_direction}")

        if self.period <= 0.0:
            raise ValueError(f"Control period must be positive: {self.period}")

        if self.max_velocity <= 0.0 or self.max_acceleration <= 0.0:
            raise ValueError("Arm motion constraints must be positive")
