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
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from wpimath import units
from wpimath.geometry import Translation2d
from wpimath.units import meters_per_second, radians, radians_per_second, seconds

from lib_swerve.actuators.actuator import ActuatorConfig


class VirtualGear(Enum):
    """Software speed scaling that emulates a two speed gearbox"""
    LOW = 0
    HIGH = 1


class NeoMotorConstants:
    FREE_SPEED_RPM = 5676


class ModuleConstants:
    """
    REV MAXSwerve module built with NEOs, SparkMax controllers and a through bore
    absolute encoder on the turning shaft.
    """
    # The MAXSwerve module can be configured with one of three pinion gears: 12T, 13T, or 14T.
    DRIVING_MOTOR_PINION_TEETH = 12

    DRIVING_MOTOR_FREE_SPEED_RPS = NeoMotorConstants.FREE_SPEED_RPM / 60
    WHEEL_DIAMETER = 0.0762  # meters, 3 inch wheels
    WHEEL_CIRCUMFERENCE = WHEEL_DIAMETER * math.pi

    # 45 teeth on the wheel's bevel gear, 22 teeth on the first-stage spur gear, 15 teeth on the bevel pinion
    DRIVING_MOTOR_REDUCTION = (45.0 * 22) / (DRIVING_MOTOR_PINION_TEETH * 15)
    DRIVE_WHEEL_FREE_SPEED: meters_per_second = (DRIVING_MOTOR_FREE_SPEED_RPS * WHEEL_CIRCUMFERENCE) \
                                                / DRIVING_MOTOR_REDUCTION

    DRIVING_ENCODER_POSITION_FACTOR = WHEEL_CIRCUMFERENCE / DRIVING_MOTOR_REDUCTION  # meters
    DRIVING_ENCODER_VELOCITY_FACTOR = DRIVING_ENCODER_POSITION_FACTOR / 60.0  # meters per second

    TURNING_ENCODER_POSITION_FACTOR = 2 * math.pi  # radians
    TURNING_ENCODER_VELOCITY_FACTOR = 2 * math.pi / 60.0  # radians per second

    # The output shaft rotates in the opposite direction of the steering motor
    TURNING_ENCODER_INVERTED = True

    TURNING_ENCODER_POSITION_PID_MIN_INPUT = 0  # radians
    TURNING_ENCODER_POSITION_PID_MAX_INPUT = TURNING_ENCODER_POSITION_FACTOR  # radians

    DRIVING_P = 0.04
    DRIVING_I = 0
    DRIVING_D = 0
    DRIVING_FF = 1 / DRIVE_WHEEL_FREE_SPEED

    TURNING_P = 1
    TURNING_I = 0
    TURNING_D = 0
    TURNING_FF = 0

    DRIVING_MOTOR_CURRENT_LIMIT = 24  # amp
    TURNING_MOTOR_CURRENT_LIMIT = 12  # amp

    DRIVING_MOTOR_CONFIG = ActuatorConfig(current_limit=DRIVING_MOTOR_CURRENT_LIMIT,
                                          brake=True,
                                          position_conversion_factor=DRIVING_ENCODER_POSITION_FACTOR,
                                          velocity_conversion_factor=DRIVING_ENCODER_VELOCITY_FACTOR,
                                          p=DRIVING_P, i=DRIVING_I, d=DRIVING_D, ff=DRIVING_FF,
                                          free_speed=DRIVE_WHEEL_FREE_SPEED)

    TURNING_MOTOR_CONFIG = ActuatorConfig(current_limit=TURNING_MOTOR_CURRENT_LIMIT,
                                          brake=True,
                                          position_conversion_factor=TURNING_ENCODER_POSITION_FACTOR,
                                          velocity_conversion_factor=TURNING_ENCODER_VELOCITY_FACTOR,
                                          p=TURNING_P, i=TURNING_I, d=TURNING_D, ff=TURNING_FF,
                                          absolute_encoder=True,
                                          encoder_inverted=TURNING_ENCODER_INVERTED,
                                          wrap_range=(TURNING_ENCODER_POSITION_PID_MIN_INPUT,
                                                      TURNING_ENCODER_POSITION_PID_MAX_INPUT))


class DriveConstants:
    # Driving Parameters - Note that these are not the maximum capable speeds of
    # the robot, rather the allowed maximum speeds
    MAX_SPEED_METERS_PER_SECOND: meters_per_second = 4.8
    MAX_ANGULAR_SPEED: radians_per_second = 2 * math.pi

    VIRTUAL_LOW_GEAR_RATE = 0.66
    VIRTUAL_HIGH_GEAR_RATE = 1.0

    ROTATIONAL_SLEW_RATE = 2.0  # percent per second (1 = 100%)

    # Below this wheel speed a module keeps its previous angle
    MIN_MODULE_SPEED: meters_per_second = 0.002

    DRIVE_DEADBAND = 0.05

    # Chassis configuration
    TRACK_WIDTH = units.inchesToMeters(26.5)
    # Distance between centers of right and left wheels on robot
    WHEEL_BASE = units.inchesToMeters(26.5)

    # Distance between front and back wheels on robot. Order is FL, FR, BL, BR
    MODULE_POSITIONS = (
        Translation2d(WHEEL_BASE / 2, TRACK_WIDTH / 2),
        Translation2d(WHEEL_BASE / 2, -TRACK_WIDTH / 2),
        Translation2d(-WHEEL_BASE / 2, TRACK_WIDTH / 2),
        Translation2d(-WHEEL_BASE / 2, -TRACK_WIDTH / 2),
    )

    # Angular offsets of the modules relative to the chassis in radians
    FRONT_LEFT_ANGULAR_CHASSIS_OFFSET = -math.pi / 2
    FRONT_RIGHT_ANGULAR_CHASSIS_OFFSET = 0
    BACK_LEFT_ANGULAR_CHASSIS_OFFSET = math.pi
    BACK_RIGHT_ANGULAR_CHASSIS_OFFSET = math.pi / 2

    ANGULAR_CHASSIS_OFFSETS = (FRONT_LEFT_ANGULAR_CHASSIS_OFFSET,
                               FRONT_RIGHT_ANGULAR_CHASSIS_OFFSET,
                               BACK_LEFT_ANGULAR_CHASSIS_OFFSET,
                               BACK_RIGHT_ANGULAR_CHASSIS_OFFSET)

    GYRO_REVERSED = False  # (affects field-relative driving)


@dataclass(frozen=True)
class DriveConfig:
    """
    Drivetrain configuration, built once by the robot container and handed to
    each part of the drivetrain that needs it.
    """
    max_speed: meters_per_second = DriveConstants.MAX_SPEED_METERS_PER_SECOND
    max_angular_speed: radians_per_second = DriveConstants.MAX_ANGULAR_SPEED
    gear_rates: Mapping[VirtualGear, float] = field(
        default_factory=lambda: MappingProxyType({VirtualGear.LOW: DriveConstants.VIRTUAL_LOW_GEAR_RATE,
                                                  VirtualGear.HIGH: DriveConstants.VIRTUAL_HIGH_GEAR_RATE}))
    rotational_slew_rate: float = DriveConstants.ROTATIONAL_SLEW_RATE
    period: seconds = 0.02
    deadband: float = DriveConstants.DRIVE_DEADBAND
    module_positions: Tuple[Translation2d, ...] = DriveConstants.MODULE_POSITIONS
    chassis_offsets: Tuple[radians, ...] = DriveConstants.ANGULAR_CHASSIS_OFFSETS
    min_module_speed: meters_per_second = DriveConstants.MIN_MODULE_SPEED

    def __post_init__(self) -> None:
        if len(self.module_positions) != 4 or len(self.chassis_offsets) != 4:
            raise ValueError("A swerve drive needs exactly four module positions and chassis offsets")

        if self.period <= 0.0:
            raise ValueError(f"Control period must be positive: {self.period}")

        if self.max_speed <= 0.0 or self.max_angular_speed <= 0.0:
            raise ValueError("Maximum linear and angular speeds must be positive")

        if self.rotational_slew_rate <= 0.0:
            raise ValueError(f"Rotational slew rate must be positive: {self.rotational_slew_rate}")

        if not 0.0 <= self.deadband < 1.0:
            raise ValueError(f"Deadband must be in [0, 1): {self.deadband}")

        missing = [gear.name for gear in VirtualGear if gear not in self.gear_rates]
        if missing:
            raise ValueError(f"No rate configured for virtual gear(s): {missing}")
