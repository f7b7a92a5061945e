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
#
# Robot wide constants. Subsystem constants live beside their subsystems

import os
from enum import Enum, IntEnum, unique

from wpilib import RobotBase
from wpimath.units import hertz, seconds


class RobotModes(Enum):
    """Enum for robot modes."""
    REAL = 1
    SIMULATION = 2
    REPLAY = 3


SIM_MODE = (
    RobotModes.REPLAY if "LOG_PATH" in os.environ and os.environ["LOG_PATH"] != ""
    else RobotModes.SIMULATION
)
ROBOT_MODE = RobotModes.REAL if RobotBase.isReal() else SIM_MODE

###############################################################################
# Controllers
DRIVER_CONTROLLER_PORT = 1
OPERATOR_CONTROLLER_PORT = 0

# Trigger travel before the left trigger selects high gear
HIGH_GEAR_TRIGGER_THRESHOLD = 0.5

DEFAULT_FREQUENCY: hertz = 50.0
DEFAULT_PERIOD: seconds = 1.0 / DEFAULT_FREQUENCY

###############################################################################
# Device CAN bus IDs


@unique
class DeviceID(IntEnum):
    DRIVETRAIN_LEFT_FRONT_DRIVING_ID = 14
    DRIVETRAIN_LEFT_FRONT_TURNING_ID = 15

    DRIVETRAIN_RIGHT_FRONT_DRIVING_ID = 12
    DRIVETRAIN_RIGHT_FRONT_TURNING_ID = 13

    DRIVETRAIN_LEFT_REAR_DRIVING_ID = 16
    DRIVETRAIN_LEFT_REAR_TURNING_ID = 17

    DRIVETRAIN_RIGHT_REAR_DRIVING_ID = 10
    DRIVETRAIN_RIGHT_REAR_TURNING_ID = 11

    GYRO_DEVICE_ID = 9

    ARM_DEVICE_ID = 26


POWER_DISTRIBUTION_ID = 1
