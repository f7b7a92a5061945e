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

import logging
from typing import Optional

from wpimath.filter import SlewRateLimiter
from wpimath.geometry import Rotation2d
from wpimath.kinematics import ChassisSpeeds, SwerveModuleState

from robot_2023.subsystems.swervedrive.constants import DriveConfig, VirtualGear
from robot_2023.subsystems.swervedrive.kinematics import SwerveModuleStates

logger = logging.getLogger(__name__)


def deadband(value: float, threshold: float) -> float:
    """
    Snap small values to zero. Values outside the deadband are returned unchanged,
    so there is a small step at the edge of the band.
    """
    return 0.0 if abs(value) < threshold else value


class ChassisCommandMapper:
    """
    Turns the normalized driver axes into a robot-relative chassis velocity.

    The rotation command is slew rate limited in fractions of full scale per
    second, measured on the robot clock between calls to 'map'.
    """
    def __init__(self, config: DriveConfig) -> None:
        self._config = config
        self._gear = VirtualGear.LOW

        self._rot_limiter = SlewRateLimiter(config.rotational_slew_rate)
        self._current_rotation = 0.0   # normalized, [-1, 1]

    @property
    def gear(self) -> VirtualGear:
        return self._gear

    @property
    def current_rotation(self) -> float:
        return self._current_rotation

    def set_virtual_gear(self, gear: VirtualGear) -> None:
        if gear not in self._config.gear_rates:
            raise ValueError(f"Unsupported virtual gear: {gear}")

        if gear != self._gear:
            logger.info(f"Virtual gear: {self._gear.name} -> {gear.name}")
            self._gear = gear

    def reset(self) -> None:
        """
        Clear the rotation slew limiter, used when drive commands stop
        """
        self._rot_limiter.reset(0.0)
        self._current_rotation = 0.0

    def map(self, x_speed: float, y_speed: float, rotation: float, field_relative: bool,
            gear: Optional[VirtualGear] = None, heading: Rotation2d = Rotation2d()) -> ChassisSpeeds:
        """Map joystick info into a chassis velocity.

        :param x_speed:        Speed of the robot in the x direction (forward), [-1, 1]
        :param y_speed:        Speed of the robot in the y direction (sideways), [-1, 1]
        :param rotation:       Angular rate of the robot, [-1, 1]
        :param field_relative: Whether the provided x and y speeds are relative to the field.
        :param gear:           Virtual gear to use, defaults to the currently selected gear
        :param heading:        Robot heading, only used when field relative

        :returns: Robot-relative chassis speeds
        """
        config = self._config
        gear_rate = config.gear_rates[gear if gear is not None else self._gear]

        x_speed = deadband(x_speed, config.deadband)
        y_speed = deadband(y_speed, config.deadband)
        rotation = deadband(rotation, config.deadband)

        # Convert the commanded speeds into the correct units for the drivetrain
        x_speed_delivered = x_speed * config.max_speed * gear_rate
        y_speed_delivered = y_speed * config.max_speed * gear_rate
        self._current_rotation = self._rot_limiter.calculate(rotation)
        rotation_delivered = self._current_rotation * config.max_angular_speed

        if field_relative:
            return ChassisSpeeds.fromFieldRelativeSpeeds(x_speed_delivered, y_speed_delivered,
                                                         rotation_delivered, heading)

        return ChassisSpeeds(x_speed_delivered, y_speed_delivered, rotation_delivered)

    @staticmethod
    def wheels_to_x_formation() -> SwerveModuleStates:
        """
        Module states that point each wheel at the middle of the robot, so the
        chassis resists being pushed. Ordered FL, FR, BL, BR.
        """
        return (SwerveModuleState(0, Rotation2d.fromDegrees(45)),
                SwerveModuleState(0, Rotation2d.fromDegrees(-45)),
                SwerveModuleState(0, Rotation2d.fromDegrees(135)),
                SwerveModuleState(0, Rotation2d.fromDegrees(-135)))
