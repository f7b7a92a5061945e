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

from wpilib import SmartDashboard
from wpimath.geometry import Rotation2d
from wpimath.units import degrees, degrees_per_second, radians

from lib_swerve.subsystems.pykit.gyro_io import GyroIO


class Gyro(GyroIO):
    """
    Gyro is the base class for gyros on our system. Actual gyros are derived
    from this class.

    The yaw is continuous (not wrapped to +/- 180) and counter-clockwise positive.
    """
    gyro_type = "unknown"

    def __init__(self, is_reversed: bool) -> None:
        super().__init__()
        self._reversed = is_reversed

    def initialize(self) -> None:
        """
        Perform initial steps to get your gyro ready
        """
        self.reset()

    @property
    def is_reversed(self) -> bool:
        return self._reversed

    def reset(self) -> None:
        """
        Reset the gyro so the current direction becomes field forward
        """
        self.zero_yaw()

    def zero_yaw(self) -> None:
        raise NotImplementedError("Implement in derived class")

    @property
    def yaw(self) -> degrees:
        raise NotImplementedError("Implement in derived class")

    @property
    def heading(self) -> Rotation2d:
        """
        Returns the heading of the robot
        """
        return Rotation2d.fromDegrees(self.yaw)

    @property
    def turn_rate(self) -> float:
        """Returns the turn rate of the robot (in radians per second)

        :returns: The turn rate of the robot, in radians per second
        """
        return math.radians(self.turn_rate_degrees_per_second)

    @property
    def turn_rate_degrees_per_second(self) -> degrees_per_second:
        raise NotImplementedError("Implement in derived class")

    def set_yaw(self, yaw_rad: radians) -> None:
        raise NotImplementedError("Implement in derived class")

    def periodic(self, inputs: GyroIO.GyroIOInputs) -> None:
        """
        Perform any periodic maintenance
        """
        self.updateInputs(inputs)

    ######################
    # SmartDashboard support

    def dashboard_initialize(self) -> None:
        SmartDashboard.putString('Gyro/type', self.gyro_type)

    def dashboard_periodic(self) -> None:
        """
        Called from periodic function to update dashboard elements for this subsystem
        """
        SmartDashboard.putNumber('Gyro/yaw', self.yaw)
        SmartDashboard.putNumber('Gyro/rate', self.turn_rate_degrees_per_second)
