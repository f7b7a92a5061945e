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

from wpimath.units import degrees, degrees_per_second, radians

from lib_swerve.subsystems.gyro.gyro import Gyro, GyroIO


class SimGyro(Gyro):
    """
    Gyro used during simulation and testing. The physics engine (or a test) sets
    the yaw directly.
    """
    gyro_type = "Simulated"

    def __init__(self, is_reversed: bool = False) -> None:
        super().__init__(is_reversed)

        self._yaw: degrees = 0.0
        self._rate: degrees_per_second = 0.0
        self.connected = True

    def zero_yaw(self) -> None:
        self._yaw = 0.0

    @property
    def yaw(self) -> degrees:
        return -self._yaw if self._reversed else self._yaw

    @property
    def sim_yaw(self) -> degrees:
        return self._yaw

    @sim_yaw.setter
    def sim_yaw(self, value: degrees) -> None:
        self._yaw = value

    @property
    def sim_rate(self) -> degrees_per_second:
        return self._rate

    @sim_rate.setter
    def sim_rate(self, value: degrees_per_second) -> None:
        self._rate = value

    @property
    def turn_rate_degrees_per_second(self) -> degrees_per_second:
        return -self._rate if self._reversed else self._rate

    def set_yaw(self, yaw_rad: radians) -> None:
        yaw = math.degrees(yaw_rad)
        self._yaw = -yaw if self._reversed else yaw

    def updateInputs(self, inputs: GyroIO.GyroIOInputs) -> None:
        inputs.connected = self.connected

        # A disconnected gyro leaves the last reading in place
        if self.connected:
            inputs.yaw = math.radians(self.yaw)
            inputs.yaw_rate = math.radians(self.turn_rate_degrees_per_second)
