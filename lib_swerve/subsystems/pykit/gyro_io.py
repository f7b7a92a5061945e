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
from dataclasses import dataclass
from typing import Optional

from wpimath.geometry import Rotation2d
from wpimath.units import radians, radians_per_second

from pykit.autolog import autolog


class GyroIO:
    """
    Boundary between the drivetrain and its heading sensor. Everything the
    drivetrain needs from the sensor passes through GyroIOInputs, so a log
    replay can stand in for the hardware.
    """
    @autolog
    @dataclass
    class GyroIOInputs:
        """
        Heading sensor readings.

        'yaw' is counter-clockwise positive and continuous, so a full turn reads
        2 pi rather than 0. While 'connected' is False the other fields keep the
        last reading the sensor gave.
        """
        connected: bool = False
        yaw: radians = 0.0
        yaw_rate: radians_per_second = 0.0

        def heading(self) -> Optional[Rotation2d]:
            """Heading to use this cycle, or None if the reading is stale"""
            return Rotation2d(self.yaw) if self.connected else None

    def updateInputs(self, inputs: GyroIOInputs) -> None:
        raise NotImplementedError("Implement in derived class")
