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

from wpimath.units import amperes, meters, meters_per_second, radians, radians_per_second, volts

from pykit.autolog import autolog

"""
SwerveModuleIO provides per-module drive and turn I/O to provide log information
for AdvantageScope replay and simulation.
"""


class SwerveModuleIO:
    @autolog
    @dataclass
    class SwerveModuleIOInputs:
        drive_connected: bool = False
        turn_connected: bool = False

        drive_position: meters = 0.0  # cumulative wheel travel
        drive_velocity: meters_per_second = 0.0
        drive_applied: volts = 0.0
        drive_current: amperes = 0.0

        turn_position: radians = 0.0  # raw, chassis offset not removed
        turn_velocity: radians_per_second = 0.0
        turn_applied: volts = 0.0
        turn_current: amperes = 0.0

        desired_speed: meters_per_second = 0.0
        desired_angle: radians = 0.0

    def __init__(self, name: str) -> None:
        self.name = name

    def updateInputs(self, inputs: SwerveModuleIOInputs) -> None:
        """Update the swerve module I/O inputs.

        Args:
            inputs (SwerveModuleIOInputs): The swerve module I/O inputs to update.
        """
        pass
