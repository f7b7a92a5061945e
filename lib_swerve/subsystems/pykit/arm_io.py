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

from wpimath.units import amperes, radians, radians_per_second, volts

from pykit.autolog import autolog


class ArmIO:
    """
    Single joint arm I/O for AdvantageScope replay and simulation
    """
    @autolog
    @dataclass
    class ArmIOInputs:
        connected: bool = False

        position: radians = 0.0
        velocity: radians_per_second = 0.0
        applied: volts = 0.0
        current: amperes = 0.0

        left_limit_switch: bool = False
        right_limit_switch: bool = False

    def updateInputs(self, inputs: ArmIOInputs) -> None:
        pass
