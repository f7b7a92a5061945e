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
from typing import Sequence, Tuple

from wpimath.geometry import Rotation2d, Translation2d, Twist2d
from wpimath.kinematics import ChassisSpeeds, SwerveDrive4Kinematics, SwerveModulePosition, SwerveModuleState
from wpimath.units import meters_per_second

logger = logging.getLogger(__name__)

SwerveModuleStates = Tuple[SwerveModuleState, SwerveModuleState, SwerveModuleState, SwerveModuleState]
SwerveModulePositions = Tuple[SwerveModulePosition, SwerveModulePosition, SwerveModulePosition, SwerveModulePosition]


class ChassisKinematics:
    """
    Maps a chassis velocity to the four module states that produce it, and back.

    Modules are always ordered front-left, front-right, back-left, back-right.
    The kinematics matrix is built once from the module geometry.
    """
    def __init__(self, module_positions: Sequence[Translation2d], min_module_speed: meters_per_second) -> None:
        if len(module_positions) != 4:
            raise ValueError(f"Expected four module positions, got {len(module_positions)}")

        self._kinematics = SwerveDrive4Kinematics(*module_positions)
        self._min_module_speed = min_module_speed

        # Last angle commanded to each module, held when its speed is ~zero
        self._headings = [Rotation2d(), Rotation2d(), Rotation2d(), Rotation2d()]

    def forward(self, speeds: ChassisSpeeds) -> SwerveModuleStates:
        """
        Convert a robot-relative chassis velocity into module states.

        A module whose computed speed is below the minimum module speed keeps the
        angle it was last commanded so it does not flip around chasing the noise
        in a near zero velocity vector.
        """
        states = []

        for index, state in enumerate(self._kinematics.toSwerveModuleStates(speeds)):
            if abs(state.speed) < self._min_module_speed:
                state = SwerveModuleState(0.0, self._headings[index])
            else:
                self._headings[index] = state.angle

            states.append(state)

        return tuple(states)

    def inverse(self, states: Sequence[SwerveModuleState]) -> ChassisSpeeds:
        """
        Convert four module states back into the robot-relative chassis velocity
        """
        return self._kinematics.toChassisSpeeds(tuple(states))

    def to_twist(self, start: Sequence[SwerveModulePosition], end: Sequence[SwerveModulePosition]) -> Twist2d:
        """
        Robot-relative displacement implied by the change in module positions
        between 'start' and 'end'
        """
        return self._kinematics.toTwist2d(tuple(start), tuple(end))

    def reset_headings(self, headings: Sequence[Rotation2d]) -> None:
        """
        Replace the angles held for modules commanded to ~zero speed. Call this
        when the modules are pointed some other way than through 'forward'
        """
        if len(headings) != 4:
            raise ValueError(f"Expected four module headings, got {len(headings)}")

        self._headings = list(headings)

    @staticmethod
    def desaturate(states: Sequence[SwerveModuleState], max_speed: meters_per_second) -> SwerveModuleStates:
        """
        If any module would exceed 'max_speed', scale all four speeds down by the
        same ratio so the chassis keeps its direction of travel
        """
        return SwerveDrive4Kinematics.desaturateWheelSpeeds(tuple(states), max_speed)
