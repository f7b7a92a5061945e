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
from typing import Optional, Sequence

from wpimath.geometry import Pose2d, Rotation2d, Twist2d
from wpimath.kinematics import SwerveModulePosition

from robot_2023.subsystems.swervedrive.kinematics import ChassisKinematics

logger = logging.getLogger(__name__)


class ChassisOdometry:
    """
    Tracks the robot's pose on the field from the swerve module positions and
    the gyro heading.

    Each update only uses the change in module positions since the previous
    update, so resetting the pose never shows up as motion.
    """
    def __init__(self, kinematics: ChassisKinematics,
                 heading: Rotation2d,
                 positions: Sequence[SwerveModulePosition],
                 initial_pose: Pose2d = Pose2d()) -> None:
        self._kinematics = kinematics
        self._pose = initial_pose
        self._previous_positions = self._copy(positions)

        # Difference between the field heading and the gyro heading
        self._heading_offset = initial_pose.rotation() - heading
        self._previous_angle = initial_pose.rotation()
        self._previous_heading = heading

    @staticmethod
    def _copy(positions: Sequence[SwerveModulePosition]) -> tuple:
        if len(positions) != 4:
            raise ValueError(f"Expected four module positions, got {len(positions)}")

        return tuple(SwerveModulePosition(p.distance, p.angle) for p in positions)

    @property
    def pose(self) -> Pose2d:
        return self._pose

    def reset(self, pose: Pose2d, positions: Sequence[SwerveModulePosition],
              heading: Optional[Rotation2d] = None) -> None:
        """
        Teleport the robot to 'pose'. The position baseline and heading offset
        are replaced in the same step, so the next update measures motion from
        here and not from where the robot used to be.

        :param pose:      New field pose
        :param positions: Module positions at the time of the reset
        :param heading:   Gyro heading at the time of the reset, the last heading
                          seen is used if this is not supplied
        """
        baseline = self._copy(positions)
        heading = heading if heading is not None else self._previous_heading

        self._pose = pose
        self._previous_positions = baseline
        self._previous_heading = heading
        self._previous_angle = pose.rotation()
        self._heading_offset = pose.rotation() - heading

        logger.info(f"Odometry reset to {pose}")

    def update(self, positions: Sequence[SwerveModulePosition], heading: Optional[Rotation2d]) -> Pose2d:
        """
        Add the motion since the previous update to the pose.

        :param positions: Current module positions (cumulative distance, chassis relative angle)
        :param heading:   Current gyro heading. If None the gyro reading is stale, and
                          the rotation the wheels report is used instead of assuming
                          the robot did not turn.

        :returns: The updated pose
        """
        current = self._copy(positions)
        twist = self._kinematics.to_twist(self._previous_positions, current)

        if heading is None:
            angle = self._previous_angle + Rotation2d(twist.dtheta)
            self._previous_heading = angle - self._heading_offset
        else:
            angle = heading + self._heading_offset
            self._previous_heading = heading

        twist = Twist2d(twist.dx, twist.dy, (angle - self._previous_angle).radians())
        new_pose = self._pose.exp(twist)

        self._previous_positions = current
        self._previous_angle = angle
        self._pose = Pose2d(new_pose.translation(), angle)

        return self._pose
