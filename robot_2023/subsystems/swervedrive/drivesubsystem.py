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
import math
from enum import Enum
from typing import Optional, Sequence, Tuple

from commands2 import Subsystem
from pykit.autolog import autolog_output, autologgable_output
from pykit.logger import Logger
from wpilib import SmartDashboard
from wpimath.geometry import Pose2d, Rotation2d
from wpimath.kinematics import ChassisSpeeds, SwerveModulePosition, SwerveModuleState

from lib_swerve.subsystems.gyro.gyro import Gyro, GyroIO
from lib_swerve.util.logtracer import LogTracer
from robot_2023.subsystems.swervedrive.command_mapper import ChassisCommandMapper
from robot_2023.subsystems.swervedrive.constants import DriveConfig, VirtualGear
from robot_2023.subsystems.swervedrive.kinematics import ChassisKinematics
from robot_2023.subsystems.swervedrive.odometry import ChassisOdometry
from robot_2023.subsystems.swervedrive.swervemodule import SwerveModule

logger = logging.getLogger(__name__)


class DriveMode(Enum):
    DRIVE = 0
    LOCKED = 1  # Wheels held in an X formation


@autologgable_output
class DriveSubsystem(Subsystem):
    """
    Swerve drivetrain. Each cycle the driver command is mapped to a chassis
    velocity, split into module states and sent to the four modules; the module
    feedback then updates odometry.
    """
    def __init__(self, config: DriveConfig, modules: Sequence[SwerveModule], gyro: Gyro) -> None:
        super().__init__()

        if len(modules) != 4:
            raise ValueError(f"Expected four swerve modules, got {len(modules)}")

        self._config = config
        self._counter = 0
        self._mode = DriveMode.DRIVE

        self.frontLeft, self.frontRight, self.rearLeft, self.rearRight = modules
        self.swerve_modules: Tuple[SwerveModule, ...] = tuple(modules)

        self.kinematics = ChassisKinematics(config.module_positions, config.min_module_speed)
        # Wheels hold wherever they start until first driven
        self.kinematics.reset_headings([state.angle for state in self.get_module_states()])
        self.mapper = ChassisCommandMapper(config)

        # The gyro/IMU sensor
        self._gyro = gyro
        self._gyro.initialize()
        self._gyro_inputs = GyroIO.GyroIOInputs()
        self._gyro.updateInputs(self._gyro_inputs)

        self._heading = Rotation2d(self._gyro_inputs.yaw)
        self._heading_valid = True

        # Odometry class for tracking robot pose
        self.odometry = ChassisOdometry(self.kinematics, self._heading, self.get_module_positions())

    @property
    def gyro(self) -> Gyro:
        return self._gyro

    @property
    def mode(self) -> DriveMode:
        return self._mode

    @property
    def gear(self) -> VirtualGear:
        return self.mapper.gear

    def periodic(self) -> None:
        LogTracer.resetOuter("DriveSubsystem")
        self._counter += 1

        self._gyro.periodic(self._gyro_inputs)
        Logger.processInputs("Drive/Gyro", self._gyro_inputs)
        heading = self._update_heading()
        LogTracer.record("Gyro")

        for module in self.swerve_modules:
            module.periodic()
        LogTracer.record("Modules")

        # Update the odometry in the periodic block
        pose = self.odometry.update(self.get_module_positions(), heading)
        LogTracer.record("Odometry")

        if self._mode == DriveMode.LOCKED:
            self.set_x_formation()

        Logger.recordOutput("Drive/Mode", self._mode.name)
        Logger.recordOutput("Drive/Gear", self.gear.name)
        Logger.recordOutput("Drive/ModuleStates", list(self.get_module_states()))

        # Update SmartDashboard for this subsystem at a rate slower than the period
        if self._counter % 20 == 0:
            logger.debug(f"Drive periodic: heading: {heading}, x: {pose.x}, y: {pose.y}, "
                         f"rot: {pose.rotation().degrees()}")
            self.dashboard_periodic()

        LogTracer.recordTotal()

    def _update_heading(self) -> Optional[Rotation2d]:
        """
        Latest gyro heading, or None if the gyro is not reporting. The last good
        heading is kept for field relative driving.
        """
        heading = self._gyro_inputs.heading()
        valid = heading is not None

        if valid != self._heading_valid:
            if valid:
                logger.info("Gyro reporting again")
            else:
                logger.warning(f"Gyro not reporting, holding heading at {self._heading.degrees():.1f} degrees")
            self._heading_valid = valid

        if valid:
            self._heading = heading

        return heading

    ##########################################################################
    # Driving

    def drive(self, x_speed: float, y_speed: float, rotation: float, field_relative: bool = True) -> None:
        """Method to drive the robot using joystick info.

        :param x_speed:        Speed of the robot in the x direction (forward), [-1, 1]
        :param y_speed:        Speed of the robot in the y direction (sideways), [-1, 1]
        :param rotation:       Angular rate of the robot, [-1, 1]
        :param field_relative: Whether the provided x and y speeds are relative to the field.
        """
        if self._mode == DriveMode.LOCKED:
            return

        speeds = self.mapper.map(x_speed, y_speed, rotation, field_relative, heading=self._heading)
        self.drive_robot_relative(speeds)

    def drive_robot_relative(self, speeds: ChassisSpeeds) -> None:
        states = self.kinematics.forward(speeds)
        self.setModuleStates(states)

    def setModuleStates(self, desired_states: Sequence[SwerveModuleState]) -> None:
        """Sets the swerve ModuleStates.

        :param desired_states: The desired SwerveModule states.
        """
        desired_states = self.kinematics.desaturate(desired_states, self._config.max_speed)

        for module, state in zip(self.swerve_modules, desired_states):
            module.setDesiredState(state)

    def set_x_formation(self) -> None:
        """Sets the wheels into an X formation to prevent movement."""
        states = self.mapper.wheels_to_x_formation()
        self.kinematics.reset_headings([state.angle for state in states])

        for module, state in zip(self.swerve_modules, states):
            module.setDesiredState(state)

    def lock(self) -> None:
        if self._mode != DriveMode.LOCKED:
            logger.info("Drive locked in X formation")
            self._mode = DriveMode.LOCKED

        self.set_x_formation()

    def unlock(self) -> None:
        if self._mode != DriveMode.DRIVE:
            logger.info("Drive unlocked")
            self._mode = DriveMode.DRIVE

    def stop(self) -> None:
        for module in self.swerve_modules:
            module.stop()

        self.mapper.reset()

    def set_virtual_high_gear(self) -> None:
        self.mapper.set_virtual_gear(VirtualGear.HIGH)

    def set_virtual_low_gear(self) -> None:
        self.mapper.set_virtual_gear(VirtualGear.LOW)

    ##########################################################################
    # Pose and heading

    def get_heading(self) -> Rotation2d:
        return self._heading

    @autolog_output(key="Odometry/Robot")
    def get_pose(self) -> Pose2d:
        """Returns the currently-estimated pose of the robot.

        :returns: The pose.
        """
        return self.odometry.pose

    def reset_odometry(self, pose: Pose2d) -> None:
        """Resets the odometry to the specified pose.

        :param pose: The pose to which to set the odometry.
        """
        self.odometry.reset(pose, self.get_module_positions(), self._heading)

    def reset_gyro(self) -> None:
        """
        Make the direction the robot is facing now field forward
        """
        self._gyro.reset()
        self._gyro.updateInputs(self._gyro_inputs)
        self._heading = Rotation2d(self._gyro_inputs.yaw)

        pose = self.get_pose()
        self.odometry.reset(Pose2d(pose.translation(), Rotation2d()), self.get_module_positions(), self._heading)

    def resetEncoders(self) -> None:
        """
        Resets the drive encoders to currently read a position of 0
        """
        for module in self.swerve_modules:
            module.resetEncoders()

        self.odometry.reset(self.get_pose(), self.get_module_positions(), self._heading)

    def get_module_positions(self) -> Tuple[SwerveModulePosition, ...]:
        return tuple(m.getPosition() for m in self.swerve_modules)

    def get_module_states(self) -> Tuple[SwerveModuleState, ...]:
        return tuple(m.getState() for m in self.swerve_modules)

    def get_robot_relative_speeds(self) -> ChassisSpeeds:
        return self.kinematics.inverse(self.get_module_states())

    ######################
    # SmartDashboard support

    def dashboard_initialize(self) -> None:
        self._gyro.dashboard_initialize()

    def dashboard_periodic(self) -> None:
        """
        Called from periodic function to update dashboard elements for this subsystem
        """
        pose = self.get_pose()
        SmartDashboard.putNumber("Drive/x", pose.x)
        SmartDashboard.putNumber("Drive/y", pose.y)
        SmartDashboard.putNumber("Drive/heading", pose.rotation().degrees())
        SmartDashboard.putString("Drive/gear", self.gear.name)
        SmartDashboard.putBoolean("Drive/locked", self._mode == DriveMode.LOCKED)

        for module in self.swerve_modules:
            SmartDashboard.putBoolean(f"Drive/{module.name}/connected", module.connected)

        self._gyro.dashboard_periodic()

    ######################
    # Simulation support

    def simulationPeriodic(self, **kwargs) -> float:
        """
        Called by the physics engine. Moves the simulated wheels and turns the
        simulated gyro by the rotation the wheels produce.
        """
        tm_diff = kwargs.get("tm_diff", 0.0)

        for module in self.swerve_modules:
            module.sim_step(tm_diff)

        if hasattr(self._gyro, "sim_yaw"):
            omega = self.get_robot_relative_speeds().omega
            self._gyro.sim_rate = math.degrees(omega)
            self._gyro.sim_yaw += math.degrees(omega * tm_diff)

        return 0.0
