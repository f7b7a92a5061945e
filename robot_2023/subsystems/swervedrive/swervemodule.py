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

from pykit.logger import Logger
from wpimath.geometry import Rotation2d
from wpimath.kinematics import SwerveModulePosition, SwerveModuleState
from wpimath.units import radians

from lib_swerve.actuators.actuator import Actuator
from lib_swerve.subsystems.pykit.swervedrive_io import SwerveModuleIO

logger = logging.getLogger(__name__)


class SwerveModule(SwerveModuleIO):
    """
    One corner of the drivetrain: a drive actuator working in meters and
    meters/second and a turn actuator working in radians with continuous
    (wrapping) position control.

    Every module is mounted at a fixed angle to the chassis. That offset is added
    to requested angles and removed from measured ones, so states going in and
    out of this class are all relative to the chassis.
    """
    def __init__(self, drive: Actuator, turn: Actuator, chassis_angular_offset: radians, name: str) -> None:
        super().__init__(name)

        self._drive = drive
        self._turn = turn
        self._chassis_angular_offset = chassis_angular_offset

        self.inputs = SwerveModuleIO.SwerveModuleIOInputs()
        self._connected = True

        self._desired_state = SwerveModuleState(0.0, Rotation2d(self._turn.get_position() -
                                                                chassis_angular_offset))
        self._commanded_speed = 0.0
        self._commanded_angle: radians = self._turn.get_position()

        self._drive.set_position(0.0)

    @property
    def chassis_angular_offset(self) -> radians:
        return self._chassis_angular_offset

    @property
    def connected(self) -> bool:
        return self._drive.connected and self._turn.connected

    @property
    def commanded_angle(self) -> radians:
        """Raw angle last sent to the turn actuator, offset included"""
        return self._commanded_angle

    @property
    def commanded_speed(self) -> float:
        """Speed last sent to the drive actuator, after optimization"""
        return self._commanded_speed

    def getState(self) -> SwerveModuleState:
        """
        Returns the current state of the module relative to the chassis.
        """
        return SwerveModuleState(self._drive.get_velocity(),
                                  Rotation2d(self._turn.get_position() - self._chassis_angular_offset))

    def getPosition(self) -> SwerveModulePosition:
        """
        Returns the current position of the module relative to the chassis.
        """
        return SwerveModulePosition(self._drive.get_position(),
                                    Rotation2d(self._turn.get_position() - self._chassis_angular_offset))

    def getDesiredState(self) -> SwerveModuleState:
        return self._desired_state

    def setDesiredState(self, desired_state: SwerveModuleState) -> None:
        """Sets the desired state for the module.

        :param desired_state: Desired state with speed and angle, relative to the chassis.
        """
        if not (math.isfinite(desired_state.speed) and math.isfinite(desired_state.angle.radians())):
            raise ValueError(f"Module {self.name}: invalid desired state {desired_state}")

        self._desired_state = desired_state

        if not self._check_connection():
            # Losing either controller means we cannot trust where this wheel points, so
            # never drive it.  The rest of the drivetrain keeps going.
            self._commanded_speed = 0.0
            self._drive.set_velocity_setpoint(0.0)
            return

        # Apply chassis angular offset to the desired state, then optimize it
        # against where the wheel is now to avoid spinning further than 90 degrees.
        # The turn controller wraps, so it takes the short way to the angle.
        corrected_state = SwerveModuleState(desired_state.speed,
                                            desired_state.angle + Rotation2d(self._chassis_angular_offset))
        corrected_state.optimize(Rotation2d(self._turn.get_position()))

        self._commanded_speed = corrected_state.speed
        self._commanded_angle = corrected_state.angle.radians()

        self._drive.set_velocity_setpoint(self._commanded_speed)
        self._turn.set_position_setpoint(self._commanded_angle)

    def stop(self) -> None:
        """
        Stop the wheel and hold the current angle
        """
        self._commanded_speed = 0.0
        self._drive.set_velocity_setpoint(0.0)

    def resetEncoders(self) -> None:
        """
        Zeroes the drive distance. The turn angle comes from an absolute encoder and is left alone.
        """
        self._drive.set_position(0.0)

    def _check_connection(self) -> bool:
        connected = self.connected

        if connected != self._connected:
            if connected:
                logger.info(f"Module {self.name}: actuator communication restored")
            else:
                logger.warning(f"Module {self.name}: actuator communication lost, drive output zeroed")
            self._connected = connected

        return connected

    ########################################################################################
    # pykit / AdvantageScope support

    def updateInputs(self, inputs: SwerveModuleIO.SwerveModuleIOInputs) -> None:
        inputs.drive_connected = self._drive.connected
        inputs.turn_connected = self._turn.connected

        inputs.drive_position = self._drive.get_position()
        inputs.drive_velocity = self._drive.get_velocity()
        inputs.drive_applied = self._drive.applied_voltage
        inputs.drive_current = self._drive.output_current

        inputs.turn_position = self._turn.get_position()
        inputs.turn_velocity = self._turn.get_velocity()
        inputs.turn_applied = self._turn.applied_voltage
        inputs.turn_current = self._turn.output_current

        inputs.desired_speed = self._desired_state.speed
        inputs.desired_angle = self._desired_state.angle.radians()

    def periodic(self) -> None:
        self._check_connection()
        self.updateInputs(self.inputs)
        Logger.processInputs(f"Drive/Module{self.name}", self.inputs)

    ########################################################################################
    # Simulation support

    def sim_step(self, tm_diff: float) -> None:
        for actuator in (self._drive, self._turn):
            if hasattr(actuator, "step") and callable(getattr(actuator, "step")):
                actuator.step(tm_diff)
