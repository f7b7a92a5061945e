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

from pykit.logger import Logger
from wpimath.controller import ArmFeedforward, PIDController
from wpimath.trajectory import TrapezoidProfileRadians
from wpimath.units import radians, volts

from lib_swerve.actuators.actuator import Actuator
from robot_2023.subsystems.arm.constants import ArmConfig

logger = logging.getLogger(__name__)

# Below this speed (radians per second) the arm is considered at rest
AT_REST_VELOCITY = 0.01


class ArmMode(Enum):
    HOMING = 0      # Position reference not yet trusted
    AUTOMATIC = 1   # Closed loop tracking of a motion profiled target
    MANUAL = 2      # Operator power, target tracking suspended
    TESTING = 3     # Open loop diagnostics, soft limits not enforced


class ArmPositionController:
    """
    Single joint arm position control.

    In AUTOMATIC, a trapezoid motion profile moves an intermediate setpoint
    toward the target each cycle and the motor is given

        PID(setpoint, measured) + kS * sign(v) + kV * v + kG * cos(measured - zero_cosine_offset)

    where v is the profiled velocity. The gravity term holds the arm up so the
    PID only has to correct tracking error.

    The position sensor is relative, so the arm starts in HOMING and the
    position is only trusted once a limit switch has re-homed it.
    """
    def __init__(self, motor: Actuator, config: ArmConfig) -> None:
        self._motor = motor
        self._config = config

        self._mode = ArmMode.HOMING
        self._target: radians = config.home_position
        self._target_requested = False   # set_target_position called since leaving AUTOMATIC
        self._output = 0.0

        self._pid = PIDController(config.p, config.i, config.d, config.period)
        self._feedforward = ArmFeedforward(config.ks, config.kg, config.kv, 0.0, config.period)
        self._profile = TrapezoidProfileRadians(TrapezoidProfileRadians.Constraints(config.max_velocity,
                                                                                    config.max_acceleration))
        self._setpoint = self._measured_state()

    @property
    def mode(self) -> ArmMode:
        return self._mode

    @property
    def target(self) -> radians:
        return self._target

    @property
    def setpoint(self) -> TrapezoidProfileRadians.State:
        """Current motion profiled setpoint"""
        return self._setpoint

    @property
    def output(self) -> float:
        """
        Last motor output: volts in AUTOMATIC, duty cycle in the other modes
        """
        return self._output

    @property
    def position(self) -> radians:
        return self._motor.get_position()

    @property
    def velocity(self) -> float:
        return self._motor.get_velocity()

    def _measured_state(self) -> TrapezoidProfileRadians.State:
        return TrapezoidProfileRadians.State(self._motor.get_position(), self._motor.get_velocity())

    def _clamp(self, position: radians) -> radians:
        return max(self._config.soft_limit_reverse, min(self._config.soft_limit_forward, position))

    def _set_mode(self, mode: ArmMode) -> None:
        if mode != self._mode:
            logger.info(f"Arm mode: {self._mode.name} -> {mode.name}")
            if mode in (ArmMode.MANUAL, ArmMode.TESTING):
                self._target_requested = False

            self._mode = mode
            Logger.recordOutput("Arm/Mode", mode.name)

    def set_target_position(self, position: radians) -> radians:
        """
        Set a new target. Requests outside the soft limits are clamped to the
        nearest limit.

        :returns: The target actually stored
        """
        target = self._clamp(position)

        if target != position:
            logger.debug(f"Arm target {position:.3f} clamped to {target:.3f}")

        self._target_requested = True

        if target != self._target:
            self._target = target

            # Start the new profile from where the arm actually is
            self._setpoint = self._measured_state()

        return target

    def _resume_automatic(self) -> None:
        """
        Pick up closed loop control from wherever the arm was left. A target
        requested while out of AUTOMATIC is kept, otherwise the arm holds where it is.
        """
        if not self._target_requested:
            self._target = self._clamp(self._motor.get_position())

        self._setpoint = self._measured_state()
        self._pid.reset()
        self._set_mode(ArmMode.AUTOMATIC)

    def run_automatic(self) -> float:
        """
        Run one cycle of closed loop control. While HOMING the arm creeps toward
        home at a fixed power until the limit switch is hit.
        """
        if self._mode == ArmMode.HOMING:
            return self._apply_duty_cycle(self._config.home_direction * self._config.homing_power)

        if self._mode != ArmMode.AUTOMATIC:
            self._resume_automatic()

        position = self._motor.get_position()
        goal = TrapezoidProfileRadians.State(self._target, 0.0)
        self._setpoint = self._profile.calculate(self._config.period, self._setpoint, goal)

        feedback: volts = self._pid.calculate(position, self._setpoint.position)
        feedforward: volts = self._feedforward.calculate(position - self._config.zero_cosine_offset,
                                                         self._setpoint.velocity)
        self._output = feedback + feedforward
        self._motor.set_voltage(self._output)

        Logger.recordOutput("Arm/Target", self._target)
        Logger.recordOutput("Arm/Setpoint", self._setpoint.position)
        Logger.recordOutput("Arm/SetpointVelocity", self._setpoint.velocity)
        Logger.recordOutput("Arm/Output", self._output)
        return self._output

    def run_manual(self, power: float) -> float:
        """
        Drive the arm directly. Power is scaled down for finer control and is
        zeroed if it would push the arm past a soft limit. While still HOMING the
        position is not trusted, so the soft limits are not checked.
        """
        output = max(-1.0, min(1.0, power)) * self._config.manual_scale

        if self._mode == ArmMode.HOMING:
            return self._apply_duty_cycle(output)

        self._set_mode(ArmMode.MANUAL)
        position = self._motor.get_position()

        if (output > 0.0 and position >= self._config.soft_limit_forward) or \
                (output < 0.0 and position <= self._config.soft_limit_reverse):
            output = 0.0

        return self._apply_duty_cycle(output)

    def run_testing(self, power: float) -> float:
        """
        Open loop diagnostic drive. Soft limits are not enforced.
        """
        self._set_mode(ArmMode.TESTING)
        return self._apply_duty_cycle(max(-1.0, min(1.0, power)))

    def _apply_duty_cycle(self, output: float) -> float:
        self._output = output
        self._motor.set_duty_cycle(output)
        Logger.recordOutput("Arm/Output", output)
        return output

    def stop(self) -> None:
        """
        Stop the motor. When closed loop control resumes it holds the current position.
        """
        self._output = 0.0
        self._motor.stop()

        if self._mode != ArmMode.HOMING:
            self._target = self._clamp(self._motor.get_position())
            self._target_requested = False
            self._setpoint = self._measured_state()
            self._pid.reset()

    def on_limit_switch(self) -> bool:
        """
        A home limit switch was pressed. If the arm is travelling toward home or
        is at rest, the position sensor is re-anchored to the home angle. A press
        while travelling away from home is ignored.

        :returns: True if the arm was re-homed
        """
        velocity = self._motor.get_velocity()
        moving_away = abs(velocity) >= AT_REST_VELOCITY and \
            math.copysign(1, velocity) != self._config.home_direction

        if moving_away:
            logger.warning(f"Arm limit switch pressed while moving away from home "
                           f"(velocity: {velocity:.3f}, position: {self.position:.3f}), ignored")
            Logger.recordOutput("Arm/LimitSwitchAnomaly", True)
            return False

        home = self._config.home_position
        self._motor.set_position(home)
        self._setpoint = TrapezoidProfileRadians.State(home, 0.0)
        self._pid.reset()

        if self._mode == ArmMode.HOMING:
            self._target = home
            self._set_mode(ArmMode.AUTOMATIC)

        logger.info(f"Arm re-homed to {home:.3f}")
        Logger.recordOutput("Arm/LimitSwitchAnomaly", False)
        return True
