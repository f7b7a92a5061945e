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

from commands2 import Subsystem
from pykit.logger import Logger
from wpilib import DigitalInput, SmartDashboard
from wpimath.units import radians

from lib_swerve.actuators.actuator import Actuator
from lib_swerve.subsystems.pykit.arm_io import ArmIO
from robot_2023.subsystems.arm.arm_controller import ArmMode, ArmPositionController
from robot_2023.subsystems.arm.constants import ArmConfig, ArmConstants

logger = logging.getLogger(__name__)


class ArmSubsystem(Subsystem):
    """
    Single joint arm driven by one motor, with a pair of home limit switches.

    The limit switches are wired active low (a pressed switch reads False).
    """
    def __init__(self, motor: Actuator, limit_switches: Sequence[DigitalInput],
                 config: Optional[ArmConfig] = None) -> None:
        super().__init__()

        if len(limit_switches) != 2:
            raise ValueError(f"Expected two arm limit switches, got {len(limit_switches)}")

        self._motor = motor
        self._limit_switches = tuple(limit_switches)
        self._config = config or ArmConfig()
        self._counter = 0

        self.controller = ArmPositionController(motor, self._config)

        self.inputs = ArmIO.ArmIOInputs()
        # A switch already held at start up counts as a press on the first cycle
        self._was_pressed = False

        # Test mode sequencing
        self._test_index = 0

    @property
    def mode(self) -> ArmMode:
        return self.controller.mode

    @property
    def position(self) -> radians:
        return self._motor.get_position()

    @property
    def limit_switch_pressed(self) -> bool:
        return any(not switch.get() for switch in self._limit_switches)

    def periodic(self) -> None:
        self._counter += 1

        # Re-home only on the press, not while the switch is held
        pressed = self.limit_switch_pressed
        if pressed and not self._was_pressed:
            self.controller.on_limit_switch()
        self._was_pressed = pressed

        self.updateInputs(self.inputs)
        Logger.processInputs("Arm", self.inputs)

        # Update SmartDashboard for this subsystem at a rate slower than the period
        if self._counter % 20 == 0:
            self.dashboard_periodic()

    def updateInputs(self, inputs: ArmIO.ArmIOInputs) -> None:
        inputs.connected = self._motor.connected
        inputs.position = self._motor.get_position()
        inputs.velocity = self._motor.get_velocity()
        inputs.applied = self._motor.applied_voltage
        inputs.current = self._motor.output_current

        left, right = self._limit_switches
        inputs.left_limit_switch = not left.get()
        inputs.right_limit_switch = not right.get()

    ##########################################################################
    # Control

    def set_target_position(self, position: radians) -> radians:
        return self.controller.set_target_position(position)

    def run_automatic(self) -> float:
        return self.controller.run_automatic()

    def run_manual(self, power: float) -> float:
        return self.controller.run_manual(power)

    def stop(self) -> None:
        self.controller.stop()

    ##########################################################################
    # Test mode

    def arm_testing_init(self) -> None:
        """
        Start walking through the preset positions from the first one
        """
        self._test_index = 0
        logger.info(f"Arm test: moving to preset {self._test_index}")
        self.controller.run_testing(0.0)

    def test_arm_position(self) -> float:
        """
        Drive open loop toward the current test preset and move on to the next
        preset once it is reached.
        """
        presets = ArmConstants.PRESET_POSITIONS
        error = presets[self._test_index] - self.position

        if abs(error) <= ArmConstants.ARM_TEST_TOLERANCE:
            self._test_index = (self._test_index + 1) % len(presets)
            logger.info(f"Arm test: moving to preset {self._test_index}")
            return self.controller.run_testing(0.0)

        power = ArmConstants.ARM_TEST_POWER if error > 0.0 else -ArmConstants.ARM_TEST_POWER
        return self.controller.run_testing(power)

    ######################
    # SmartDashboard support

    def dashboard_initialize(self) -> None:
        SmartDashboard.putNumber("Arm/softLimitForward", self._config.soft_limit_forward)
        SmartDashboard.putNumber("Arm/softLimitReverse", self._config.soft_limit_reverse)

    def dashboard_periodic(self) -> None:
        """
        Called from periodic function to update dashboard elements for this subsystem
        """
        SmartDashboard.putString("Arm/mode", self.mode.name)
        SmartDashboard.putNumber("Arm/position", self.position)
        SmartDashboard.putNumber("Arm/target", self.controller.target)
        SmartDashboard.putNumber("Arm/output", self.controller.output)
        SmartDashboard.putBoolean("Arm/limitSwitch", self._was_pressed)

    ######################
    # Simulation support

    def simulationPeriodic(self, **kwargs) -> float:
        """
        Called by the physics engine to move the simulated arm
        """
        tm_diff = kwargs.get("tm_diff", 0.0)

        if hasattr(self._motor, "step") and callable(getattr(self._motor, "step")):
            self._motor.step(tm_diff)

        return 0.0
