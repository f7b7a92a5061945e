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
from typing import Optional

from wpimath import inputModulus
from wpimath.units import amperes, seconds, volts

from lib_swerve.actuators.actuator import Actuator, ActuatorConfig, ControlMode, NOMINAL_VOLTAGE

logger = logging.getLogger(__name__)


class SimActuator(Actuator):
    """
    An ideal motor used for simulation and for testing.

    Closed-loop requests are tracked perfectly: a position setpoint is reached
    at once, and a velocity setpoint becomes the current velocity and is
    integrated into position each time 'step' is called. Open-loop requests use
    the configured free speed to produce a velocity.

    Setting 'connected' to False freezes the feedback and drops any commands,
    the same as a controller that fell off the CAN bus.
    """
    def __init__(self, name: str, config: Optional[ActuatorConfig] = None, position: float = 0.0) -> None:
        super().__init__(name, config or ActuatorConfig(current_limit=40))

        self._position = self._wrap(position)
        self._velocity = 0.0
        self._connected = True

    def _wrap(self, position: float) -> float:
        wrap_range = self._config.wrap_range
        if wrap_range is None:
            return position

        return inputModulus(position, wrap_range[0], wrap_range[1])

    @property
    def connected(self) -> bool:
        return self._connected

    @connected.setter
    def connected(self, value: bool) -> None:
        self._connected = value

    @property
    def applied_voltage(self) -> volts:
        match self._control_mode:
            case ControlMode.VOLTAGE:
                return self._setpoint
            case ControlMode.DUTY_CYCLE:
                return self._setpoint * NOMINAL_VOLTAGE
        return 0.0

    @property
    def output_current(self) -> amperes:
        return 0.0

    def set_velocity_setpoint(self, velocity: float) -> None:
        if self._connected:
            super().set_velocity_setpoint(velocity)
            self._velocity = velocity

    def set_position_setpoint(self, position: float) -> None:
        if self._connected:
            super().set_position_setpoint(position)
            self._velocity = 0.0
            self._position = self._wrap(position)

    def set_duty_cycle(self, output: float) -> None:
        if self._connected:
            super().set_duty_cycle(output)
            self._velocity = self._setpoint * self._config.free_speed

    def set_voltage(self, voltage: volts) -> None:
        if self._connected:
            super().set_voltage(voltage)
            self._velocity = voltage / NOMINAL_VOLTAGE * self._config.free_speed

    def get_position(self) -> float:
        return self._position

    def get_velocity(self) -> float:
        return self._velocity

    def set_position(self, position: float) -> None:
        if self._connected:
            self._position = self._wrap(position)

    def stop(self) -> None:
        if self._connected:
            super().stop()
            self._velocity = 0.0

    def step(self, dt: seconds) -> None:
        """
        Advance the simulated mechanism by 'dt' seconds
        """
        if self._connected and self._control_mode != ControlMode.POSITION and math.isfinite(self._velocity):
            self._position = self._wrap(self._position + self._velocity * dt)
