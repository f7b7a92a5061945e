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
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from wpimath.units import amperes, radians_per_second, volts

logger = logging.getLogger(__name__)

NOMINAL_VOLTAGE: volts = 12.0


class ControlMode(Enum):
    """Last control request sent to an actuator"""
    NONE = 0
    DUTY_CYCLE = 1
    VOLTAGE = 2
    VELOCITY = 3
    POSITION = 4


@dataclass(frozen=True)
class ActuatorConfig:
    """
    Construction time settings for a motor and its feedback sensor. Once the
    actuator is built these are not changed.

    Position and velocity conversion factors turn the sensor's native units
    (rotations, RPM) into the mechanism units the rest of the code works in
    (meters or radians).
    """
    current_limit: amperes
    brake: bool = True
    inverted: bool = False

    position_conversion_factor: float = 1.0
    velocity_conversion_factor: float = 1.0

    p: float = 0.0
    i: float = 0.0
    d: float = 0.0
    ff: float = 0.0

    # Feedback from an absolute encoder (through bore) instead of the motor's hall sensor
    absolute_encoder: bool = False
    encoder_inverted: bool = False

    # (min, max) position input range for continuous (wrapping) position control
    wrap_range: Optional[Tuple[float, float]] = None

    # Mechanism free speed, in converted velocity units. Used for simulation
    free_speed: radians_per_second = 0.0


class Actuator:
    """
    Actuator is the capability interface for one motor controller and its
    feedback sensor. Subsystems only talk to this interface, so a REV SparkMax,
    a simulated motor, or some other vendor's controller can be dropped in.
    """
    def __init__(self, name: str, config: ActuatorConfig) -> None:
        if config.current_limit <= 0:
            raise ValueError(f"{name}: current limit must be positive, got {config.current_limit}")

        if config.wrap_range is not None and config.wrap_range[0] >= config.wrap_range[1]:
            raise ValueError(f"{name}: invalid wrap range {config.wrap_range}")

        self._name = name
        self._config = config
        self._control_mode = ControlMode.NONE
        self._setpoint = 0.0

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> ActuatorConfig:
        return self._config

    @property
    def control_mode(self) -> ControlMode:
        return self._control_mode

    @property
    def setpoint(self) -> float:
        """The last closed-loop setpoint or open-loop output requested"""
        return self._setpoint

    @property
    def connected(self) -> bool:
        """Is the controller currently communicating"""
        raise NotImplementedError("Implement in derived class")

    @property
    def applied_voltage(self) -> volts:
        raise NotImplementedError("Implement in derived class")

    @property
    def output_current(self) -> amperes:
        raise NotImplementedError("Implement in derived class")

    def set_velocity_setpoint(self, velocity: float) -> None:
        self._control_mode = ControlMode.VELOCITY
        self._setpoint = velocity

    def set_position_setpoint(self, position: float) -> None:
        self._control_mode = ControlMode.POSITION
        self._setpoint = position

    def set_duty_cycle(self, output: float) -> None:
        self._control_mode = ControlMode.DUTY_CYCLE
        self._setpoint = max(-1.0, min(1.0, output))

    def set_voltage(self, voltage: volts) -> None:
        self._control_mode = ControlMode.VOLTAGE
        self._setpoint = voltage

    def get_position(self) -> float:
        raise NotImplementedError("Implement in derived class")

    def get_velocity(self) -> float:
        raise NotImplementedError("Implement in derived class")

    def set_position(self, position: float) -> None:
        """
        Re-anchor the position sensor so it currently reads 'position'
        """
        raise NotImplementedError("Implement in derived class")

    def stop(self) -> None:
        self._control_mode = ControlMode.NONE
        self._setpoint = 0.0
