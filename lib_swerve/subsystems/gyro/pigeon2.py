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

from phoenix6 import StatusCode, StatusSignal
from phoenix6.configs import Pigeon2Configuration
from phoenix6.hardware import pigeon2
from wpilib import SmartDashboard
from wpimath.units import degrees, degrees_per_second, hertz, radians

from lib_swerve.subsystems.gyro.gyro import Gyro, GyroIO
from lib_swerve.util.phoenix6_signals import Phoenix6Signals

logger = logging.getLogger(__name__)


class Pigeon2(Gyro):
    """
    CTRE Pigeon2 gyro implementation
    """
    gyro_type = "Pigeon2"

    def __init__(self, device_id: int, is_reversed: bool, update_frequency: hertz) -> None:
        super().__init__(is_reversed)

        self._gyro: pigeon2.Pigeon2 = pigeon2.Pigeon2(device_id)

        # Note: Default pigeon2 config has compass disabled. We want it that way as well.
        config: Pigeon2Configuration = Pigeon2Configuration()
        config.pigeon2_features.enable_compass = False

        for _ in range(5):
            if self._gyro.configurator.apply(config, timeout_seconds=0.2).is_ok():
                break
        else:
            logger.error(f"{self.gyro_type}: unable to apply configuration to device {device_id}")

        self._update_hz: hertz = update_frequency

        self._yaw: StatusSignal = self._gyro.get_yaw()
        self._yaw_velocity: StatusSignal = self._gyro.get_angular_velocity_z_world()

    def initialize(self) -> None:
        """
        Perform initial steps to get your gyro ready
        """
        self.reset()

        if self._update_hz > 0.0:
            status = StatusSignal.set_update_frequency_for_all(self._update_hz,
                                                               self._yaw,
                                                               self._yaw_velocity)
            if status != StatusCode.OK:
                logger.warning(f"{self.gyro_type}: Error during gyro frequency update: {status}")

        status = self._gyro.optimize_bus_utilization()

        if status != StatusCode.OK:
            logger.warning(f"{self.gyro_type}: Error during gyro bus optimization: {status}")

        Phoenix6Signals.register_signals(self._yaw, self._yaw_velocity)

    def zero_yaw(self) -> None:
        status = self._gyro.set_yaw(0.0)

        if status != StatusCode.OK:
            logger.warning(f"{self.gyro_type}: unable to zero yaw: {status}")

    @property
    def yaw(self) -> degrees:
        yaw = self._yaw.value_as_double
        return -yaw if self._reversed else yaw

    @property
    def turn_rate_degrees_per_second(self) -> degrees_per_second:
        rate = self._yaw_velocity.value_as_double
        return -rate if self._reversed else rate

    def set_yaw(self, yaw_rad: radians) -> None:
        yaw = math.degrees(yaw_rad)
        self._gyro.set_yaw(-yaw if self._reversed else yaw)

    ########################################################################################
    # pykit / AdvantageScope support

    def updateInputs(self, inputs: GyroIO.GyroIOInputs) -> None:
        inputs.connected = StatusSignal.is_all_good(self._yaw, self._yaw_velocity)

        # Leave the last good reading in place if the device stopped reporting
        if inputs.connected:
            inputs.yaw = math.radians(self.yaw)
            inputs.yaw_rate = math.radians(self.turn_rate_degrees_per_second)

    ########################################################################################
    # SmartDashboard support

    def dashboard_periodic(self) -> None:
        super().dashboard_periodic()

        # Pigeon has an all-good static to test if all is okay with the world
        SmartDashboard.putBoolean('Gyro/all-good', StatusSignal.is_all_good(self._yaw, self._yaw_velocity))
