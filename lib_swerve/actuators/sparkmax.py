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

from rev import FeedbackSensor, PersistMode, REVLibError, ResetMode, SparkBase, SparkBaseConfig, SparkMax
from wpimath.units import amperes, volts

from lib_swerve.actuators.actuator import Actuator, ActuatorConfig

logger = logging.getLogger(__name__)


class SparkMaxActuator(Actuator):
    """
    REV SparkMax (NEO brushless) actuator. All closed-loop control runs on the
    SparkMax itself; this class only forwards setpoints and reads feedback.
    """
    def __init__(self, name: str, can_device_id: int, config: ActuatorConfig) -> None:
        super().__init__(name, config)

        self._device_id = can_device_id

        # Set up the motor controller. Safe parameters are reset so a swapped out
        # controller ends up with the same configuration.
        self._motor = SparkMax(can_device_id, SparkBase.MotorType.kBrushless)
        status = self._motor.configure(self._motor_config(config),
                                       ResetMode.kResetSafeParameters,
                                       PersistMode.kPersistParameters)
        if status != REVLibError.kOk:
            logger.error(f"{name}: SparkMax {can_device_id} configuration failed: {status}")

        self._pid_controller = self._motor.getClosedLoopController()

        if config.absolute_encoder:
            self._encoder = self._motor.getAbsoluteEncoder()
        else:
            self._encoder = self._motor.getEncoder()

        self._was_connected = True

    @staticmethod
    def _motor_config(config: ActuatorConfig) -> SparkBaseConfig:
        spark_config = SparkBaseConfig()
        spark_config.inverted(config.inverted)
        spark_config.setIdleMode(SparkBaseConfig.IdleMode.kBrake if config.brake
                                 else SparkBaseConfig.IdleMode.kCoast)
        spark_config.smartCurrentLimit(int(config.current_limit))

        if config.absolute_encoder:
            spark_config.absoluteEncoder.inverted(config.encoder_inverted)
            spark_config.absoluteEncoder.positionConversionFactor(config.position_conversion_factor)
            spark_config.absoluteEncoder.velocityConversionFactor(config.velocity_conversion_factor)
            spark_config.closedLoop.setFeedbackSensor(FeedbackSensor.kAbsoluteEncoder)
        else:
            spark_config.encoder.positionConversionFactor(config.position_conversion_factor)
            spark_config.encoder.velocityConversionFactor(config.velocity_conversion_factor)
            spark_config.closedLoop.setFeedbackSensor(FeedbackSensor.kPrimaryEncoder)

        spark_config.closedLoop.pid(config.p, config.i, config.d)
        spark_config.closedLoop.velocityFF(config.ff)
        spark_config.closedLoop.outputRange(-1, +1)

        if config.wrap_range is not None:
            # Lets the controller go through 0 to get to the setpoint, i.e. going from 350
            # degrees to 10 degrees will go through 0 rather than the long way around
            spark_config.closedLoop.positionWrappingEnabled(True)
            spark_config.closedLoop.positionWrappingInputRange(*config.wrap_range)

        return spark_config

    @property
    def connected(self) -> bool:
        connected = self._motor.getLastError() != REVLibError.kCANDisconnected

        if connected != self._was_connected:
            if connected:
                logger.info(f"{self._name}: SparkMax {self._device_id} communication restored")
            else:
                logger.warning(f"{self._name}: SparkMax {self._device_id} communication lost")
            self._was_connected = connected

        return connected

    @property
    def applied_voltage(self) -> volts:
        return self._motor.getAppliedOutput() * self._motor.getBusVoltage()

    @property
    def output_current(self) -> amperes:
        return self._motor.getOutputCurrent()

    def set_velocity_setpoint(self, velocity: float) -> None:
        super().set_velocity_setpoint(velocity)
        self._pid_controller.setReference(velocity, SparkBase.ControlType.kVelocity)

    def set_position_setpoint(self, position: float) -> None:
        super().set_position_setpoint(position)
        self._pid_controller.setReference(position, SparkBase.ControlType.kPosition)

    def set_duty_cycle(self, output: float) -> None:
        super().set_duty_cycle(output)
        self._motor.set(self._setpoint)

    def set_voltage(self, voltage: volts) -> None:
        super().set_voltage(voltage)
        self._motor.setVoltage(voltage)

    def get_position(self) -> float:
        return self._encoder.getPosition()

    def get_velocity(self) -> float:
        return self._encoder.getVelocity()

    def set_position(self, position: float) -> None:
        if self._config.absolute_encoder:
            logger.error(f"{self._name}: absolute encoder position cannot be re-anchored")
            return

        self._encoder.setPosition(position)

    def stop(self) -> None:
        super().stop()
        self._motor.stopMotor()
