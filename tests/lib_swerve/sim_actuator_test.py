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

import math

import pytest

from lib_swerve.actuators.actuator import ActuatorConfig, ControlMode
from lib_swerve.actuators.sim_actuator import SimActuator
from lib_swerve.subsystems.gyro.gyro import GyroIO
from lib_swerve.subsystems.gyro.sim_gyro import SimGyro

WRAPPED = ActuatorConfig(current_limit=20, wrap_range=(0.0, 2 * math.pi))


def test_invalid_config():
    with pytest.raises(ValueError):
        SimActuator("Bad", ActuatorConfig(current_limit=0))

    with pytest.raises(ValueError):
        SimActuator("Bad", ActuatorConfig(current_limit=10, wrap_range=(1.0, 1.0)))


def test_velocity_integrates_on_step():
    actuator = SimActuator("Drive")
    actuator.set_velocity_setpoint(2.0)

    for _ in range(10):
        actuator.step(0.1)

    assert actuator.control_mode == ControlMode.VELOCITY
    assert actuator.get_velocity() == 2.0
    assert actuator.get_position() == pytest.approx(2.0)


def test_position_wraps():
    actuator = SimActuator("Turn", WRAPPED)
    actuator.set_position_setpoint(2 * math.pi + 0.25)

    assert actuator.get_position() == pytest.approx(0.25)

    actuator.set_position_setpoint(-0.25)
    assert actuator.get_position() == pytest.approx(2 * math.pi - 0.25)


def test_position_setpoint_is_not_integrated():
    actuator = SimActuator("Turn", WRAPPED)
    actuator.set_position_setpoint(1.0)
    actuator.step(1.0)

    assert actuator.get_position() == pytest.approx(1.0)


def test_open_loop_uses_free_speed():
    actuator = SimActuator("Arm", ActuatorConfig(current_limit=30, free_speed=4.0))

    actuator.set_duty_cycle(0.5)
    assert actuator.get_velocity() == pytest.approx(2.0)
    assert actuator.applied_voltage == pytest.approx(6.0)

    actuator.set_voltage(-3.0)
    assert actuator.get_velocity() == pytest.approx(-1.0)
    assert actuator.applied_voltage == pytest.approx(-3.0)

    # Duty cycle is limited to full power
    actuator.set_duty_cycle(3.0)
    assert actuator.setpoint == 1.0


def test_disconnected_actuator_freezes():
    actuator = SimActuator("Drive")
    actuator.set_velocity_setpoint(1.0)
    actuator.step(1.0)

    actuator.connected = False
    actuator.set_velocity_setpoint(-5.0)
    actuator.set_position(10.0)
    actuator.step(1.0)

    assert not actuator.connected
    assert actuator.setpoint == 1.0
    assert actuator.get_position() == pytest.approx(1.0)


def test_stop():
    actuator = SimActuator("Drive")
    actuator.set_velocity_setpoint(1.0)
    actuator.stop()

    assert actuator.control_mode == ControlMode.NONE
    assert actuator.get_velocity() == 0.0


def test_sim_gyro():
    gyro = SimGyro()
    inputs = GyroIO.GyroIOInputs()

    gyro.sim_yaw = 90.0
    gyro.sim_rate = 45.0
    gyro.updateInputs(inputs)

    assert inputs.connected
    assert inputs.yaw == pytest.approx(math.pi / 2)
    assert inputs.yaw_rate == pytest.approx(math.pi / 4)
    assert gyro.heading.degrees() == pytest.approx(90.0)

    gyro.reset()
    gyro.updateInputs(inputs)
    assert inputs.yaw == 0.0


def test_sim_gyro_reversed():
    gyro = SimGyro(is_reversed=True)

    gyro.set_yaw(math.radians(30))

    assert gyro.sim_yaw == pytest.approx(-30.0)
    assert gyro.yaw == pytest.approx(30.0)


def test_sim_gyro_disconnected_holds_reading():
    gyro = SimGyro()
    inputs = GyroIO.GyroIOInputs()

    gyro.sim_yaw = 10.0
    gyro.updateInputs(inputs)

    gyro.connected = False
    gyro.sim_yaw = 50.0
    gyro.updateInputs(inputs)

    assert not inputs.connected
    assert inputs.yaw == pytest.approx(math.radians(10.0))


def test_gyro_inputs_heading():
    gyro = SimGyro()
    inputs = GyroIO.GyroIOInputs()

    # Nothing read yet
    assert inputs.heading() is None

    gyro.sim_yaw = 450.0
    gyro.updateInputs(inputs)
    assert inputs.heading().degrees() == pytest.approx(90.0)

    gyro.connected = False
    gyro.updateInputs(inputs)
    assert inputs.heading() is None
