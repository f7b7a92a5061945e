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

from lib_swerve.actuators.actuator import ControlMode
from lib_swerve.actuators.sim_actuator import SimActuator
from robot_2023.subsystems.arm.arm_controller import ArmMode, ArmPositionController
from robot_2023.subsystems.arm.constants import ArmConfig, ArmConstants

CONFIG = ArmConfig()


def make_controller(position: float = 0.3):
    motor = SimActuator("Arm", ArmConstants.MOTOR_CONFIG, position=position)
    return ArmPositionController(motor, CONFIG), motor


def homed_controller(position: float = 0.3):
    """Controller that has crept home and hit the limit switch"""
    controller, motor = make_controller(position)

    controller.run_automatic()
    assert controller.on_limit_switch()

    return controller, motor


def test_starts_homing():
    controller, motor = make_controller()

    assert controller.mode == ArmMode.HOMING
    assert controller.target == CONFIG.home_position


def test_homing_creeps_toward_home():
    controller, motor = make_controller()

    output = controller.run_automatic()

    assert output == pytest.approx(CONFIG.home_direction * CONFIG.homing_power)
    assert motor.control_mode == ControlMode.DUTY_CYCLE
    assert math.copysign(1, motor.get_velocity()) == CONFIG.home_direction
    assert controller.mode == ArmMode.HOMING


def test_limit_switch_moving_toward_home_rehomes():
    controller, motor = make_controller(position=0.3)
    controller.run_automatic()

    assert controller.on_limit_switch()

    # The position reference is now exactly the home angle
    assert motor.get_position() == CONFIG.home_position
    assert controller.position == CONFIG.home_position
    assert controller.mode == ArmMode.AUTOMATIC
    assert controller.target == CONFIG.home_position


def test_limit_switch_moving_away_is_ignored():
    controller, motor = homed_controller()
    motor.set_position(1.0)

    # Operator drives away from home
    controller.run_manual(1.0)
    assert motor.get_velocity() > 0.0

    assert not controller.on_limit_switch()
    assert motor.get_position() == pytest.approx(1.0)
    assert controller.mode == ArmMode.MANUAL


def test_limit_switch_at_rest_while_homing():
    """
    Robot powered up with the arm already sitting on the switch
    """
    controller, motor = make_controller(position=0.7)

    assert controller.on_limit_switch()
    assert motor.get_position() == CONFIG.home_position
    assert controller.mode == ArmMode.AUTOMATIC


def test_rehome_keeps_target():
    controller, motor = homed_controller()
    controller.set_target_position(ArmConstants.POSITION_02)

    # Arm drifts down onto the switch while moving toward home
    motor.set_voltage(-6.0)
    assert controller.on_limit_switch()

    assert controller.target == ArmConstants.POSITION_02
    assert controller.setpoint.position == CONFIG.home_position


def test_target_is_clamped_to_soft_limits():
    controller, motor = homed_controller()

    assert controller.set_target_position(CONFIG.soft_limit_forward + 10) == CONFIG.soft_limit_forward
    assert controller.target == CONFIG.soft_limit_forward

    assert controller.set_target_position(CONFIG.soft_limit_reverse - 10) == CONFIG.soft_limit_reverse
    assert controller.target == CONFIG.soft_limit_reverse

    for request in (-100.0, -0.2, -0.1, 0.0, 0.83, 3.14, 4.5, 4.6, 1e9):
        controller.set_target_position(request)
        assert CONFIG.soft_limit_reverse <= controller.target <= CONFIG.soft_limit_forward

    controller.set_target_position(ArmConstants.POSITION_01)
    assert controller.target == ArmConstants.POSITION_01


def test_gravity_is_held_at_rest():
    """
    At rest on target the PID has nothing to do and the output is just the
    gravity term
    """
    controller, motor = homed_controller()

    output = controller.run_automatic()

    expected = CONFIG.kg * math.cos(CONFIG.home_position - CONFIG.zero_cosine_offset)
    assert output == pytest.approx(expected)
    assert motor.control_mode == ControlMode.VOLTAGE
    assert motor.setpoint == pytest.approx(expected)


def test_profile_is_velocity_and_acceleration_limited():
    controller, motor = homed_controller()
    motor.stop()
    controller.set_target_position(ArmConstants.POSITION_02)

    previous_velocity = 0.0
    previous_position = controller.setpoint.position

    for _ in range(600):
        controller.run_automatic()
        setpoint = controller.setpoint

        assert abs(setpoint.velocity) <= CONFIG.max_velocity + 1e-6
        assert abs(setpoint.velocity - previous_velocity) <= CONFIG.max_acceleration * CONFIG.period + 1e-6
        assert setpoint.position >= previous_position - 1e-9

        previous_velocity = setpoint.velocity
        previous_position = setpoint.position

    assert controller.setpoint.position == pytest.approx(ArmConstants.POSITION_02)
    assert controller.setpoint.velocity == pytest.approx(0.0, abs=1e-9)


def test_new_target_profiles_from_measured_position():
    controller, motor = homed_controller()
    motor.set_position(1.0)

    controller.set_target_position(2.0)

    assert controller.setpoint.position == pytest.approx(1.0)


def test_manual_is_scaled():
    controller, motor = homed_controller()
    motor.set_position(1.0)

    assert controller.run_manual(1.0) == pytest.approx(CONFIG.manual_scale)
    assert controller.run_manual(-0.5) == pytest.approx(-0.5 * CONFIG.manual_scale)
    assert controller.run_manual(5.0) == pytest.approx(CONFIG.manual_scale)
    assert controller.mode == ArmMode.MANUAL


def test_manual_stops_at_soft_limits():
    controller, motor = homed_controller()

    motor.set_position(CONFIG.soft_limit_forward)
    assert controller.run_manual(1.0) == 0.0
    assert controller.run_manual(-1.0) == pytest.approx(-CONFIG.manual_scale)

    motor.set_position(CONFIG.soft_limit_reverse)
    assert controller.run_manual(-1.0) == 0.0
    assert controller.run_manual(1.0) == pytest.approx(CONFIG.manual_scale)


def test_manual_while_homing_is_not_limited():
    controller, motor = make_controller(position=CONFIG.soft_limit_reverse - 1.0)

    assert controller.run_manual(-1.0) == pytest.approx(-CONFIG.manual_scale)
    assert controller.mode == ArmMode.HOMING


def test_testing_ignores_soft_limits():
    controller, motor = homed_controller()
    motor.set_position(CONFIG.soft_limit_forward + 0.5)

    assert controller.run_testing(0.5) == pytest.approx(0.5)
    assert controller.mode == ArmMode.TESTING
    assert motor.setpoint == pytest.approx(0.5)


def test_automatic_resumes_where_manual_left_off():
    controller, motor = homed_controller()
    controller.set_target_position(ArmConstants.POSITION_02)

    controller.run_manual(0.5)
    motor.set_position(1.2)

    controller.run_automatic()

    assert controller.mode == ArmMode.AUTOMATIC
    assert controller.target == pytest.approx(1.2)


def test_preset_chosen_during_manual_is_kept():
    """
    Operator holds the stick, picks a preset and lets go. Closed loop control
    then heads for the preset
    """
    controller, motor = homed_controller()

    controller.run_manual(0.5)
    motor.set_position(1.2)
    assert controller.set_target_position(ArmConstants.POSITION_02) == ArmConstants.POSITION_02

    controller.run_automatic()

    assert controller.mode == ArmMode.AUTOMATIC
    assert controller.target == pytest.approx(ArmConstants.POSITION_02)

    # The profile still starts from where the arm actually is
    assert controller.setpoint.position == pytest.approx(1.2, abs=0.05)
    assert controller.setpoint.velocity > 0.0


def test_stop_holds_position():
    controller, motor = homed_controller()
    controller.set_target_position(ArmConstants.POSITION_02)
    motor.set_position(2.0)

    controller.stop()

    assert motor.control_mode == ControlMode.NONE
    assert controller.output == 0.0
    assert controller.target == pytest.approx(2.0)
    assert controller.setpoint.position == pytest.approx(2.0)


def test_invalid_config():
    with pytest.raises(ValueError):
        ArmConfig(soft_limit_reverse=1.0, soft_limit_forward=0.0)

    with pytest.raises(ValueError):
        ArmConfig(home_position=5.0)

    with pytest.raises(ValueError):
        ArmConfig(home_direction=0)

    with pytest.raises(ValueError):
        ArmConfig(max_velocity=0.0)
