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
from typing import List

import pytest
from wpilib.simulation import stepTiming
from wpimath.geometry import Pose2d, Rotation2d

from lib_swerve.actuators.sim_actuator import SimActuator
from lib_swerve.subsystems.gyro.sim_gyro import SimGyro
from robot_2023.subsystems.swervedrive.constants import DriveConfig, ModuleConstants, VirtualGear
from robot_2023.subsystems.swervedrive.drivesubsystem import DriveMode, DriveSubsystem
from robot_2023.subsystems.swervedrive.swervemodule import SwerveModule


class Drivetrain:
    """Drive subsystem built from simulated parts, with handles to the parts"""
    def __init__(self, config: DriveConfig, start_angle: float = 0.0) -> None:
        self.config = config
        self.drives: List[SimActuator] = []
        self.turns: List[SimActuator] = []
        modules = []

        for name, offset in zip(("FL", "FR", "BL", "BR"), config.chassis_offsets):
            drive = SimActuator(f"{name}/Drive", ModuleConstants.DRIVING_MOTOR_CONFIG)
            # Wheels start at 'start_angle' to chassis forward
            turn = SimActuator(f"{name}/Turn", ModuleConstants.TURNING_MOTOR_CONFIG, position=offset + start_angle)

            self.drives.append(drive)
            self.turns.append(turn)
            modules.append(SwerveModule(drive, turn, offset, name))

        self.gyro = SimGyro()
        self.drive = DriveSubsystem(config, modules, self.gyro)

    def cycle(self, count: int = 1) -> None:
        for _ in range(count):
            stepTiming(self.config.period)
            self.drive.simulationPeriodic(tm_diff=self.config.period)
            self.drive.periodic()


@pytest.fixture
def drivetrain() -> Drivetrain:
    return Drivetrain(DriveConfig())


def test_needs_four_modules():
    config = DriveConfig()
    modules = [SwerveModule(SimActuator("Drive"), SimActuator("Turn"), 0.0, "Only")]

    with pytest.raises(ValueError):
        DriveSubsystem(config, modules, SimGyro())


def test_starts_at_origin(drivetrain: Drivetrain):
    pose = drivetrain.drive.get_pose()

    assert pose.x == 0.0 and pose.y == 0.0
    assert drivetrain.drive.mode == DriveMode.DRIVE
    assert drivetrain.drive.gear == VirtualGear.LOW


def test_drive_forward_moves_robot_forward(drivetrain: Drivetrain):
    for _ in range(50):
        drivetrain.drive.drive(1.0, 0.0, 0.0, True)
        drivetrain.cycle()

    pose = drivetrain.drive.get_pose()
    expected = drivetrain.config.max_speed * drivetrain.config.gear_rates[VirtualGear.LOW] * 50 * drivetrain.config.period

    assert pose.x == pytest.approx(expected, rel=0.05)
    assert pose.y == pytest.approx(0.0, abs=1e-6)

    for state in drivetrain.drive.get_module_states():
        assert state.angle.degrees() == pytest.approx(0.0, abs=1e-6)


def test_high_gear_is_faster(drivetrain: Drivetrain):
    drivetrain.drive.drive(1.0, 0.0, 0.0, False)
    low = drivetrain.drive.get_robot_relative_speeds().vx

    drivetrain.drive.set_virtual_high_gear()
    drivetrain.drive.drive(1.0, 0.0, 0.0, False)
    high = drivetrain.drive.get_robot_relative_speeds().vx

    assert drivetrain.drive.gear == VirtualGear.HIGH
    assert high > low
    assert high == pytest.approx(drivetrain.config.max_speed)

    drivetrain.drive.set_virtual_low_gear()
    assert drivetrain.drive.gear == VirtualGear.LOW


def test_stop_holds_wheel_angles(drivetrain: Drivetrain):
    drivetrain.drive.drive(0.0, 1.0, 0.0, False)
    drivetrain.cycle()
    angles = [state.angle.degrees() for state in drivetrain.drive.get_module_states()]

    drivetrain.drive.stop()
    for _ in range(10):
        drivetrain.drive.drive(0.0, 0.0, 0.0, False)
        drivetrain.cycle()

    for angle, state in zip(angles, drivetrain.drive.get_module_states()):
        assert state.speed == 0.0
        assert state.angle.degrees() == pytest.approx(angle)


def test_lock_holds_x_formation(drivetrain: Drivetrain):
    drivetrain.drive.lock()
    assert drivetrain.drive.mode == DriveMode.LOCKED

    # Driving is ignored while locked
    drivetrain.drive.drive(1.0, 0.0, 0.0, True)
    drivetrain.cycle(5)

    # A wheel may reach its X angle by turning the short way and reversing, so
    # compare wheel lines rather than directions
    for state, expected in zip(drivetrain.drive.get_module_states(), (45, -45, 135, -135)):
        assert state.speed == pytest.approx(0.0, abs=1e-9)
        assert math.remainder(state.angle.degrees() - expected, 180) == pytest.approx(0.0, abs=1e-6)
    assert drivetrain.drive.get_pose().x == pytest.approx(0.0, abs=1e-9)

    drivetrain.drive.unlock()
    drivetrain.drive.drive(1.0, 0.0, 0.0, True)
    drivetrain.cycle(5)

    assert drivetrain.drive.mode == DriveMode.DRIVE
    assert drivetrain.drive.get_pose().x > 0.0


def test_wheels_hold_start_angle_when_not_driven():
    drivetrain = Drivetrain(DriveConfig(), start_angle=math.radians(30))

    for _ in range(10):
        drivetrain.drive.drive(0.0, 0.0, 0.0, True)
        drivetrain.cycle()

    for state in drivetrain.drive.get_module_states():
        assert state.angle.degrees() == pytest.approx(30)


def test_unlock_keeps_x_formation_until_driven(drivetrain: Drivetrain):
    drivetrain.drive.drive(0.0, 1.0, 0.0, False)
    drivetrain.cycle()

    drivetrain.drive.lock()
    drivetrain.cycle()
    locked = [state.angle.degrees() for state in drivetrain.drive.get_module_states()]

    drivetrain.drive.unlock()
    for _ in range(5):
        drivetrain.drive.drive(0.0, 0.0, 0.0, True)
        drivetrain.cycle()

    for angle, state in zip(locked, drivetrain.drive.get_module_states()):
        assert state.angle.degrees() == pytest.approx(angle)


def test_rotation_turns_gyro_and_pose(drivetrain: Drivetrain):
    for _ in range(25):
        drivetrain.drive.drive(0.0, 0.0, 0.5, False)
        drivetrain.cycle()

    heading = drivetrain.drive.get_heading()
    assert heading.degrees() > 0.0
    assert drivetrain.drive.get_pose().rotation().degrees() == pytest.approx(heading.degrees())


def test_stale_gyro_holds_heading(drivetrain: Drivetrain):
    drivetrain.gyro.sim_yaw = 30.0
    drivetrain.cycle()
    assert drivetrain.drive.get_heading().degrees() == pytest.approx(30.0)

    # The gyro stops reporting and its value goes bad; the last good heading is kept
    drivetrain.gyro.connected = False
    drivetrain.gyro.sim_yaw = 0.0
    drivetrain.cycle()

    assert drivetrain.drive.get_heading().degrees() == pytest.approx(30.0)

    drivetrain.gyro.connected = True
    drivetrain.cycle()
    assert drivetrain.drive.get_heading().degrees() == pytest.approx(0.0, abs=1e-9)


def test_lost_module_zeroes_only_that_module(drivetrain: Drivetrain):
    drivetrain.turns[0].connected = False

    drivetrain.drive.drive(1.0, 0.0, 0.0, False)

    assert drivetrain.drives[0].setpoint == 0.0
    for drive in drivetrain.drives[1:]:
        assert drive.setpoint > 0.0


def test_reset_odometry(drivetrain: Drivetrain):
    for _ in range(10):
        drivetrain.drive.drive(1.0, 0.0, 0.0, True)
        drivetrain.cycle()

    target = Pose2d(4.0, 2.0, Rotation2d.fromDegrees(90))
    drivetrain.drive.reset_odometry(target)
    drivetrain.drive.stop()
    drivetrain.cycle()

    pose = drivetrain.drive.get_pose()
    assert pose.x == pytest.approx(4.0, abs=0.01)
    assert pose.y == pytest.approx(2.0, abs=0.01)
    assert pose.rotation().degrees() == pytest.approx(90)


def test_reset_gyro_makes_current_heading_forward(drivetrain: Drivetrain):
    drivetrain.gyro.sim_yaw = 45.0
    drivetrain.cycle()

    drivetrain.drive.reset_gyro()
    drivetrain.cycle()

    assert drivetrain.drive.get_heading().degrees() == pytest.approx(0.0, abs=1e-9)
    assert drivetrain.drive.get_pose().rotation().degrees() == pytest.approx(0.0, abs=1e-9)


def test_module_offsets_are_rotations():
    """
    MAXSwerve modules are mounted at quarter turns to the chassis
    """
    for offset in DriveConfig().chassis_offsets:
        assert math.remainder(offset, math.pi / 2) == pytest.approx(0.0, abs=1e-12)
