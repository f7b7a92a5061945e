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
import time
from typing import List

from commands2 import InstantCommand, RunCommand, StartEndCommand, Subsystem
from commands2.button import CommandXboxController, Trigger
from wpilib import DigitalInput, RobotBase

import constants
from constants import DeviceID
from lib_swerve.actuators.actuator import Actuator, ActuatorConfig
from lib_swerve.actuators.sim_actuator import SimActuator
from lib_swerve.actuators.sparkmax import SparkMaxActuator
from lib_swerve.subsystems.gyro.gyro import Gyro
from lib_swerve.subsystems.gyro.pigeon2 import Pigeon2
from lib_swerve.subsystems.gyro.sim_gyro import SimGyro
from robot_2023.subsystems.arm.arm import ArmSubsystem
from robot_2023.subsystems.arm.constants import ArmConfig, ArmConstants
from robot_2023.subsystems.swervedrive.constants import DriveConfig, DriveConstants, ModuleConstants
from robot_2023.subsystems.swervedrive.drivesubsystem import DriveSubsystem
from robot_2023.subsystems.swervedrive.swervemodule import SwerveModule

logger = logging.getLogger(__name__)

# Module name, driving motor ID, turning motor ID. Order is FL, FR, BL, BR
MODULE_IDS = (
    ("FL", DeviceID.DRIVETRAIN_LEFT_FRONT_DRIVING_ID, DeviceID.DRIVETRAIN_LEFT_FRONT_TURNING_ID),
    ("FR", DeviceID.DRIVETRAIN_RIGHT_FRONT_DRIVING_ID, DeviceID.DRIVETRAIN_RIGHT_FRONT_TURNING_ID),
    ("BL", DeviceID.DRIVETRAIN_LEFT_REAR_DRIVING_ID, DeviceID.DRIVETRAIN_LEFT_REAR_TURNING_ID),
    ("BR", DeviceID.DRIVETRAIN_RIGHT_REAR_DRIVING_ID, DeviceID.DRIVETRAIN_RIGHT_REAR_TURNING_ID),
)


class RobotContainer:
    """
    This class is where the bulk of the robot should be declared. Since Command-based is a
    "declarative" paradigm, very little robot logic should actually be handled in the :class:`.Robot`
    periodic methods (other than the scheduler calls). Instead, the structure of the robot (including
    subsystems, commands, and button mappings) should be declared here.
    """
    def __init__(self, robot: 'MyRobot') -> None:
        logger.debug("*** called container __init__")
        self.start_time = time.time()
        self.robot = robot

        self.simulation = RobotBase.isSimulation()

        # OI (Operator Interface) controllers
        self.driver_controller = CommandXboxController(constants.DRIVER_CONTROLLER_PORT)
        self.operator_controller = CommandXboxController(constants.OPERATOR_CONTROLLER_PORT)

        period = robot.getPeriod() or constants.DEFAULT_PERIOD

        ##########################################
        # Subsystem Initialization
        #
        # The robot core code will already call the periodic() function
        # as needed, but having our own list (iterated in order) allows us to move much of
        # the other subsystem 'tasks' into a generic loop.
        self.subsystems: List[Subsystem] = []

        ##########################################
        #  Drivetrain
        #
        drive_config = DriveConfig(period=period)
        modules = [SwerveModule(self._actuator(f"{name}/Drive", drive_id, ModuleConstants.DRIVING_MOTOR_CONFIG),
                                self._actuator(f"{name}/Turn", turn_id, ModuleConstants.TURNING_MOTOR_CONFIG),
                                offset, name)
                   for (name, drive_id, turn_id), offset in zip(MODULE_IDS, drive_config.chassis_offsets)]

        self.robot_drive = DriveSubsystem(drive_config, modules, self._gyro())
        self.subsystems.append(self.robot_drive)

        ##########################################
        #   ARM
        #
        arm_motor = self._actuator("Arm", DeviceID.ARM_DEVICE_ID, ArmConstants.MOTOR_CONFIG)
        self.arm_limit_switches = (DigitalInput(ArmConstants.ARM_LEFT_LIMIT_SWITCH_DIO_CHANNEL),
                                    DigitalInput(ArmConstants.ARM_RIGHT_LIMIT_SWITCH_DIO_CHANNEL))

        self.arm = ArmSubsystem(arm_motor, self.arm_limit_switches, ArmConfig(period=period))
        self.subsystems.append(self.arm)

        ########################################################
        # Configure the button bindings and default commands
        self.configure_driver_button_bindings(self.driver_controller)
        self.configure_operator_button_bindings(self.operator_controller)

        ########################################################
        # Initialize the Smart dashboard for each subsystem
        for subsystem in self.subsystems:
            if hasattr(subsystem, "dashboard_initialize") and callable(getattr(subsystem,
                                                                               "dashboard_initialize")):
                subsystem.dashboard_initialize()

    def _actuator(self, name: str, can_device_id: int, config: ActuatorConfig) -> Actuator:
        if self.simulation:
            return SimActuator(name, config)

        return SparkMaxActuator(name, can_device_id, config)

    def _gyro(self) -> Gyro:
        if self.simulation:
            return SimGyro(DriveConstants.GYRO_REVERSED)

        return Pigeon2(DeviceID.GYRO_DEVICE_ID, DriveConstants.GYRO_REVERSED, constants.DEFAULT_FREQUENCY)

    def set_start_time(self) -> None:  # call in teleopInit and autonomousInit in the robot
        self.start_time = time.time()

    def get_elapsed_time(self) -> float:
        """
        Called when we want to know the start/elapsed time for status and debug messages
        """
        return time.time() - self.start_time

    def configure_driver_button_bindings(self, controller: CommandXboxController) -> None:
        """
        LS == Left Stick    - Robot direction on field. Fwd, Back, Left, Right (from operators perspective)
        RS == Right Stick   - Robot rotation  <- Counter Clockwise  -> Clockwise

        LT == Left Trigger  - While held, virtual high gear

        Back Button                 - While held, lock the wheels in an X formation
        Start Button (three lines)  - Reset Gyro, the robot's current heading becomes field forward
        """
        # Note that X is defined as forward according to WPILib convention,
        # and Y is defined as to the left according to WPILib convention.
        self.robot_drive.setDefaultCommand(
            RunCommand(lambda: self.robot_drive.drive(-controller.getLeftY(),
                                                      -controller.getLeftX(),
                                                      -controller.getRightX(),
                                                      True),
                       self.robot_drive))

        controller.leftTrigger(constants.HIGH_GEAR_TRIGGER_THRESHOLD) \
            .onTrue(InstantCommand(self.robot_drive.set_virtual_high_gear)) \
            .onFalse(InstantCommand(self.robot_drive.set_virtual_low_gear))

        controller.back().whileTrue(StartEndCommand(self.robot_drive.lock,
                                                    self.robot_drive.unlock,
                                                    self.robot_drive))

        controller.start().onTrue(InstantCommand(self.robot_drive.reset_gyro, self.robot_drive))

    def configure_operator_button_bindings(self, controller: CommandXboxController) -> None:
        """
        RS == Right Stick   - Direct (manual) control over the arm

        X == X Button (Left)   - Arm to home position
        Y == Y Button (Top)    - Arm parallel to the ground
        B == B Button (Right)  - Arm to high scoring position
        A == A Button (Bottom) - Arm to human player position
        """
        self.arm.setDefaultCommand(RunCommand(self.arm.run_automatic, self.arm))

        Trigger(lambda: abs(controller.getRightY()) > DriveConstants.DRIVE_DEADBAND) \
            .whileTrue(RunCommand(lambda: self.arm.run_manual(-controller.getRightY()), self.arm))

        for button, position in ((controller.x(), ArmConstants.POSITION_00),
                                 (controller.y(), ArmConstants.POSITION_01),
                                 (controller.b(), ArmConstants.POSITION_02),
                                 (controller.a(), ArmConstants.POSITION_03)):
            button.onTrue(InstantCommand(lambda p=position: self.arm.set_target_position(p)))

