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
import os
import sys
from typing import Optional

import wpilib
from commands2 import CommandScheduler, RunCommand
from commands2.command import Command
# pykit & AdvantageScope support
from pykit.logger import Logger
from pykit.networktables.nt4Publisher import NT4Publisher
from pykit.wpilog.wpilogreader import WPILOGReader
from pykit.wpilog.wpilogwriter import WPILOGWriter
from wpilib import DriverStation, LiveWindow

import constants
from lib_swerve.util.logged_timed_command_robot import LoggedTimedCommandRobot
from lib_swerve.util.logtracer import LogTracer
from lib_swerve.util.phoenix6_signals import Phoenix6Signals
from robotcontainer import RobotContainer

# Setup Logging
logger = logging.getLogger(__name__)


class MyRobot(LoggedTimedCommandRobot):
    """
    Our default robot class

    Command v2 robots are encouraged to inherit from TimedCommandRobot, which
    has an implementation of robotPeriodic which runs the scheduler for you
    """
    def __init__(self):
        # Initialize our base class, choosing the default scheduler period
        super().__init__()

        Logger.recordMetadata("Robot", type(self).__name__)
        Logger.recordMetadata("Team", "6107")
        Logger.recordMetadata("Year", "2023")

        match constants.ROBOT_MODE:
            case constants.RobotModes.REAL:
                deploy_config = wpilib.deployinfo.getDeployData()

                if deploy_config is not None:
                    Logger.recordMetadata("Deploy Host", deploy_config.get("deploy-host", ""))
                    Logger.recordMetadata("Deploy User", deploy_config.get("deploy-user", ""))
                    Logger.recordMetadata("Deploy Date", deploy_config.get("deploy-date", ""))
                    Logger.recordMetadata("Git Hash", deploy_config.get("git-hash", ""))
                    Logger.recordMetadata("Git Branch", deploy_config.get("git-branch", ""))

                Logger.addDataReciever(NT4Publisher(True))
                Logger.addDataReciever(WPILOGWriter())

            case constants.RobotModes.SIMULATION:
                Logger.addDataReciever(WPILOGWriter())
                Logger.addDataReciever(NT4Publisher(True))

            case constants.RobotModes.REPLAY:
                #
                #  To run back a log file in replay mode, set the `LOG_PATH` environment variable
                #  and then run in simulation:
                #
                #    LOG_PATH=/path/to/log/file.wpilog robotpy sim
                #
                self.UseTiming = False  # Disable timing in replay mode, run as fast as possible

                log_path = os.path.abspath(os.environ["LOG_PATH"])

                Logger.setReplaySource(WPILOGReader(log_path))
                Logger.addDataReciever(WPILOGWriter(log_path[:-7] + "_sim.wpilog"))

        Logger.start()

        self._counter = 0  # Updated on each periodic call. Can be used to logging/smartdashboard updates

        self._container: Optional[RobotContainer] = None
        self._test_command: Optional[Command] = None

    @property
    def container(self) -> RobotContainer:
        return self._container

    @property
    def counter(self) -> int:
        return self._counter

    def robotInit(self) -> None:
        """
        This function is run when the robot is first started up and should be used for any
        initialization code.
        """
        logger.info("robotInit: entry")
        super().robotInit()

        LiveWindow.disableAllTelemetry()

        command_count: dict[str, int] = {}

        # Tracks active commands.
        def logCommandFunction(command: Command, active: bool) -> None:
            name = command.getName()
            count = command_count.get(name, 0) + (1 if active else -1)
            command_count[name] = count
            Logger.recordOutput(f"Commands/{name}", count > 0)

        scheduler = CommandScheduler.getInstance()

        scheduler.onCommandInitialize(lambda c: logCommandFunction(c, True))
        scheduler.onCommandFinish(lambda c: logCommandFunction(c, False))
        scheduler.onCommandInterrupt(lambda c: logCommandFunction(c, False))

        # Set up logging
        self._logging_init()

        version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
        logger.info(f"Python: {version}")

        # Instantiate our RobotContainer.  This will perform all our button bindings
        self._container = RobotContainer(self)

        logger.info("robotInit: exit")

    def _logging_init(self):
        match constants.ROBOT_MODE:
            case constants.RobotModes.REAL | constants.RobotModes.REPLAY:
                logging.getLogger().setLevel(logging.WARNING)  # Python logging
                logging.getLogger("wpilib").setLevel(logging.ERROR)
                logging.getLogger("commands2").setLevel(logging.ERROR)

            case constants.RobotModes.SIMULATION:
                DriverStation.silenceJoystickConnectionWarning(True)
                logging.getLogger().setLevel(logging.INFO)  # Python logging
                logging.getLogger("wpilib").setLevel(logging.DEBUG)
                logging.getLogger("commands2").setLevel(logging.DEBUG)

    def robotPeriodic(self) -> None:
        """
        Periodic code for all modes should go here.

        All classes derived from 'Subsystem' will have their 'periodic' function
        called by the scheduler (run from our base class robotPeriodic). So only do
        non-Subsystem updates here.

        Default period is 20 mS.
        """
        LogTracer.resetOuter("RobotPeriodic")

        # Pull all CTRE status signals at once before the subsystems read them
        _status = Phoenix6Signals.refresh()
        LogTracer.record("PhoenixUpdate")

        super().robotPeriodic()
        LogTracer.record("Scheduler")

        LogTracer.recordTotal()
        self._counter += 1

    def _stop_subsystems(self) -> None:
        for subsystem in self.container.subsystems:
            if hasattr(subsystem, "stop") and callable(getattr(subsystem, "stop")):
                subsystem.stop()

    def disabledInit(self) -> None:
        """
        Initialization code for disabled mode should go here.

        Stop everything and leave the wheels in an X so the robot is hard to push.
        """
        logger.info("disabledInit: entry")
        super().disabledInit()

        self._stop_subsystems()
        self.container.robot_drive.set_x_formation()

    def autonomousInit(self) -> None:
        """
        Initialization code for autonomous mode should go here.
        """
        super().autonomousInit()
        logger.info("autonomousInit: entry")

        self.container.set_start_time()

    def teleopInit(self) -> None:
        """
        Initialization code for teleop mode should go here.

        Users should override this method for initialization code which will be
        called each time the robot enters teleop mode.
        """
        super().teleopInit()
        logger.debug("*** called teleopInit")

        self.container.set_start_time()
        CommandScheduler.getInstance().cancelAll()

    def teleopExit(self) -> None:
        """
        Exit code for teleop mode should go here.
        """
        super().teleopExit()
        logger.info(f"teleopExit: after {self.container.get_elapsed_time():.1f} seconds")
        self._stop_subsystems()

    def testInit(self) -> None:
        """
        Initialization code for test mode should go here.

        Test mode walks the arm through its preset positions. The test command
        takes the arm from its default (automatic) command while test mode runs.
        """
        super().testInit()
        logger.debug("*** called testInit")
        CommandScheduler.getInstance().cancelAll()

        arm = self.container.arm
        arm.arm_testing_init()

        self._test_command = RunCommand(arm.test_arm_position, arm)
        self._test_command.schedule()

    def testExit(self):
        """
        Exit code for test mode should go here.
        """
        super().testExit()
        logger.debug("*** called testExit")

        if self._test_command is not None:
            self._test_command.cancel()
            self._test_command = None

        self.container.arm.stop()
