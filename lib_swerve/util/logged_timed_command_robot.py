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

import hal
from commands2 import TimedCommandRobot
# pykit & AdvantageScope support
from pykit.logger import Logger
from wpilib import RobotController


class LoggedTimedCommandRobot(TimedCommandRobot):
    """
    Provides a wpilib TimedCommandRobot with pykit logging capabilities.

    pykit's own LoggedRobot is an IterativeRobotBase, so it loses the commands v2
    scheduler hook. This class wraps each loop iteration of the TimedCommandRobot
    with the pykit 'before user' and 'after user' calls instead.
    """
    default_period = 0.02  # seconds

    def __init__(self) -> None:
        super().__init__(period=self.default_period)

        self._periodic_before_start = 0
        self._user_code_start = 0

    def startCompetition(self) -> None:
        """
        Flush the logger once before the main loop starts so that any
        initialization time is accounted for, then run the normal loop.
        """
        Logger.periodicAfterUser(RobotController.getFPGATime(), 0)
        hal.observeUserProgramStarting()
        Logger.startReciever()

        super().startCompetition()

    def robotPeriodic(self) -> None:
        # Load inputs from the log or the sensors before any user code runs
        self._periodic_before_start = RobotController.getFPGATime()
        Logger.periodicBeforeUser()
        self._user_code_start = RobotController.getFPGATime()

        super().robotPeriodic()

    def _loopFunc(self) -> None:
        super()._loopFunc()

        # Save outputs to the log and record how long user code took
        user_code_end = RobotController.getFPGATime()
        Logger.periodicAfterUser(user_code_end - self._user_code_start,
                                 self._user_code_start - self._periodic_before_start)
