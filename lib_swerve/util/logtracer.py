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

from pykit.logger import Logger
from wpilib import RobotController


class LogTracer:
    """
    Times the steps of a block of periodic code and records each step, and the
    block as a whole, to pykit in milliseconds.

    Call 'resetOuter' with a prefix at the top of the block, 'record' after each
    step of interest and 'recordTotal' at the bottom.
    """
    _prefix: str = ""
    _outer_start: int = 0   # microseconds
    _inner_start: int = 0

    @classmethod
    def resetOuter(cls, prefix: str) -> None:
        cls._prefix = prefix
        cls._outer_start = cls._inner_start = RobotController.getFPGATime()

    @classmethod
    def record(cls, action: str) -> None:
        now = RobotController.getFPGATime()
        Logger.recordOutput(f"LogTracer/{cls._prefix}/{action}MS", (now - cls._inner_start) / 1000.0)
        cls._inner_start = now

    @classmethod
    def recordTotal(cls) -> None:
        now = RobotController.getFPGATime()
        Logger.recordOutput(f"LogTracer/{cls._prefix}/TotalMS", (now - cls._outer_start) / 1000.0)
