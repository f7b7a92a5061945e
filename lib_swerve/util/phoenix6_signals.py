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
from typing import Set

from phoenix6 import StatusSignal, StatusCode

logger = logging.getLogger(__name__)


class Phoenix6Signals:
    """
    Batches the refresh of all registered CTRE status signals into a single
    call made once per robot cycle.
    """
    _signals: Set[StatusSignal] = set()

    @classmethod
    def register_signal(cls, signal: StatusSignal) -> None:
        if signal not in cls._signals:
            cls._signals.add(signal)
        else:
            logger.warning(f"Signal {signal.name} already registered")

    @classmethod
    def register_signals(cls, *signals: StatusSignal) -> None:
        for signal in signals:
            cls.register_signal(signal)

    @classmethod
    def refresh(cls) -> StatusCode:
        """
        In robot.robotPeriodic, call this to request all status to be updated at once
        """
        if not cls._signals:
            return StatusCode.OK

        return StatusSignal.refresh_all(*cls._signals)
