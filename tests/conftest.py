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

import pytest
from wpilib.simulation import pauseTiming, restartTiming, resumeTiming, stepTiming


@pytest.fixture(autouse=True)
def robot_clock():
    """
    Robot time is frozen at zero for each test and only moves when the test
    calls 'stepTiming'. Anything rate limited on the robot clock then behaves
    the same on every run.
    """
    pauseTiming()
    restartTiming()
    yield stepTiming
    resumeTiming()
