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
#
# See the documentation for more details on how this works
#
# Documentation can be found at https://robotpy.readthedocs.io/projects/pyfrc/en/latest/physics.html
#
# The idea here is you provide a simulation object that overrides specific
# pieces of WPILib, and modifies motors/sensors accordingly depending on the
# state of the simulation.
import inspect
import logging

from pyfrc.physics.core import PhysicsInterface
from wpilib.simulation import DIOSim

from robot import MyRobot
from robot_2023.subsystems.arm.constants import ArmConstants

logger = logging.getLogger(__name__)


class PhysicsEngine:
    """
    Simulates the swerve drive and the arm.

    The motors are ideal (see SimActuator), so the simulation only has to step
    them forward in time, turn the gyro by the rotation the wheels produce and
    close the arm limit switches when the arm reaches home.
    """
    def __init__(self, physics_controller: PhysicsInterface, robot: "MyRobot"):
        """
        Initialize the simulator.  This method is called after the container and all
        subsystems have been initialized.

        :param physics_controller: `pyfrc.physics.core.Physics` object
                                   to communicate simulation effects to
        :param robot: your robot object
        """
        logger.info("PhysicsEngine.__init__: entry")

        self._physics_controller = physics_controller
        self._robot: MyRobot = robot

        self._limit_switches = [DIOSim(switch) for switch in robot.container.arm_limit_switches]
        self.field = physics_controller.field

        logger.info("PhysicsEngine.__init__: exit")

    def update_sim(self, now: float, tm_diff: float) -> None:
        """
        Called when the simulation parameters for the program need to be
        updated.

        :param now:     The current time as a float
        :param tm_diff: The amount of time that has passed since the last
                        time that this function was called
        """
        kwargs = {
            "now": now,
            "tm_diff": tm_diff,
        }
        total_amps_used: float = 0.0
        container = self._robot.container

        if self._robot.isEnabled():
            for subsystem in container.subsystems:
                if hasattr(subsystem, "simulationPeriodic") and callable(getattr(subsystem,
                                                                                 "simulationPeriodic")):
                    signature = inspect.signature(subsystem.simulationPeriodic)
                    parameters = signature.parameters

                    if inspect.Parameter.VAR_KEYWORD in [p.kind for p in parameters.values()]:
                        total_amps_used += subsystem.simulationPeriodic(**kwargs)

            logger.debug(f"update_sim: {total_amps_used:.1f} A drawn")

        # Switches are active low, both close once the arm is at (or past) home
        at_home = container.arm.position <= ArmConstants.HOME_POSITION
        for switch in self._limit_switches:
            switch.setValue(not at_home)

        self.field.setRobotPose(container.robot_drive.get_pose())
