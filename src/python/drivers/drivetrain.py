from typing import Optional

import geometry
from models import primitives as model_primitives

from drivers import primitives


class Drivetrain:
    """The drivetrain hardware a follower controls. Provides the pose estimate and wheel
    speeds and accepts drive commands. Implemented by the hardware or a simulation.
    """

    def get_pose(self) -> Optional[geometry.Pose2d]:
        """The latest pose estimate on the field, None while it is unavailable."""
        raise NotImplementedError

    def get_wheel_speeds(self) -> Optional[model_primitives.WheelSpeeds]:
        """The latest measured speed of each drive side, None while it is
        unavailable.
        """
        raise NotImplementedError

    def set_voltages(self, left: float, right: float) -> None:
        raise NotImplementedError

    def set_velocities(
        self,
        left: float,
        left_feedforward: float,
        right: float,
        right_feedforward: float,
        gain_profile: int,
    ) -> None:
        raise NotImplementedError

    def apply(self, command: primitives.DriveCommand) -> None:
        """Sends the command through the matching setter."""
        if isinstance(command, primitives.VoltageCommand):
            self.set_voltages(command.left, command.right)
        elif isinstance(command, primitives.VelocityCommand):
            self.set_velocities(*command.data, command.gain_profile)
        else:
            raise NotImplementedError(f"Command not implemented for {type(command)}")
