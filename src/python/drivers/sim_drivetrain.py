from typing import List, Optional

import geometry
from config import robot_config
from models import drive_kinematics, motor_feedforward
from models import primitives as model_primitives

from drivers import drivetrain, primitives


class SimDrivetrain(drivetrain.Drivetrain):
    """An ideal differential drive. Each side instantly reaches the speed its last
    command asks for, voltages are converted to speed through the steady state
    feedforward model. The pose is integrated along the resulting arc whenever the
    simulation is stepped.
    """

    def __init__(
        self,
        config: robot_config.RobotConfig,
        initial_pose: Optional[geometry.Pose2d] = None,
    ) -> None:
        self._config = config
        self._kinematics = drive_kinematics.DifferentialDriveKinematics(
            config.track_width
        )
        self._feedforward = motor_feedforward.SimpleMotorFeedforward(config.feedforward)
        self._pose = initial_pose or geometry.Pose2d.zero()
        self._wheel_speeds = model_primitives.WheelSpeeds(0.0, 0.0)
        self.commands: List[primitives.DriveCommand] = []

    @property
    def last_command(self) -> Optional[primitives.DriveCommand]:
        return self.commands[-1] if self.commands else None

    def get_pose(self) -> geometry.Pose2d:
        return self._pose

    def get_wheel_speeds(self) -> model_primitives.WheelSpeeds:
        return self._wheel_speeds

    def set_voltages(self, left: float, right: float) -> None:
        self.commands.append(primitives.VoltageCommand(left, right))
        self._wheel_speeds = model_primitives.WheelSpeeds(
            self._feedforward.velocity(left), self._feedforward.velocity(right)
        )

    def set_velocities(
        self,
        left: float,
        left_feedforward: float,
        right: float,
        right_feedforward: float,
        gain_profile: int,
    ) -> None:
        self.commands.append(
            primitives.VelocityCommand(
                left, left_feedforward, right, right_feedforward, gain_profile
            )
        )
        self._wheel_speeds = model_primitives.WheelSpeeds(left, right)

    def step(self, time_step: float) -> geometry.Pose2d:
        """Moves the robot for the time step (seconds) at the current wheel speeds."""
        speeds = self._kinematics.to_chassis_speeds(self._wheel_speeds)
        twist = geometry.Twist2d(
            speeds.linear * time_step, 0.0, speeds.angular * time_step
        )
        self._pose = self._pose.exp(twist)
        return self._pose
