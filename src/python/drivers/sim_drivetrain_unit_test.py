import math

import geometry
import pytest
from config import robot_config
from models import primitives as model_primitives

from drivers import primitives, sim_drivetrain

_CONFIG = robot_config.RobotConfig(
    track_width=0.5,
    feedforward=robot_config.FeedforwardGains(ks=0.5, kv=2.0),
    ramsete=robot_config.RamseteGains(b=2.0, zeta=0.7),
    mode=robot_config.DriveMode.VELOCITY,
)


@pytest.fixture
def drivetrain() -> sim_drivetrain.SimDrivetrain:
    return sim_drivetrain.SimDrivetrain(_CONFIG)


def test_starts_at_rest(drivetrain: sim_drivetrain.SimDrivetrain) -> None:
    assert drivetrain.get_pose() == geometry.Pose2d.zero()
    assert drivetrain.get_wheel_speeds() == model_primitives.WheelSpeeds(0.0, 0.0)
    assert drivetrain.last_command is None
    assert drivetrain.step(1.0) == geometry.Pose2d.zero()


def test_voltages_drive_through_feedforward(
    drivetrain: sim_drivetrain.SimDrivetrain,
) -> None:
    drivetrain.apply(primitives.VoltageCommand(2.5, -0.25))
    # Right side is within static friction.
    assert drivetrain.get_wheel_speeds().data == pytest.approx((1.0, 0.0))
    assert drivetrain.last_command == primitives.VoltageCommand(2.5, -0.25)


def test_drives_straight(drivetrain: sim_drivetrain.SimDrivetrain) -> None:
    drivetrain.apply(primitives.VelocityCommand(1.0, 0.0, 1.0, 0.0, 0))
    for _ in range(10):
        drivetrain.step(0.1)
    pose = drivetrain.get_pose()
    assert pose.x == pytest.approx(1.0)
    assert pose.y == pytest.approx(0.0)
    assert pose.heading == pytest.approx(0.0)


def test_drives_arc(drivetrain: sim_drivetrain.SimDrivetrain) -> None:
    # 1 m/s on a 1 m radius turning left.
    drivetrain.set_velocities(0.75, 0.0, 1.25, 0.0, 0)
    pose = drivetrain.step(math.pi / 2)
    assert pose.x == pytest.approx(1.0)
    assert pose.y == pytest.approx(1.0)
    assert pose.heading == pytest.approx(math.pi / 2)
    assert len(drivetrain.commands) == 1
