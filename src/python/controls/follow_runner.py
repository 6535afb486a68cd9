from typing import Callable, Literal, Optional

import geometry
import log
import looped_function
from config import robot_config
from drivers import sim_drivetrain
from planning import trajectory

from controls import trajectory_follower

# Rate to run the follower at in Hz.
DEFAULT_CONTROL_RATE = 50


async def follow(
    follower: trajectory_follower.TrajectoryFollower,
    frequency: float = DEFAULT_CONTROL_RATE,
    *,
    after_tick: Optional[Callable[[], None]] = None,
) -> bool:
    """Runs the follower to completion at the frequency. Returns True when the whole
    trajectory was followed. The follower is always stopped, including when this task
    is cancelled or a tick raises. A start that raises commits nothing, so there is
    no run to stop.
    """
    interrupted = True

    def _run_tick() -> Optional[Literal[True]]:
        follower.tick()
        if after_tick is not None:
            after_tick()

        return True if follower.is_finished() else None

    follower.start()
    try:
        await looped_function.loop_function(_run_tick, frequency)
        interrupted = False
    finally:
        follower.stop(interrupted=interrupted)

    return not interrupted


async def simulate(
    path: trajectory.Trajectory,
    config: robot_config.RobotConfig,
    frequency: float = DEFAULT_CONTROL_RATE,
    *,
    initial_pose: Optional[geometry.Pose2d] = None,
) -> geometry.Pose2d:
    """Follows the trajectory in real time with a simulated drivetrain starting at the
    initial pose, the trajectory's start by default. Returns the final pose error in
    the robot frame.
    """
    drivetrain = sim_drivetrain.SimDrivetrain(
        config, initial_pose or path.initial_pose
    )
    follower = trajectory_follower.TrajectoryFollower(path, drivetrain, config)
    await follow(
        follower, frequency, after_tick=lambda: drivetrain.step(1 / frequency)
    )

    final_error = path.states[-1].pose.relative_to(drivetrain.get_pose())
    log.info(f"Simulated trajectory finished with {final_error=}")
    return final_error
