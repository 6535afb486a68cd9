from __future__ import annotations

import dataclasses
import enum
from typing import Optional, Tuple

import geometry
import log
from config import robot_config
from drivers import drivetrain as drivetrain_base
from drivers import primitives as driver_primitives
from models import drive_kinematics
from models import primitives as model_primitives
from planning import trajectory
from telemetry import dashboard as telemetry_dashboard

from controls import drive_outputs, ramsete_controller, timer


class FollowerStateError(RuntimeError):
    """A lifecycle method was called in a state that does not allow it."""


class FollowerStatus(enum.Enum):
    IDLE = "IDLE"
    RUNNING = "RUNNING"
    FINISHED = "FINISHED"


@dataclasses.dataclass(frozen=True)
class ControllerState:
    """What a tick carries over to the next one."""

    # The wheel speed targets of the previous tick, used for the feedforward
    # acceleration.
    previous_wheel_speeds: model_primitives.WheelSpeeds
    # Elapsed seconds at the previous tick.
    previous_time: float


class TrajectoryFollower:
    """Follows a trajectory with a differential drive. Each tick samples the reference
    at the elapsed time, corrects it with a Ramsete controller against the current
    pose and commands the drivetrain through the configured drive output.

    Meant to be driven by a periodic scheduler: start(), then tick() every period
    until is_finished(), then stop(). The drivetrain is not commanded to zero on
    completion since paths can end while moving, stopping is left to the caller.
    """

    def __init__(
        self,
        path: trajectory.Trajectory,
        drivetrain: drivetrain_base.Drivetrain,
        config: robot_config.RobotConfig,
        dashboard: Optional[telemetry_dashboard.Dashboard] = None,
    ) -> None:
        if path is None:
            raise ValueError("A trajectory is required to follow.")

        self._trajectory = path
        self._drivetrain = drivetrain
        self._dashboard = dashboard or telemetry_dashboard.Dashboard()
        self._kinematics = drive_kinematics.DifferentialDriveKinematics(
            config.track_width
        )
        self._controller = ramsete_controller.RamseteController(config.ramsete)
        self._output = drive_outputs.from_config(config)
        self._timer = timer.Timer()

        self._status = FollowerStatus.IDLE
        self._state: Optional[ControllerState] = None
        self._last_command: Optional[driver_primitives.DriveCommand] = None

    @property
    def status(self) -> FollowerStatus:
        return self._status

    @property
    def controller_state(self) -> Optional[ControllerState]:
        return self._state

    @property
    def last_command(self) -> Optional[driver_primitives.DriveCommand]:
        """The last command sent to the drivetrain, None before the first one."""
        return self._last_command

    @property
    def drivetrain(self) -> drivetrain_base.Drivetrain:
        return self._drivetrain

    @property
    def dashboard(self) -> telemetry_dashboard.Dashboard:
        return self._dashboard

    @property
    def controller(self) -> ramsete_controller.RamseteController:
        return self._controller

    def start(self) -> None:
        """Starts following. Nothing is committed until the drivetrain was read, so a
        failed start leaves the follower idle.
        """
        if self._status != FollowerStatus.IDLE:
            raise FollowerStateError(
                f"Cannot start a follower that is {self._status.value}, "
                "create a new one."
            )

        initial_state = self._trajectory.sample(0.0)
        initial_speeds = model_primitives.ChassisSpeeds.from_curvature(
            initial_state.velocity, initial_state.curvature
        )
        pose = self._drivetrain.get_pose()

        self._state = ControllerState(
            previous_wheel_speeds=self._kinematics.to_wheel_speeds(initial_speeds),
            previous_time=0.0,
        )
        self._timer.reset()
        self._timer.start()
        self._output.reset()
        self._status = FollowerStatus.RUNNING

        log.info(f"Following trajectory of {self._trajectory.total_time:.3f}s.")
        self._dashboard.set_following_path(True)
        if pose is not None:
            self._dashboard.put_robot_pose(pose)
        self._dashboard.put_trajectory_pose(self._trajectory.initial_pose)

    def tick(self) -> Optional[driver_primitives.DriveCommand]:
        """Runs one control step. Returns the command sent to the drivetrain, None if
        the tick was skipped due to unusable sensor input.
        """
        if self._status != FollowerStatus.RUNNING or self._state is None:
            raise FollowerStateError(
                f"Cannot tick a follower that is {self._status.value}."
            )

        cur_time = self._timer.get()
        reference = self._trajectory.sample(cur_time)
        pose = self._drivetrain.get_pose()
        if pose is None or not pose.is_finite():
            self._skip_tick(f"pose is unavailable, {pose=}", reference)
            return None

        measured: Optional[model_primitives.WheelSpeeds] = None
        if self._output.uses_wheel_speeds:
            measured = self._drivetrain.get_wheel_speeds()
            if measured is None or not measured.is_finite():
                self._skip_tick(
                    f"wheel speeds are unavailable, {measured=}", reference
                )
                return None

        self._state, command = self._step(
            self._state, cur_time, pose, reference, measured
        )
        self._drivetrain.apply(command)
        self._last_command = command

        self._dashboard.put_robot_pose(pose)
        self._dashboard.put_trajectory_pose(reference.pose)
        return command

    def is_finished(self) -> bool:
        """True once the whole trajectory duration has elapsed, or the follower was
        stopped.
        """
        if self._status == FollowerStatus.FINISHED:
            return True

        return self._status == FollowerStatus.RUNNING and self._timer.has_elapsed(
            self._trajectory.total_time
        )

    def stop(self, interrupted: bool = False) -> None:
        """Ends following. Safe to call more than once and from any state."""
        if self._status == FollowerStatus.FINISHED:
            return

        self._timer.stop()
        self._status = FollowerStatus.FINISHED
        log.info(
            f"Stopped following after {self._timer.get():.3f}s of "
            f"{self._trajectory.total_time:.3f}s, {interrupted=}"
        )
        self._dashboard.set_following_path(False)

    def _step(
        self,
        state: ControllerState,
        cur_time: float,
        pose: geometry.Pose2d,
        reference: trajectory.TrajectoryState,
        measured: Optional[model_primitives.WheelSpeeds],
    ) -> Tuple[ControllerState, driver_primitives.DriveCommand]:
        time_step = cur_time - state.previous_time
        target_speeds = self._controller.calculate(pose, reference)
        target_wheel_speeds = self._kinematics.to_wheel_speeds(target_speeds)
        command = self._output.command(
            target_wheel_speeds, state.previous_wheel_speeds, time_step, measured
        )
        return ControllerState(target_wheel_speeds, cur_time), command

    def _skip_tick(self, reason: str, reference: trajectory.TrajectoryState) -> None:
        """No command is sent so the drivetrain keeps its last one rather than acting
        on bad input. The controller state is kept so the next good tick spans the gap.
        """
        log.error(f"Skipping follower tick, {reason}")
        self._dashboard.flag_sensor_fault(reason)
        self._dashboard.put_trajectory_pose(reference.pose)
