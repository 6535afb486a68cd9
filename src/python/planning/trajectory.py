from __future__ import annotations

import json
import pathlib
from typing import Any, Dict, Iterable, List, Sequence, Tuple

import geometry
import numpy as np
import pydantic


class TrajectoryState(pydantic.BaseModel):
    """The reference state of the robot at a point in time along a trajectory."""

    model_config = pydantic.ConfigDict(frozen=True)

    # Seconds since the start of the trajectory.
    time: float = pydantic.Field(ge=0.0, allow_inf_nan=False)
    pose: geometry.Pose2d
    # Linear velocity along the path in m/s, negative when driving backwards.
    velocity: float = pydantic.Field(allow_inf_nan=False)
    # Linear acceleration in m/s^2.
    acceleration: float = pydantic.Field(default=0.0, allow_inf_nan=False)
    # Inverse of the turn radius in 1/m, positive when turning counterclockwise.
    curvature: float = pydantic.Field(default=0.0, allow_inf_nan=False)

    @pydantic.field_validator("pose")
    @classmethod
    def _check_pose_finite(cls, pose: geometry.Pose2d) -> geometry.Pose2d:
        if not pose.is_finite():
            raise ValueError(f"Trajectory pose must be finite, got {pose=}")

        return pose

    @property
    def angular_velocity(self) -> float:
        """Reference angular velocity in rad/s."""
        return self.velocity * self.curvature

    def interpolate(self, end: TrajectoryState, fraction: float) -> TrajectoryState:
        """The state between this and the end state. Scalars are interpolated linearly
        and the pose along the arc joining both poses.
        """
        fraction = geometry.clip(fraction, 0.0, 1.0)
        return TrajectoryState(
            time=geometry.lerp(self.time, end.time, fraction),
            pose=self.pose.interpolate(end.pose, fraction),
            velocity=geometry.lerp(self.velocity, end.velocity, fraction),
            acceleration=geometry.lerp(self.acceleration, end.acceleration, fraction),
            curvature=geometry.lerp(self.curvature, end.curvature, fraction),
        )

    @classmethod
    def from_dict(cls, state: Dict[str, Any]) -> TrajectoryState:
        """Parses a state in the common planner json layout, where the pose is a nested
        translation and rotation.
        """
        pose = state["pose"]
        return cls(
            time=state["time"],
            pose=geometry.Pose2d(
                pose["translation"]["x"],
                pose["translation"]["y"],
                pose["rotation"]["radians"],
            ),
            velocity=state["velocity"],
            acceleration=state.get("acceleration", 0.0),
            curvature=state.get("curvature", 0.0),
        )


class Trajectory:
    """An immutable, time ordered sequence of reference states. Sampling between states
    interpolates, sampling outside of the trajectory clamps to its ends.
    """

    def __init__(self, states: Sequence[TrajectoryState]) -> None:
        if not states:
            raise ValueError("A trajectory requires at least one state.")

        self._states: Tuple[TrajectoryState, ...] = tuple(states)
        self._times = np.array([state.time for state in self._states], dtype=np.float64)
        if np.any(np.diff(self._times) < 0.0):
            raise ValueError("Trajectory state times must be non-decreasing.")

    @property
    def states(self) -> Tuple[TrajectoryState, ...]:
        return self._states

    @property
    def total_time(self) -> float:
        """Duration of the trajectory in seconds."""
        return self._states[-1].time

    @property
    def initial_pose(self) -> geometry.Pose2d:
        return self._states[0].pose

    def sample(self, time: float) -> TrajectoryState:
        """The reference state at the time (seconds) since the trajectory started."""
        if time <= self._states[0].time:
            return self._states[0]
        if time >= self.total_time:
            return self._states[-1]

        # Index of the first state strictly after the time, so the previous state is
        # at or before it. Repeated timestamps resolve to the latest of them.
        ix = int(np.searchsorted(self._times, time, side="right"))
        previous_state = self._states[ix - 1]
        next_state = self._states[ix]
        fraction = (time - previous_state.time) / (
            next_state.time - previous_state.time
        )
        return previous_state.interpolate(next_state, fraction)

    def __len__(self) -> int:
        return len(self._states)

    @classmethod
    def from_states(cls, states: Iterable[TrajectoryState]) -> Trajectory:
        return cls(list(states))

    @classmethod
    def from_json(cls, file_path: pathlib.Path) -> Trajectory:
        """Loads a trajectory saved as a json list of states."""
        if not file_path.exists():
            raise ValueError(f"File path does not exist. {file_path}")

        with open(file_path, "r") as f:
            raw_states: List[Dict[str, Any]] = json.load(f)

        return cls([TrajectoryState.from_dict(state) for state in raw_states])
