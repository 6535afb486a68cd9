from __future__ import annotations

import enum
import time
from typing import Optional

import geometry
import pydantic


class Channel(str, enum.Enum):
    """Dashboard channels the follower publishes to."""

    ROBOT_POSE = "ROBOT_POSE"
    TRAJECTORY_POSE = "TRAJECTORY_POSE"
    FOLLOWING_PATH = "FOLLOWING_PATH"
    SENSOR_FAULT = "SENSOR_FAULT"


class BaseMessage(pydantic.BaseModel):
    """The base class for all messages sent to the dashboard."""

    creation: Optional[float] = None

    def stamped(self) -> BaseMessage:
        """A copy of the message stamped with the current time."""
        return self.model_copy(update={"creation": time.perf_counter()})


class PoseMessage(BaseMessage):
    """A pose on the field, heading in radians."""

    x: float
    y: float
    heading: float

    @classmethod
    def from_pose(cls, pose: geometry.Pose2d) -> PoseMessage:
        return cls(x=pose.x, y=pose.y, heading=pose.heading)


class FollowingPathMessage(BaseMessage):
    """Whether a trajectory is currently being followed."""

    following: bool


class SensorFaultMessage(BaseMessage):
    """A tick was skipped because its sensor input was unusable."""

    reason: str
