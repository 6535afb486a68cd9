from typing import Dict, Optional

import geometry
import log

from telemetry import messages


class Dashboard:
    """Publishes the follower state outward. Only the latest message of each channel is
    kept, every published message is also recorded to the data log.
    """

    def __init__(self, *, record: bool = True) -> None:
        self._record = record
        self._latest: Dict[messages.Channel, messages.BaseMessage] = {}

    def publish(self, channel: messages.Channel, msg: messages.BaseMessage) -> None:
        stamped_msg = msg.stamped()
        self._latest[channel] = stamped_msg
        if self._record:
            log.data(channel=channel.value, **stamped_msg.model_dump())

    def latest(self, channel: messages.Channel) -> Optional[messages.BaseMessage]:
        """The last message published on the channel, None if nothing was sent."""
        return self._latest.get(channel)

    @property
    def is_following(self) -> bool:
        msg = self.latest(messages.Channel.FOLLOWING_PATH)
        return isinstance(msg, messages.FollowingPathMessage) and msg.following

    def set_following_path(self, following: bool) -> None:
        self.publish(
            messages.Channel.FOLLOWING_PATH,
            messages.FollowingPathMessage(following=following),
        )

    def put_robot_pose(self, pose: geometry.Pose2d) -> None:
        self.publish(messages.Channel.ROBOT_POSE, messages.PoseMessage.from_pose(pose))

    def put_trajectory_pose(self, pose: geometry.Pose2d) -> None:
        self.publish(
            messages.Channel.TRAJECTORY_POSE, messages.PoseMessage.from_pose(pose)
        )

    def flag_sensor_fault(self, reason: str) -> None:
        self.publish(
            messages.Channel.SENSOR_FAULT, messages.SensorFaultMessage(reason=reason)
        )
