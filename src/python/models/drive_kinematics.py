from models import primitives


class DifferentialDriveKinematics:
    """Converts between the robot's chassis speeds and the linear speed of each side of
    a differential drive. The left side slows and the right side speeds up for a
    positive (counterclockwise) angular speed.
    """

    def __init__(self, track_width: float) -> None:
        if track_width <= 0.0:
            raise ValueError(f"Track width must be positive, got {track_width=}")

        self._half_track_width = track_width / 2
        self._track_width = track_width

    @property
    def track_width(self) -> float:
        return self._track_width

    def to_wheel_speeds(
        self, speeds: primitives.ChassisSpeeds
    ) -> primitives.WheelSpeeds:
        """The side speeds (m/s) that achieve the chassis speeds."""
        tangential_speed = speeds.angular * self._half_track_width
        return primitives.WheelSpeeds(
            speeds.linear - tangential_speed, speeds.linear + tangential_speed
        )

    def to_chassis_speeds(
        self, wheel_speeds: primitives.WheelSpeeds
    ) -> primitives.ChassisSpeeds:
        """The chassis speeds produced by the side speeds, assuming no wheel slip."""
        linear = (wheel_speeds.left + wheel_speeds.right) / 2
        angular = (wheel_speeds.right - wheel_speeds.left) / self._track_width
        return primitives.ChassisSpeeds(linear, angular)
