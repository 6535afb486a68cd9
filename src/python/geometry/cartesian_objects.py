from __future__ import annotations

import dataclasses
import math
from typing import Tuple

from geometry import math_helpers


@dataclasses.dataclass(frozen=True)
class Twist2d:
    """A planar displacement along a constant curvature arc. dx and dy are in meters
    and dtheta in radians, all expressed in the frame of the pose the arc starts
    from.
    """

    dx: float
    dy: float
    dtheta: float

    def __post_init__(self) -> None:
        # Ensures that values are floats.
        object.__setattr__(self, "dx", float(self.dx))
        object.__setattr__(self, "dy", float(self.dy))
        object.__setattr__(self, "dtheta", float(self.dtheta))

    def __mul__(self, scalar: float) -> Twist2d:
        return Twist2d(self.dx * scalar, self.dy * scalar, self.dtheta * scalar)


@dataclasses.dataclass(frozen=True)
class Pose2d:
    """A pose on the field plane. Position in meters and heading in radians,
    counterclockwise positive. The heading is always stored wrapped to [-pi, pi).
    """

    x: float
    y: float
    heading: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        heading = float(self.heading)
        # NaN and inf propagate as is so callers can detect them with is_finite.
        if math.isfinite(heading) and not -math.pi <= heading < math.pi:
            heading = math_helpers.wrap_radians(heading)
        object.__setattr__(self, "heading", heading)

    @property
    def data(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.heading

    def is_finite(self) -> bool:
        return math_helpers.is_finite(*self.data)

    def distance(self, other: Pose2d) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def relative_to(self, other: Pose2d) -> Pose2d:
        """This pose expressed in the local frame of the other pose."""
        dx = self.x - other.x
        dy = self.y - other.y
        cos_val = math.cos(other.heading)
        sin_val = math.sin(other.heading)
        return Pose2d(
            cos_val * dx + sin_val * dy,
            -sin_val * dx + cos_val * dy,
            self.heading - other.heading,
        )

    def transform_by(self, local: Pose2d) -> Pose2d:
        """Applies a pose given in this pose's local frame, the inverse of
        relative_to.
        """
        cos_val = math.cos(self.heading)
        sin_val = math.sin(self.heading)
        return Pose2d(
            self.x + cos_val * local.x - sin_val * local.y,
            self.y + sin_val * local.x + cos_val * local.y,
            self.heading + local.heading,
        )

    def exp(self, twist: Twist2d) -> Pose2d:
        """The pose reached by travelling along the twist's arc from this pose."""
        arc_scale = math_helpers.sinc(twist.dtheta)
        lateral_scale = math_helpers.one_minus_cos_over(twist.dtheta)
        local = Pose2d(
            twist.dx * arc_scale - twist.dy * lateral_scale,
            twist.dx * lateral_scale + twist.dy * arc_scale,
            twist.dtheta,
        )
        return self.transform_by(local)

    def log(self, end: Pose2d) -> Twist2d:
        """The twist that takes this pose to the end pose along a single arc. Inverse
        of exp.
        """
        transform = end.relative_to(self)
        dtheta = transform.heading
        half_dtheta = 0.5 * dtheta
        scale = math_helpers.half_angle_cot(dtheta)
        return Twist2d(
            transform.x * scale + transform.y * half_dtheta,
            -transform.x * half_dtheta + transform.y * scale,
            dtheta,
        )

    def interpolate(self, end: Pose2d, fraction: float) -> Pose2d:
        """Interpolates towards the end pose along the constant curvature arc
        joining the two poses. Fractions outside [0, 1] are clipped.
        """
        fraction = math_helpers.clip(fraction, 0.0, 1.0)
        if fraction == 0.0:
            return self
        elif fraction == 1.0:
            return end

        return self.exp(self.log(end) * fraction)

    def is_close(
        self, other: Pose2d, *, atol: float = math_helpers.DEFAULT_ATOL
    ) -> bool:
        """Compares two poses and if they are relatively close to one another. The
        heading is compared across the wrap around.
        """
        heading_diff = math_helpers.wrap_radians(self.heading - other.heading)
        return (
            abs(self.x - other.x) < atol
            and abs(self.y - other.y) < atol
            and abs(heading_diff) < atol
        )

    @classmethod
    def zero(cls) -> Pose2d:
        return cls(0.0, 0.0, 0.0)
