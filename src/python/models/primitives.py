from __future__ import annotations

import dataclasses
from typing import Tuple

from geometry import math_helpers


@dataclasses.dataclass(frozen=True)
class WheelSpeeds:
    """The linear speed of each side of a differential drive in m/s. Positive drives
    the robot forward.
    """

    left: float
    right: float

    @property
    def data(self) -> Tuple[float, float]:
        return self.left, self.right

    def is_finite(self) -> bool:
        return math_helpers.is_finite(*self.data)


@dataclasses.dataclass(frozen=True)
class ChassisSpeeds:
    """The velocity of the robot in its own frame. Linear speed along the robot's
    x-axis in m/s and angular speed about the vertical axis in rad/s, counterclockwise
    positive.
    """

    linear: float
    angular: float

    @property
    def data(self) -> Tuple[float, float]:
        return self.linear, self.angular

    @classmethod
    def from_curvature(cls, linear: float, curvature: float) -> ChassisSpeeds:
        """Speeds for travelling along an arc of the given curvature (1/m) at the
        linear speed.
        """
        return cls(linear, linear * curvature)
