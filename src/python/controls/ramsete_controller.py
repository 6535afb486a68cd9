import math
from typing import Optional

import geometry
from config import robot_config
from models import primitives
from planning import trajectory

# Default pose error accepted as being on the reference, 5 cm and ~3 degrees.
_DEFAULT_TOLERANCE = geometry.Pose2d(0.05, 0.05, 0.05)


class RamseteController:
    """Nonlinear time varying feedback law for tracking a reference trajectory with a
    unicycle like robot. Takes the current pose and the reference state and outputs
    the chassis speeds that drive the pose error to zero.

    The gains are
        k = 2 * zeta * sqrt(w_ref^2 + b * v_ref^2)
    and the corrected speeds
        v = v_ref * cos(e_theta) + k * e_x
        w = w_ref + k * e_theta + b * v_ref * sinc(e_theta) * e_y
    where (e_x, e_y, e_theta) is the reference pose in the robot's frame. Converges
    for feasible references and small initial errors.

    Reference: https://file.tavsys.net/control/controls-engineering-in-frc.pdf
    section 8.9.
    """

    def __init__(
        self,
        gains: robot_config.RamseteGains,
        *,
        tolerance: geometry.Pose2d = _DEFAULT_TOLERANCE,
        enabled: bool = True,
    ) -> None:
        self._b = gains.b
        self._zeta = gains.zeta
        self._tolerance = tolerance
        self._enabled = enabled
        self._pose_error: Optional[geometry.Pose2d] = None

    @property
    def pose_error(self) -> Optional[geometry.Pose2d]:
        """The reference pose in the robot frame from the last calculation."""
        return self._pose_error

    def set_enabled(self, enabled: bool) -> None:
        """A disabled controller passes the reference speeds through unchanged, useful
        to tune the feedforward on its own.
        """
        self._enabled = enabled

    def at_reference(self) -> bool:
        """Whether the last calculated pose error is within the tolerance."""
        if self._pose_error is None:
            return False

        return (
            abs(self._pose_error.x) < self._tolerance.x
            and abs(self._pose_error.y) < self._tolerance.y
            and abs(self._pose_error.heading) < self._tolerance.heading
        )

    def calculate(
        self, current_pose: geometry.Pose2d, reference: trajectory.TrajectoryState
    ) -> primitives.ChassisSpeeds:
        ref_linear = reference.velocity
        ref_angular = reference.angular_velocity
        self._pose_error = reference.pose.relative_to(current_pose)

        if not self._enabled:
            return primitives.ChassisSpeeds(ref_linear, ref_angular)

        e_x, e_y, e_theta = self._pose_error.data
        # Zero on a stationary reference so the output cannot chatter at rest.
        gain = 2.0 * self._zeta * math.sqrt(ref_angular**2 + self._b * ref_linear**2)

        linear = ref_linear * math.cos(e_theta) + gain * e_x
        angular = (
            ref_angular
            + gain * e_theta
            + self._b * ref_linear * geometry.sinc(e_theta) * e_y
        )
        return primitives.ChassisSpeeds(linear, angular)
