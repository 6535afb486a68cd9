from __future__ import annotations

import enum
import json
import pathlib
from typing import Optional

import pydantic


class FeedforwardGains(pydantic.BaseModel):
    """Gains of the linear motor model V = ks * sign(v) + kv * v + ka * a for one
    drive side, typically found with a characterization routine.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    # Volts needed to overcome static friction.
    ks: float = pydantic.Field(ge=0.0)
    # Volts per m/s.
    kv: float = pydantic.Field(ge=0.0)
    # Volts per m/s^2.
    ka: float = pydantic.Field(default=0.0, ge=0.0)


class PIDGains(pydantic.BaseModel):
    """Gains of a wheel speed PID controller. Error in m/s, output in volts."""

    model_config = pydantic.ConfigDict(frozen=True)

    p: float = pydantic.Field(default=0.0, ge=0.0)
    i: float = pydantic.Field(default=0.0, ge=0.0)
    d: float = pydantic.Field(default=0.0, ge=0.0)


class RamseteGains(pydantic.BaseModel):
    """Tuning constants of the nonlinear tracking law. There is no universally right
    value for either so both must be given explicitly.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    # Larger values make convergence more aggressive, like a proportional term.
    b: float = pydantic.Field(gt=0.0)
    # Damping ratio, larger values give more damping.
    zeta: float = pydantic.Field(gt=0.0, lt=1.0)


# Str inheritance required so pydantic treats this as a string when
# serializing base model objects.
class DriveMode(str, enum.Enum):
    """How the follower commands the drivetrain."""

    # Feedforward plus software PID, sent to the drivetrain as raw voltages.
    VOLTAGE = "VOLTAGE"
    # Speed setpoint plus feedforward, with the PID loop closed on the motor
    # controller itself.
    VELOCITY = "VELOCITY"


class RobotConfig(pydantic.BaseModel):
    """The physical constants and gains of a differential drive robot needed to
    follow a trajectory.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    # Distance between the left and right wheel contact patches, in meters.
    track_width: float = pydantic.Field(gt=0.0)
    feedforward: FeedforwardGains
    ramsete: RamseteGains
    mode: DriveMode = DriveMode.VOLTAGE
    # Only needed in voltage mode.
    left_pid: Optional[PIDGains] = None
    right_pid: Optional[PIDGains] = None
    # Gain slot on the motor controllers to use in velocity mode.
    gain_profile: int = pydantic.Field(default=0, ge=0)
    # Battery voltage the drive output saturates at.
    max_voltage: float = pydantic.Field(default=12.0, gt=0.0)

    @pydantic.model_validator(mode="after")
    def _check_pid_gains(self) -> RobotConfig:
        if self.mode == DriveMode.VOLTAGE and (
            self.left_pid is None or self.right_pid is None
        ):
            raise ValueError(
                "Both left_pid and right_pid are required in voltage mode."
            )

        return self

    @classmethod
    def from_json(cls, file_path: pathlib.Path) -> RobotConfig:
        if not file_path.exists():
            raise ValueError(f"File path does not exist. {file_path}")

        with open(file_path, "r") as f:
            config_dict = json.load(f)

        return cls.model_validate(config_dict)
